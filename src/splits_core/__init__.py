"""Core domain vocabulary for the split-fee payout calculator."""
