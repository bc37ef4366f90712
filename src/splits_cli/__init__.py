"""Command-line front end for the split-fee payout calculator."""
