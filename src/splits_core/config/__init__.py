"""Configuration for the split-fee payout calculator."""

from splits_core.config.settings import Settings

__all__ = ["Settings"]
