"""Payout engine for the split-fee calculator."""

from splits_engine.payouts import (
    PayoutCalculator,
    compute_payouts,
    effective_fee,
    payout_for_tier,
    tier_payouts,
    upgrade_value,
)

__all__ = [
    "PayoutCalculator",
    "compute_payouts",
    "effective_fee",
    "payout_for_tier",
    "tier_payouts",
    "upgrade_value",
]
