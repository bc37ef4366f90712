"""Domain models for the split-fee payout calculator."""

from splits_core.models.payout import (
    CalculatorInput,
    PayoutBreakdown,
    RoleSplit,
    TierPayout,
    UpgradeValue,
)
from splits_core.models.roles import RecruiterRole, RoleMeta, Tier, TierInfo

__all__ = [
    "CalculatorInput",
    "PayoutBreakdown",
    "RecruiterRole",
    "RoleMeta",
    "RoleSplit",
    "Tier",
    "TierInfo",
    "TierPayout",
    "UpgradeValue",
]
