"""Calculator input and payout result models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from splits_core.models.roles import RecruiterRole, Tier


class CalculatorInput(BaseModel):
    """Request-supplied inputs for a stateless payout computation.

    Numbers are stored as given; range handling (clamp or reject) is left
    to the engine. Role values outside RecruiterRole fail validation.
    """

    model_config = ConfigDict(allow_inf_nan=False)

    salary: float = Field(description="Annual salary")
    fee_percentage: float = Field(description="Placement fee as a percentage of salary")
    selected_roles: frozenset[RecruiterRole] = Field(
        description="Roles the recruiter holds on the placement"
    )

    @field_validator("selected_roles", mode="before")
    @classmethod
    def normalize_roles(cls, value: object) -> object:
        """Accept a single role string and lowercase role strings."""
        if isinstance(value, str):
            value = [value]
        if isinstance(value, list | tuple | set | frozenset):
            return [v.strip().lower() if isinstance(v, str) else v for v in value]
        return value


class RoleSplit(BaseModel):
    """Share of the placement fee attributed to one role."""

    role: RecruiterRole = Field(description="Recruiter role")
    label: str = Field(description="Role display label")
    rate: float = Field(ge=0.0, le=1.0, description="Fraction of the placement fee")
    amount: float = Field(description="Fee amount attributed to this role")


class TierPayout(BaseModel):
    """Payout projection for one subscription tier."""

    tier: Tier = Field(description="Subscription tier")
    tier_name: str = Field(description="Tier display name")
    monthly_price: int = Field(description="Tier monthly price")
    payout: float = Field(description="Recruiter payout for the selected roles")
    platform_take: float = Field(description="Amount retained by the platform")
    effective_rate: float = Field(
        default=0.0, description="Payout as a percentage of the placement fee"
    )
    splits: list[RoleSplit] = Field(
        default_factory=list, description="Per-role breakdown of the payout"
    )


class UpgradeValue(BaseModel):
    """Payout difference gained by moving up a tier."""

    paid_vs_free: float = Field(description="Pro payout minus Starter payout")
    premium_vs_free: float = Field(description="Partner payout minus Starter payout")
    premium_vs_paid: float = Field(description="Partner payout minus Pro payout")


class PayoutBreakdown(BaseModel):
    """Full result of a payout computation."""

    salary: float = Field(description="Salary used, after range handling")
    fee_percentage: float = Field(description="Fee percentage used, after range handling")
    selected_roles: list[RecruiterRole] = Field(description="Roles used, in enum order")
    effective_fee: float = Field(description="Placement fee (salary x fee percentage)")
    payouts: list[TierPayout] = Field(
        min_length=3, max_length=3, description="Payouts for free, paid and premium tiers"
    )
    upgrade_value: UpgradeValue = Field(description="Upgrade deltas between tiers")
    upgrade_cost_recovery: float = Field(
        default=0.0,
        description="Partner upgrade gain as a percentage of the Partner monthly price",
    )

    def payout_for(self, tier: Tier) -> TierPayout:
        """Return the projection for a tier."""
        for payout in self.payouts:
            if payout.tier == tier:
                return payout
        msg = f"No payout for tier '{tier}'"
        raise KeyError(msg)
