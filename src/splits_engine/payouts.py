"""Payout engine: placement fee, per-tier payouts and upgrade deltas.

All functions are pure and recompute from scratch. They accept anything
satisfying PayoutInputs (a CalculatorState or a CalculatorInput) and return
raw, unrounded currency amounts; formatting is left to callers.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping

import structlog

from splits_core.constants import (
    COMMISSION_RATES,
    MAX_FEE_PERCENTAGE,
    PLATFORM_TAKE,
    ROLE_META,
    TIER_INFO,
    TIER_ORDER,
)
from splits_core.exceptions import InputOutOfRangeError
from splits_core.interfaces import PayoutInputs
from splits_core.models.payout import (
    CalculatorInput,
    PayoutBreakdown,
    RoleSplit,
    TierPayout,
    UpgradeValue,
)
from splits_core.models.roles import RecruiterRole, Tier
from splits_core.state import CalculatorState

logger = structlog.get_logger()

RateTable = Mapping[Tier, Mapping[RecruiterRole, float]]


def effective_fee(inputs: PayoutInputs) -> float:
    """Placement fee: salary * fee_percentage / 100."""
    return inputs.salary * inputs.fee_percentage / 100


def payout_for_tier(
    inputs: PayoutInputs,
    tier: Tier,
    rates: RateTable = COMMISSION_RATES,
) -> float:
    """Recruiter payout on a tier for the selected roles.

    Returns exactly 0.0 when no roles are selected, whatever the fee.
    Rates are summed with fsum in role enum order, so the result does not
    depend on set iteration order.
    """
    roles = frozenset(inputs.selected_roles)
    if not roles:
        return 0.0
    row = rates[tier]
    return effective_fee(inputs) * math.fsum(row[role] for role in _ordered(roles))


def role_splits(
    inputs: PayoutInputs,
    tier: Tier,
    rates: RateTable = COMMISSION_RATES,
) -> list[RoleSplit]:
    """Per-role share of the placement fee on a tier, in role enum order."""
    fee = effective_fee(inputs)
    row = rates[tier]
    return [
        RoleSplit(
            role=role,
            label=ROLE_META[role].label,
            rate=row[role],
            amount=fee * row[role],
        )
        for role in _ordered(inputs.selected_roles)
    ]


def tier_payouts(
    inputs: PayoutInputs,
    rates: RateTable = COMMISSION_RATES,
) -> list[TierPayout]:
    """Payout projections for every tier, ordered free, paid, premium."""
    fee = effective_fee(inputs)
    results: list[TierPayout] = []
    for tier in TIER_ORDER:
        info = TIER_INFO[tier]
        payout = payout_for_tier(inputs, tier, rates)
        results.append(
            TierPayout(
                tier=tier,
                tier_name=info.name,
                monthly_price=info.monthly_price,
                payout=payout,
                platform_take=fee * PLATFORM_TAKE[tier],
                effective_rate=(payout / fee * 100) if fee > 0 else 0.0,
                splits=role_splits(inputs, tier, rates),
            )
        )
    return results


def upgrade_value(
    inputs: PayoutInputs,
    rates: RateTable = COMMISSION_RATES,
) -> UpgradeValue:
    """Payout gained by upgrading between tiers."""
    free = payout_for_tier(inputs, Tier.FREE, rates)
    paid = payout_for_tier(inputs, Tier.PAID, rates)
    premium = payout_for_tier(inputs, Tier.PREMIUM, rates)
    return UpgradeValue(
        paid_vs_free=paid - free,
        premium_vs_free=premium - free,
        premium_vs_paid=premium - paid,
    )


def upgrade_cost_recovery(upgrade: UpgradeValue) -> float:
    """Partner upgrade gain as a percentage of the Partner monthly price.

    Returns 0.0 when upgrading gains nothing or the plan is free.
    """
    price = TIER_INFO[Tier.PREMIUM].monthly_price
    if upgrade.premium_vs_free <= 0 or price <= 0:
        return 0.0
    return upgrade.premium_vs_free / price * 100


def check_input_range(inputs: PayoutInputs) -> None:
    """Raise InputOutOfRangeError if salary or fee percentage is out of range."""
    if not math.isfinite(inputs.salary) or inputs.salary < 0:
        msg = f"salary must be a finite number >= 0, got {inputs.salary}"
        raise InputOutOfRangeError(msg)
    if not 0 <= inputs.fee_percentage <= MAX_FEE_PERCENTAGE:
        msg = f"fee_percentage must be within [0, 100], got {inputs.fee_percentage}"
        raise InputOutOfRangeError(msg)


def compute_payouts(
    calc_input: CalculatorInput | PayoutInputs,
    *,
    strict: bool = False,
    rates: RateTable = COMMISSION_RATES,
) -> PayoutBreakdown:
    """Compute the full payout breakdown for one set of inputs.

    Args:
        calc_input: Salary, fee percentage and selected roles.
        strict: Reject out-of-range numbers instead of clamping them.
        rates: Commission rate table to apply.

    Returns:
        PayoutBreakdown with the placement fee, the three tier payouts
        and the upgrade deltas.

    Raises:
        InputOutOfRangeError: If strict and salary or fee is out of range.
    """
    if strict:
        check_input_range(calc_input)

    state = CalculatorState(
        salary=calc_input.salary,
        fee_percentage=calc_input.fee_percentage,
        selected_roles=frozenset(calc_input.selected_roles),
    )
    if state.salary != calc_input.salary or state.fee_percentage != calc_input.fee_percentage:
        logger.debug(
            "inputs_clamped",
            salary=calc_input.salary,
            fee_percentage=calc_input.fee_percentage,
            clamped_salary=state.salary,
            clamped_fee_percentage=state.fee_percentage,
        )

    upgrade = upgrade_value(state, rates)
    breakdown = PayoutBreakdown(
        salary=state.salary,
        fee_percentage=state.fee_percentage,
        selected_roles=_ordered(state.selected_roles),
        effective_fee=effective_fee(state),
        payouts=tier_payouts(state, rates),
        upgrade_value=upgrade,
        upgrade_cost_recovery=upgrade_cost_recovery(upgrade),
    )
    logger.debug(
        "payouts_computed",
        effective_fee=breakdown.effective_fee,
        roles=[r.value for r in breakdown.selected_roles],
        premium_vs_free=upgrade.premium_vs_free,
    )
    return breakdown


class PayoutCalculator:
    """Session-scoped calculator over a single CalculatorState.

    Input changes go through the mutators; derived values are recomputed
    on every access.
    """

    def __init__(
        self,
        state: CalculatorState | None = None,
        rates: RateTable = COMMISSION_RATES,
    ) -> None:
        self.state = state if state is not None else CalculatorState()
        self.rates = rates

    def set_salary(self, value: float) -> None:
        """Update the salary (negatives clamp to 0)."""
        self.state.set_salary(value)
        logger.debug("salary_set", requested=value, stored=self.state.salary)

    def set_fee_percentage(self, value: float) -> None:
        """Update the fee percentage (clamped to [0, 100])."""
        self.state.set_fee_percentage(value)
        logger.debug("fee_percentage_set", requested=value, stored=self.state.fee_percentage)

    def toggle_role(self, role: RecruiterRole | str) -> None:
        """Add or remove a role."""
        self.state.toggle_role(role)
        logger.debug("role_toggled", role=str(role), roles=self._role_values())

    def set_selected_roles(self, roles: Iterable[RecruiterRole | str]) -> None:
        """Replace the selected roles."""
        self.state.set_selected_roles(roles)
        logger.debug("roles_set", roles=self._role_values())

    @property
    def effective_fee(self) -> float:
        """Current placement fee."""
        return effective_fee(self.state)

    @property
    def payouts(self) -> list[TierPayout]:
        """Current payouts for every tier."""
        return tier_payouts(self.state, self.rates)

    @property
    def upgrade_value(self) -> UpgradeValue:
        """Current upgrade deltas."""
        return upgrade_value(self.state, self.rates)

    def payout_for_tier(self, tier: Tier) -> float:
        """Current payout on a single tier."""
        return payout_for_tier(self.state, tier, self.rates)

    def breakdown(self) -> PayoutBreakdown:
        """Full breakdown for the current state."""
        return compute_payouts(self.state, rates=self.rates)

    def _role_values(self) -> list[str]:
        return [r.value for r in _ordered(self.state.selected_roles)]


def _ordered(roles: Iterable[RecruiterRole]) -> list[RecruiterRole]:
    """Return roles deduplicated and in enum declaration order."""
    selected = set(roles)
    return [role for role in RecruiterRole if role in selected]
