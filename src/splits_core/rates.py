"""Rate table lookups and consistency checks."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from splits_core.constants import COMMISSION_RATES, TIER_ORDER
from splits_core.exceptions import RateTableError, UnknownRoleError
from splits_core.models.roles import RecruiterRole, Tier


def parse_role(value: RecruiterRole | str) -> RecruiterRole:
    """Convert a role identifier to a RecruiterRole.

    Accepts enum members or their string values, case-insensitively.
    Raises UnknownRoleError for anything else.
    """
    if isinstance(value, RecruiterRole):
        return value
    try:
        return RecruiterRole(str(value).strip().lower())
    except ValueError:
        valid = ", ".join(r.value for r in RecruiterRole)
        msg = f"Unknown recruiter role {value!r} (expected one of: {valid})"
        raise UnknownRoleError(msg) from None


def parse_roles(values: Iterable[RecruiterRole | str] | str) -> frozenset[RecruiterRole]:
    """Convert an iterable of role identifiers to a deduplicated set."""
    if isinstance(values, str):
        return frozenset({parse_role(values)})
    return frozenset(parse_role(v) for v in values)


def rate_for(
    tier: Tier,
    role: RecruiterRole,
    rates: Mapping[Tier, Mapping[RecruiterRole, float]] = COMMISSION_RATES,
) -> float:
    """Return the commission rate for a single role on a tier."""
    return rates[tier][role]


def validate_rate_tables(
    rates: Mapping[Tier, Mapping[RecruiterRole, float]] = COMMISSION_RATES,
) -> None:
    """Check a rate table for completeness, range and tier monotonicity.

    Every tier must carry a rate for every role, every rate must lie in
    [0, 1], and for each role the rate must not decrease from free to paid
    to premium.

    Raises:
        RateTableError: On the first violation found.
    """
    for tier in TIER_ORDER:
        row = rates.get(tier)
        if row is None:
            raise RateTableError(f"Missing rate row for tier '{tier}'")
        missing = [role.value for role in RecruiterRole if role not in row]
        if missing:
            raise RateTableError(f"Tier '{tier}' has no rate for: {', '.join(missing)}")
        for role, rate in row.items():
            if not 0.0 <= rate <= 1.0:
                raise RateTableError(
                    f"Rate {rate} for role '{role}' on tier '{tier}' is outside [0, 1]"
                )

    for role in RecruiterRole:
        for lower, higher in zip(TIER_ORDER, TIER_ORDER[1:], strict=False):
            if rates[lower][role] > rates[higher][role]:
                raise RateTableError(
                    f"Rate for role '{role}' drops from {rates[lower][role]} on "
                    f"'{lower}' to {rates[higher][role]} on '{higher}'"
                )
