"""Tests for rate tables, role parsing and rate table validation."""

from __future__ import annotations

import pytest

from splits_core.constants import (
    COMMISSION_RATES,
    PLATFORM_TAKE,
    ROLE_META,
    TIER_INFO,
    TIER_ORDER,
)
from splits_core.exceptions import RateTableError, UnknownRoleError
from splits_core.models.roles import RecruiterRole, Tier
from splits_core.rates import parse_role, parse_roles, rate_for, validate_rate_tables


def _table_copy() -> dict[Tier, dict[RecruiterRole, float]]:
    """Return a mutable copy of the shipped rate table."""
    return {tier: dict(row) for tier, row in COMMISSION_RATES.items()}


@pytest.mark.unit
class TestRateTables:
    """Test the shipped rate table values."""

    @pytest.mark.parametrize(
        ("role", "free", "paid", "premium"),
        [
            (RecruiterRole.CANDIDATE_RECRUITER, 0.20, 0.30, 0.40),
            (RecruiterRole.JOB_OWNER, 0.10, 0.15, 0.20),
            (RecruiterRole.COMPANY_RECRUITER, 0.10, 0.15, 0.20),
            (RecruiterRole.CANDIDATE_SOURCER, 0.06, 0.08, 0.10),
            (RecruiterRole.COMPANY_SOURCER, 0.06, 0.08, 0.10),
        ],
    )
    def test_commission_rates(
        self, role: RecruiterRole, free: float, paid: float, premium: float
    ) -> None:
        """Every (tier, role) rate matches the business table."""
        assert COMMISSION_RATES[Tier.FREE][role] == free
        assert COMMISSION_RATES[Tier.PAID][role] == paid
        assert COMMISSION_RATES[Tier.PREMIUM][role] == premium

    def test_full_role_set_sums(self) -> None:
        """Full role sets sum to 0.52, 0.76 and 1.00."""
        assert sum(COMMISSION_RATES[Tier.FREE].values()) == pytest.approx(0.52)
        assert sum(COMMISSION_RATES[Tier.PAID].values()) == pytest.approx(0.76)
        assert sum(COMMISSION_RATES[Tier.PREMIUM].values()) == pytest.approx(1.00)

    def test_platform_take(self) -> None:
        """Platform take figures are independent display values."""
        assert PLATFORM_TAKE == {Tier.FREE: 0.48, Tier.PAID: 0.24, Tier.PREMIUM: 0.0}

    def test_tier_info(self) -> None:
        """Tier names and monthly prices."""
        assert (TIER_INFO[Tier.FREE].name, TIER_INFO[Tier.FREE].monthly_price) == ("Starter", 0)
        assert (TIER_INFO[Tier.PAID].name, TIER_INFO[Tier.PAID].monthly_price) == ("Pro", 99)
        assert (TIER_INFO[Tier.PREMIUM].name, TIER_INFO[Tier.PREMIUM].monthly_price) == (
            "Partner",
            249,
        )

    def test_tier_order(self) -> None:
        """Tiers are ordered free, paid, premium."""
        assert TIER_ORDER == (Tier.FREE, Tier.PAID, Tier.PREMIUM)

    def test_every_role_has_meta(self) -> None:
        """Every role carries a label and description."""
        for role in RecruiterRole:
            assert ROLE_META[role].label
            assert ROLE_META[role].description

    def test_role_labels(self) -> None:
        """Display labels for every role."""
        assert [ROLE_META[role].label for role in RecruiterRole] == [
            "Closer",
            "Specs Owner",
            "Client / Hiring Facilitator",
            "Discovery",
            "Business Development",
        ]

    def test_tables_are_read_only(self) -> None:
        """Rate tables cannot be mutated at runtime."""
        with pytest.raises(TypeError):
            COMMISSION_RATES[Tier.FREE][RecruiterRole.JOB_OWNER] = 0.5  # type: ignore[index]
        with pytest.raises(TypeError):
            PLATFORM_TAKE[Tier.FREE] = 0.1  # type: ignore[index]

    def test_monotonic_across_tiers(self) -> None:
        """For every role, free <= paid <= premium."""
        for role in RecruiterRole:
            free = rate_for(Tier.FREE, role)
            paid = rate_for(Tier.PAID, role)
            premium = rate_for(Tier.PREMIUM, role)
            assert free <= paid <= premium


@pytest.mark.unit
class TestValidateRateTables:
    """Test validate_rate_tables."""

    def test_shipped_table_is_valid(self) -> None:
        """The shipped table passes validation."""
        validate_rate_tables()

    def test_missing_tier_raises(self) -> None:
        """A table without a tier row is rejected."""
        table = _table_copy()
        del table[Tier.PAID]
        with pytest.raises(RateTableError, match="Missing rate row"):
            validate_rate_tables(table)

    def test_missing_role_raises(self) -> None:
        """A tier row without every role is rejected."""
        table = _table_copy()
        del table[Tier.PREMIUM][RecruiterRole.COMPANY_SOURCER]
        with pytest.raises(RateTableError, match="company_sourcer"):
            validate_rate_tables(table)

    def test_rate_out_of_range_raises(self) -> None:
        """Rates above 1 are rejected."""
        table = _table_copy()
        table[Tier.FREE][RecruiterRole.JOB_OWNER] = 1.5
        with pytest.raises(RateTableError, match="outside"):
            validate_rate_tables(table)

    def test_non_monotonic_raises(self) -> None:
        """A rate that drops on a higher tier is rejected."""
        table = _table_copy()
        table[Tier.PAID][RecruiterRole.CANDIDATE_RECRUITER] = 0.45
        with pytest.raises(RateTableError, match="drops"):
            validate_rate_tables(table)


@pytest.mark.unit
class TestParseRole:
    """Test role identifier parsing."""

    def test_enum_member_passes_through(self) -> None:
        """Enum members are returned unchanged."""
        assert parse_role(RecruiterRole.JOB_OWNER) is RecruiterRole.JOB_OWNER

    @pytest.mark.parametrize("value", ["job_owner", "JOB_OWNER", "  job_owner "])
    def test_strings_are_normalized(self, value: str) -> None:
        """Role strings are matched case-insensitively."""
        assert parse_role(value) is RecruiterRole.JOB_OWNER

    def test_unknown_role_raises(self) -> None:
        """Unknown role strings are rejected."""
        with pytest.raises(UnknownRoleError, match="hiring_manager"):
            parse_role("hiring_manager")

    def test_parse_roles_deduplicates(self) -> None:
        """Duplicate roles collapse into one."""
        roles = parse_roles(["job_owner", RecruiterRole.JOB_OWNER, "candidate_recruiter"])
        assert roles == {RecruiterRole.JOB_OWNER, RecruiterRole.CANDIDATE_RECRUITER}

    def test_parse_roles_single_string(self) -> None:
        """A bare string is treated as one role, not as characters."""
        assert parse_roles("company_sourcer") == {RecruiterRole.COMPANY_SOURCER}

    def test_parse_roles_empty(self) -> None:
        """An empty iterable gives an empty set."""
        assert parse_roles([]) == frozenset()
