"""Tests for calculator input and payout result models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from splits_core.models.payout import PayoutBreakdown, TierPayout, UpgradeValue
from splits_core.models.roles import RecruiterRole, Tier
from tests.mocks.mock_factories import make_calculator_input


def _tier_payout(tier: Tier, payout: float = 0.0) -> TierPayout:
    """Create a minimal TierPayout."""
    return TierPayout(
        tier=tier,
        tier_name=tier.value,
        monthly_price=0,
        payout=payout,
        platform_take=0.0,
    )


@pytest.mark.unit
class TestCalculatorInput:
    """Test CalculatorInput validation."""

    def test_valid_input(self) -> None:
        """Role strings become enum members in a frozenset."""
        calc_input = make_calculator_input(selected_roles=["job_owner", "candidate_recruiter"])
        assert calc_input.selected_roles == {
            RecruiterRole.JOB_OWNER,
            RecruiterRole.CANDIDATE_RECRUITER,
        }

    def test_duplicate_roles_collapse(self) -> None:
        """Duplicated roles are stored once."""
        calc_input = make_calculator_input(selected_roles=["job_owner", "job_owner"])
        assert calc_input.selected_roles == {RecruiterRole.JOB_OWNER}

    def test_single_role_string(self) -> None:
        """A bare role string is accepted as a one-role selection."""
        calc_input = make_calculator_input(selected_roles="Company_Sourcer")
        assert calc_input.selected_roles == {RecruiterRole.COMPANY_SOURCER}

    def test_unknown_role_rejected(self) -> None:
        """Role strings outside the enum fail validation."""
        with pytest.raises(ValidationError):
            make_calculator_input(selected_roles=["candidate_recruiter", "hiring_manager"])

    def test_out_of_range_numbers_kept(self) -> None:
        """The request model does not clamp; that is the engine's job."""
        calc_input = make_calculator_input(salary=-5, fee_percentage=150)
        assert calc_input.salary == -5
        assert calc_input.fee_percentage == 150

    @pytest.mark.parametrize("value", [float("nan"), float("inf")])
    def test_non_finite_salary_rejected(self, value: float) -> None:
        """NaN and infinity are rejected."""
        with pytest.raises(ValidationError):
            make_calculator_input(salary=value)

    def test_missing_fields_rejected(self) -> None:
        """All three inputs are required."""
        from splits_core.models.payout import CalculatorInput

        with pytest.raises(ValidationError):
            CalculatorInput(salary=1)  # type: ignore[call-arg]


@pytest.mark.unit
class TestPayoutBreakdown:
    """Test PayoutBreakdown structure."""

    def _make(self, payouts: list[TierPayout]) -> PayoutBreakdown:
        return PayoutBreakdown(
            salary=0.0,
            fee_percentage=0.0,
            selected_roles=[],
            effective_fee=0.0,
            payouts=payouts,
            upgrade_value=UpgradeValue(paid_vs_free=0, premium_vs_free=0, premium_vs_paid=0),
        )

    def test_requires_three_payouts(self) -> None:
        """Exactly three tier payouts are required."""
        with pytest.raises(ValidationError):
            self._make([_tier_payout(Tier.FREE)])

    def test_payout_for(self) -> None:
        """payout_for looks up a tier's projection."""
        breakdown = self._make(
            [_tier_payout(Tier.FREE, 1), _tier_payout(Tier.PAID, 2), _tier_payout(Tier.PREMIUM, 3)]
        )
        assert breakdown.payout_for(Tier.PAID).payout == 2

    def test_json_round_trip(self) -> None:
        """Breakdowns serialize to JSON and back."""
        breakdown = self._make(
            [_tier_payout(Tier.FREE), _tier_payout(Tier.PAID), _tier_payout(Tier.PREMIUM)]
        )
        restored = PayoutBreakdown.model_validate_json(breakdown.model_dump_json())
        assert restored == breakdown
