"""Calculator state: mutable user input owned by one calculator session."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass, field, replace

from splits_core.constants import (
    DEFAULT_FEE_PERCENTAGE,
    DEFAULT_ROLES,
    DEFAULT_SALARY,
    MAX_FEE_PERCENTAGE,
)
from splits_core.models.payout import CalculatorInput
from splits_core.models.roles import RecruiterRole
from splits_core.rates import parse_role, parse_roles


def clamp_salary(value: float) -> float:
    """Clamp a salary to [0, inf). Non-finite values become 0."""
    value = float(value)
    if not math.isfinite(value):
        return 0.0
    return max(0.0, value)


def clamp_fee_percentage(value: float) -> float:
    """Clamp a fee percentage to [0, 100]. NaN becomes 0."""
    value = float(value)
    if math.isnan(value):
        return 0.0
    return min(MAX_FEE_PERCENTAGE, max(0.0, value))


@dataclass
class CalculatorState:
    """Salary, fee percentage and selected roles for one calculator session.

    Mutators clamp rather than reject, so interactive edits never fail on
    numeric input. Each mutator assigns a new value to its field;
    ``selected_roles`` is always a frozenset, so snapshots stay unchanged.
    """

    salary: float = DEFAULT_SALARY
    fee_percentage: float = DEFAULT_FEE_PERCENTAGE
    selected_roles: frozenset[RecruiterRole] = field(default=DEFAULT_ROLES)

    def __post_init__(self) -> None:
        self.salary = clamp_salary(self.salary)
        self.fee_percentage = clamp_fee_percentage(self.fee_percentage)
        self.selected_roles = parse_roles(self.selected_roles)

    def set_salary(self, value: float) -> None:
        """Store the salary, clamping negatives to 0."""
        self.salary = clamp_salary(value)

    def set_fee_percentage(self, value: float) -> None:
        """Store the fee percentage, clamped to [0, 100]."""
        self.fee_percentage = clamp_fee_percentage(value)

    def toggle_role(self, role: RecruiterRole | str) -> None:
        """Remove the role if selected, otherwise add it."""
        parsed = parse_role(role)
        if parsed in self.selected_roles:
            self.selected_roles = self.selected_roles - {parsed}
        else:
            self.selected_roles = self.selected_roles | {parsed}

    def set_selected_roles(self, roles: Iterable[RecruiterRole | str]) -> None:
        """Replace the selected roles wholesale. Duplicates collapse."""
        self.selected_roles = parse_roles(roles)

    def snapshot(self) -> CalculatorState:
        """Return an independent copy of the current state."""
        return replace(self)

    def to_input(self) -> CalculatorInput:
        """Build the stateless request model for the current values."""
        return CalculatorInput(
            salary=self.salary,
            fee_percentage=self.fee_percentage,
            selected_roles=self.selected_roles,
        )

    @classmethod
    def from_input(cls, calc_input: CalculatorInput) -> CalculatorState:
        """Create a state from a request model, clamping its numbers."""
        return cls(
            salary=calc_input.salary,
            fee_percentage=calc_input.fee_percentage,
            selected_roles=calc_input.selected_roles,
        )
