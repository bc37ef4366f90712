"""Structural interface for payout engine inputs."""

from __future__ import annotations

from collections.abc import Set
from typing import Protocol, runtime_checkable

from splits_core.models.roles import RecruiterRole


@runtime_checkable
class PayoutInputs(Protocol):
    """Anything carrying salary, fee percentage and selected roles.

    Satisfied by both CalculatorState and CalculatorInput.
    """

    @property
    def salary(self) -> float:
        """Annual salary."""
        ...

    @property
    def fee_percentage(self) -> float:
        """Placement fee as a percentage of salary."""
        ...

    @property
    def selected_roles(self) -> Set[RecruiterRole]:
        """Roles held on the placement."""
        ...
