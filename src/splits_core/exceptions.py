"""Custom exception hierarchy for the split-fee payout calculator."""

from __future__ import annotations


class SplitsCalculatorError(Exception):
    """Base exception for all payout calculator errors."""


class UnknownRoleError(SplitsCalculatorError):
    """Raised when a role identifier is not one of the recruiter roles."""


class InputOutOfRangeError(SplitsCalculatorError):
    """Raised in strict mode when salary or fee percentage is out of range."""


class RateTableError(SplitsCalculatorError):
    """Raised when a commission rate table is incomplete or inconsistent."""
