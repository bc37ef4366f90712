"""Shared mock Settings factory."""

from __future__ import annotations

from unittest.mock import MagicMock

from splits_core.models.roles import RecruiterRole


def make_settings(**overrides: object) -> MagicMock:
    """Create a mock Settings with sensible defaults.

    Override any attribute via keyword arguments.
    """
    settings = MagicMock()
    settings.log_level = "INFO"
    settings.log_format = "console"
    settings.default_salary = 100_000.0
    settings.default_fee_percentage = 20.0
    settings.default_roles = [RecruiterRole.CANDIDATE_RECRUITER]
    settings.strict_inputs = False
    settings.currency_symbol = "$"

    for key, value in overrides.items():
        setattr(settings, key, value)

    return settings
