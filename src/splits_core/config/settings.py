"""Application settings using pydantic-settings."""

from __future__ import annotations

from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from splits_core.constants import (
    DEFAULT_FEE_PERCENTAGE,
    DEFAULT_SALARY,
    MAX_FEE_PERCENTAGE,
)
from splits_core.models.roles import RecruiterRole
from splits_core.state import CalculatorState


class Settings(BaseSettings):
    """Central configuration for the payout calculator."""

    model_config = SettingsConfigDict(env_prefix="SPLITS_", env_file=".env")

    # --- Logging ---
    log_level: str = Field(
        default="INFO",
        description="Root log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    log_format: Literal["console", "json"] = Field(
        default="console",
        description="Log renderer: 'console' for humans, 'json' for log shipping",
    )

    # --- Calculator defaults ---
    default_salary: float = Field(
        default=DEFAULT_SALARY,
        allow_inf_nan=False,
        description="Salary a new calculator session starts with",
    )
    default_fee_percentage: float = Field(
        default=DEFAULT_FEE_PERCENTAGE,
        allow_inf_nan=False,
        description="Fee percentage a new calculator session starts with",
    )
    default_roles: list[RecruiterRole] = Field(
        default_factory=lambda: [RecruiterRole.CANDIDATE_RECRUITER],
        description="Roles selected when a new calculator session starts",
    )

    # --- Input policy ---
    strict_inputs: bool = Field(
        default=False,
        description="Reject out-of-range salary/fee instead of clamping",
    )

    # --- Display ---
    currency_symbol: str = Field(
        default="$",
        description="Currency symbol used when formatting amounts",
    )

    @model_validator(mode="after")
    def validate_defaults(self) -> Settings:
        """Reject calculator defaults that clamping would silently rewrite."""
        if self.default_salary < 0:
            msg = "default_salary must be >= 0"
            raise ValueError(msg)
        if not 0 <= self.default_fee_percentage <= MAX_FEE_PERCENTAGE:
            msg = "default_fee_percentage must be within [0, 100]"
            raise ValueError(msg)
        return self

    def new_state(self) -> CalculatorState:
        """Create a calculator state seeded from the configured defaults."""
        return CalculatorState(
            salary=self.default_salary,
            fee_percentage=self.default_fee_percentage,
            selected_roles=frozenset(self.default_roles),
        )
