"""Recruiter role and subscription tier vocabulary."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class RecruiterRole(StrEnum):
    """Contribution a recruiter can make to a single placement."""

    CANDIDATE_RECRUITER = "candidate_recruiter"  # Closer
    JOB_OWNER = "job_owner"  # Specs owner
    COMPANY_RECRUITER = "company_recruiter"  # Client / hiring facilitator
    CANDIDATE_SOURCER = "candidate_sourcer"  # Discovery
    COMPANY_SOURCER = "company_sourcer"  # Business development


class Tier(StrEnum):
    """Subscription plan level."""

    FREE = "free"
    PAID = "paid"
    PREMIUM = "premium"


class TierInfo(BaseModel):
    """Display name and monthly price for a subscription tier."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Plan display name")
    monthly_price: int = Field(ge=0, description="Monthly price in whole currency units")


class RoleMeta(BaseModel):
    """Presentation metadata for a recruiter role."""

    model_config = ConfigDict(frozen=True)

    label: str = Field(description="Short display label")
    description: str = Field(description="Human description of the contribution")
