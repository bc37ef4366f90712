"""Commission rate tables, tier pricing and role metadata."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from splits_core.models.roles import RecruiterRole, RoleMeta, Tier, TierInfo

# Display and computation order for tiers
TIER_ORDER: tuple[Tier, ...] = (Tier.FREE, Tier.PAID, Tier.PREMIUM)

# Fraction of the placement fee paid per role, per tier
COMMISSION_RATES: Mapping[Tier, Mapping[RecruiterRole, float]] = MappingProxyType(
    {
        Tier.FREE: MappingProxyType(
            {
                RecruiterRole.CANDIDATE_RECRUITER: 0.20,
                RecruiterRole.JOB_OWNER: 0.10,
                RecruiterRole.COMPANY_RECRUITER: 0.10,
                RecruiterRole.CANDIDATE_SOURCER: 0.06,
                RecruiterRole.COMPANY_SOURCER: 0.06,
            }
        ),
        Tier.PAID: MappingProxyType(
            {
                RecruiterRole.CANDIDATE_RECRUITER: 0.30,
                RecruiterRole.JOB_OWNER: 0.15,
                RecruiterRole.COMPANY_RECRUITER: 0.15,
                RecruiterRole.CANDIDATE_SOURCER: 0.08,
                RecruiterRole.COMPANY_SOURCER: 0.08,
            }
        ),
        Tier.PREMIUM: MappingProxyType(
            {
                RecruiterRole.CANDIDATE_RECRUITER: 0.40,
                RecruiterRole.JOB_OWNER: 0.20,
                RecruiterRole.COMPANY_RECRUITER: 0.20,
                RecruiterRole.CANDIDATE_SOURCER: 0.10,
                RecruiterRole.COMPANY_SOURCER: 0.10,
            }
        ),
    }
)

# Fraction of the placement fee retained by the platform (display figure,
# not derived from the role rates)
PLATFORM_TAKE: Mapping[Tier, float] = MappingProxyType(
    {
        Tier.FREE: 0.48,
        Tier.PAID: 0.24,
        Tier.PREMIUM: 0.00,
    }
)

TIER_INFO: Mapping[Tier, TierInfo] = MappingProxyType(
    {
        Tier.FREE: TierInfo(name="Starter", monthly_price=0),
        Tier.PAID: TierInfo(name="Pro", monthly_price=99),
        Tier.PREMIUM: TierInfo(name="Partner", monthly_price=249),
    }
)

ROLE_META: Mapping[RecruiterRole, RoleMeta] = MappingProxyType(
    {
        RecruiterRole.CANDIDATE_RECRUITER: RoleMeta(
            label="Closer",
            description="Represents the candidate and closes the placement",
        ),
        RecruiterRole.JOB_OWNER: RoleMeta(
            label="Specs Owner",
            description="Posted the role and owns the job requirements",
        ),
        RecruiterRole.COMPANY_RECRUITER: RoleMeta(
            label="Client / Hiring Facilitator",
            description="Manages the hiring company relationship",
        ),
        RecruiterRole.CANDIDATE_SOURCER: RoleMeta(
            label="Discovery",
            description="First brought the candidate onto the platform",
        ),
        RecruiterRole.COMPANY_SOURCER: RoleMeta(
            label="Business Development",
            description="First brought the hiring company onto the platform",
        ),
    }
)

# CalculatorState defaults
DEFAULT_SALARY = 100_000.0
DEFAULT_FEE_PERCENTAGE = 20.0
DEFAULT_ROLES: frozenset[RecruiterRole] = frozenset({RecruiterRole.CANDIDATE_RECRUITER})

MAX_FEE_PERCENTAGE = 100.0
