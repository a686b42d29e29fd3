"""Pydantic schemas for profiles and scoring results."""

from zawaj.schemas.profile import (
    BasicInfo,
    EducationInfo,
    FinancialInfo,
    GuardianInfo,
    LocationInfo,
    PersonalInfo,
    Preferences,
    ProfessionalInfo,
    Profile,
    ReligiousInfo,
)
from zawaj.schemas.results import (
    CategoryScore,
    CompatibilityDetails,
    CompatibilityResult,
    CompletionDetails,
    FactorResult,
    ModerationReport,
    ModerationResult,
    ProfileModerationResult,
    RankedCandidate,
)

__all__ = [
    # Profile
    "Profile",
    "BasicInfo",
    "LocationInfo",
    "EducationInfo",
    "ProfessionalInfo",
    "ReligiousInfo",
    "Preferences",
    "PersonalInfo",
    "FinancialInfo",
    "GuardianInfo",
    # Results
    "FactorResult",
    "CompatibilityResult",
    "CategoryScore",
    "CompatibilityDetails",
    "RankedCandidate",
    "ModerationResult",
    "ProfileModerationResult",
    "ModerationReport",
    "CompletionDetails",
]
