"""Pydantic models for the member profile consumed by matching and moderation.

Profiles arrive from the API layer as nested camelCase JSON. Every field is
optional: absence is meaningful and is never treated as a falsy match. The
models accept both the camelCase wire names and snake_case attribute names,
and keep unknown keys so a full stored profile can be passed straight in.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ProfileSection(BaseModel):
    """Base for one profile namespace (basicInfo, location, ...)."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )


class BasicInfo(ProfileSection):
    name: Optional[str] = None
    age: Optional[int] = Field(default=None, ge=0)
    gender: Optional[str] = Field(default=None, description="'m' or 'f'")


class LocationInfo(ProfileSection):
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None


class EducationInfo(ProfileSection):
    level: Optional[str] = Field(default=None, description="e.g. 'bachelor', 'master'")


class ProfessionalInfo(ProfileSection):
    occupation: Optional[str] = None
    current_job: Optional[str] = None


class ReligiousInfo(ProfileSection):
    religious_level: Optional[str] = Field(default=None, description="basic, moderate, practicing, very-religious")


class Preferences(ProfileSection):
    marriage_type: Optional[str] = None
    children: Optional[str] = Field(default=None, description="Family planning preference: yes, no, maybe")


class PersonalInfo(ProfileSection):
    about: Optional[str] = None
    marriage_goals: Optional[str] = None
    has_beard: Optional[bool] = None
    wear_hijab: Optional[bool] = None


class FinancialInfo(ProfileSection):
    situation: Optional[str] = None


class GuardianInfo(ProfileSection):
    name: Optional[str] = None
    phone: Optional[str] = None


class Profile(ProfileSection):
    """A member profile. Read-only input; nothing here is persisted."""

    basic_info: Optional[BasicInfo] = None
    location: Optional[LocationInfo] = None
    education: Optional[EducationInfo] = None
    professional: Optional[ProfessionalInfo] = None
    religious_info: Optional[ReligiousInfo] = None
    preferences: Optional[Preferences] = None
    personal_info: Optional[PersonalInfo] = None
    financial_info: Optional[FinancialInfo] = None
    guardian_info: Optional[GuardianInfo] = None

    def to_wire(self) -> dict:
        """camelCase dict as produced by the API layer, without unset fields."""
        return self.model_dump(by_alias=True, exclude_none=True)
