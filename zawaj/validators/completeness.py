"""
Profile completeness: share of required fields present on a profile.

The required-field table is defined once and shared by every function here.
Nine base fields always apply; gender adds its own fields ("m" adds 2, "f"
adds 3, anything else adds none). A field counts as present when its dotted
path resolves and the value is not None. Falsy values such as 0, False and
"" are present.
"""

import logging
from typing import Optional

from zawaj.constants import DEFAULT_COMPLETION_THRESHOLD, GENDER_FEMALE, GENDER_MALE
from zawaj.schemas.results import CompletionDetails
from zawaj.utils.profile_fields import ProfileLike, as_profile_data, resolve_path
from zawaj.utils.rounding import round_half_up

logger = logging.getLogger(__name__)

BASE_REQUIRED_FIELDS = (
    "basicInfo.name",
    "basicInfo.age",
    "basicInfo.gender",
    "location.country",
    "location.city",
    "education.level",
    "professional.occupation",
    "religiousInfo.religiousLevel",
    "personalInfo.about",
)

GENDER_REQUIRED_FIELDS = {
    GENDER_MALE: (
        "personalInfo.hasBeard",
        "financialInfo.situation",
    ),
    GENDER_FEMALE: (
        "guardianInfo.name",
        "guardianInfo.phone",
        "personalInfo.wearHijab",
    ),
}

# (minimum completeness, message), checked top-down
COMPLETION_MESSAGES = [
    (95, "ممتاز! ملفك الشخصي مكتمل تقريبًا"),
    (80, "جيد جدًا! ملفك الشخصي مكتمل بشكل جيد"),
    (60, "جيد! لكن يمكنك تحسين ملفك الشخصي أكثر"),
    (40, "مقبول، لكن يُنصح بإكمال ملفك الشخصي"),
]
INCOMPLETE_MESSAGE = "يجب إكمال ملفك الشخصي ليتمكن الآخرون من معرفتك بشكل أفضل"


def get_required_fields(profile: ProfileLike) -> list[str]:
    """Base required fields followed by the profile's gender-specific ones."""
    data = as_profile_data(profile)
    gender = resolve_path(data, "basicInfo.gender")
    extra = GENDER_REQUIRED_FIELDS.get(gender, ()) if isinstance(gender, str) else ()
    return [*BASE_REQUIRED_FIELDS, *extra]


def get_missing_fields(profile: ProfileLike) -> list[str]:
    """Required fields that are absent, in canonical order."""
    data = as_profile_data(profile)
    return [path for path in get_required_fields(data) if resolve_path(data, path) is None]


def calculate_completeness(profile: ProfileLike) -> int:
    """Percentage (0-100, rounded half up) of required fields present."""
    data = as_profile_data(profile)
    required = get_required_fields(data)
    missing = get_missing_fields(data)
    completeness = round_half_up((len(required) - len(missing)) / len(required) * 100)
    logger.debug(f"Profile completeness {completeness}% [required={len(required)} missing={len(missing)}]")
    return completeness


def is_profile_complete(profile: ProfileLike, threshold: int = DEFAULT_COMPLETION_THRESHOLD) -> bool:
    return calculate_completeness(profile) >= threshold


def get_completion_message(completeness: int) -> str:
    """Member-facing message for a completeness tier (95/80/60/40/below)."""
    for minimum, message in COMPLETION_MESSAGES:
        if completeness >= minimum:
            return message
    return INCOMPLETE_MESSAGE


def get_completion_details(profile: ProfileLike, threshold: Optional[int] = None) -> CompletionDetails:
    """Completeness, complete flag, missing fields and tier message in one result."""
    threshold = DEFAULT_COMPLETION_THRESHOLD if threshold is None else threshold
    data = as_profile_data(profile)
    completeness = calculate_completeness(data)
    return CompletionDetails(
        completeness=completeness,
        is_complete=completeness >= threshold,
        missing_fields=get_missing_fields(data),
        completion_message=get_completion_message(completeness),
    )
