"""Profile validators: content moderation and completeness."""

from zawaj.validators.completeness import (
    BASE_REQUIRED_FIELDS,
    GENDER_REQUIRED_FIELDS,
    calculate_completeness,
    get_completion_details,
    get_completion_message,
    get_missing_fields,
    get_required_fields,
    is_profile_complete,
)
from zawaj.validators.moderation import (
    ARABIC_ABUSIVE_WORDS,
    ENGLISH_ABUSIVE_WORDS,
    ModerationSettings,
    check_for_abusive_content,
    check_message_content,
    check_profile_content,
    generate_moderation_report,
    load_moderation_settings,
    resolve_message_status,
)

__all__ = [
    # Completeness
    "BASE_REQUIRED_FIELDS",
    "GENDER_REQUIRED_FIELDS",
    "calculate_completeness",
    "get_completion_details",
    "get_completion_message",
    "get_missing_fields",
    "get_required_fields",
    "is_profile_complete",
    # Moderation
    "ARABIC_ABUSIVE_WORDS",
    "ENGLISH_ABUSIVE_WORDS",
    "ModerationSettings",
    "check_for_abusive_content",
    "check_message_content",
    "check_profile_content",
    "generate_moderation_report",
    "load_moderation_settings",
    "resolve_message_status",
]
