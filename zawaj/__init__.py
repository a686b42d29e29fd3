"""Compatibility scoring, content moderation and profile completeness for zawaj profiles."""

from zawaj.scorers.compatibility import (
    CompatibilityScorer,
    calculate_compatibility,
    get_compatibility_details,
    rank_candidates,
)
from zawaj.validators.completeness import (
    calculate_completeness,
    get_completion_details,
    get_missing_fields,
    is_profile_complete,
)
from zawaj.validators.moderation import (
    check_for_abusive_content,
    check_message_content,
    check_profile_content,
    generate_moderation_report,
)

__version__ = "1.0.0"

__all__ = [
    "CompatibilityScorer",
    "calculate_compatibility",
    "get_compatibility_details",
    "rank_candidates",
    "check_for_abusive_content",
    "check_message_content",
    "check_profile_content",
    "generate_moderation_report",
    "calculate_completeness",
    "get_missing_fields",
    "is_profile_complete",
    "get_completion_details",
]
