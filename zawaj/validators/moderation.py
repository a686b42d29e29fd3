"""
Keyword-based content moderation for names, bios and chat messages.

Scans free text against two fixed word lists and turns the hit count into a
normalized severity score. This is a FLAGGING system: results feed the admin
review queue and message status, nothing is rejected here.

Matching is plain substring containment, not word-boundary matching, so a
short entry inside a longer word ("hell" in "hello") is flagged too.

Usage:
    from zawaj.validators.moderation import check_for_abusive_content

    result = check_for_abusive_content("you idiot")
    # result.is_appropriate == False, result.flagged_words == ["idiot"]
"""

import json
import logging
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field

from zawaj.config import get_moderation_path
from zawaj.constants import (
    MESSAGE_SCORE_DIVISOR,
    MESSAGE_STATUS_APPROVED,
    MESSAGE_STATUS_PENDING,
    PROFILE_SCORE_DIVISOR,
    REVIEW_SCORE_THRESHOLD,
)
from zawaj.schemas.profile import Profile
from zawaj.schemas.results import ModerationReport, ModerationResult, ProfileModerationResult
from zawaj.utils.profile_fields import ProfileLike, as_profile_data, get_field

logger = logging.getLogger(__name__)

# =============================================================================
# Word Lists
# =============================================================================
#
# The Arabic list is matched case-sensitively. It also carries three
# space-prefixed English entries, which therefore only match lowercase text
# with a preceding space.

ARABIC_ABUSIVE_WORDS: list[str] = [
    "كلب",
    "حمار",
    "عاهرة",
    "زانية",
    "لعين",
    "لعنة",
    " damned",
    " whore",
    " bitch",
]

ENGLISH_ABUSIVE_WORDS: list[str] = [
    "damn",
    "hell",
    "whore",
    "bitch",
    "asshole",
    "bastard",
    "idiot",
    "stupid",
]

# Profile text fields scanned by check_profile_content: (namespace, key, reported name)
PROFILE_TEXT_FIELDS = [
    ("basicInfo", "name", "name"),
    ("personalInfo", "about", "about"),
    ("personalInfo", "marriageGoals", "marriageGoals"),
]


class ModerationSettings(BaseModel):
    """Word lists and thresholds; defaults reproduce the built-in behavior."""

    arabic_words: list[str] = Field(default_factory=lambda: list(ARABIC_ABUSIVE_WORDS))
    english_words: list[str] = Field(default_factory=lambda: list(ENGLISH_ABUSIVE_WORDS))
    text_score_divisor: int = Field(default=MESSAGE_SCORE_DIVISOR, gt=0)
    profile_score_divisor: int = Field(default=PROFILE_SCORE_DIVISOR, gt=0)
    review_threshold: float = Field(default=REVIEW_SCORE_THRESHOLD, ge=0.0, le=1.0)
    auto_approve_messages: bool = False


# Module-level cache
_settings_cache: Optional[ModerationSettings] = None


def load_moderation_settings() -> ModerationSettings:
    """Load and cache moderation settings from YAML, falling back to defaults."""
    global _settings_cache
    if _settings_cache is not None:
        return _settings_cache

    config_path = get_moderation_path()
    if not config_path.exists():
        logger.warning(f"Moderation config not found at {config_path}, using defaults")
        _settings_cache = ModerationSettings()
        return _settings_cache

    with open(config_path, encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    _settings_cache = ModerationSettings(**raw)
    logger.info(
        f"Loaded moderation settings [arabic_words={len(_settings_cache.arabic_words)} "
        f"english_words={len(_settings_cache.english_words)}]"
    )
    return _settings_cache


def clear_cache():
    """Clear the settings cache (useful for testing)."""
    global _settings_cache
    _settings_cache = None


# =============================================================================
# Checks
# =============================================================================


def check_for_abusive_content(text: Optional[str], settings: Optional[ModerationSettings] = None) -> ModerationResult:
    """
    Scan text for entries of the abusive word lists.

    Each list entry found is reported once, regardless of how often it
    occurs. An entry present in both lists is reported from each.

    Args:
        text: Text to scan (None scans as empty)
        settings: Word lists and divisors (defaults to loaded settings)

    Returns:
        ModerationResult with flagged words and min(1, hits / 10) score

    Raises:
        TypeError: If text is not a string or None
    """
    settings = settings or load_moderation_settings()
    if text is None:
        text = ""
    if not isinstance(text, str):
        raise TypeError(f"Expected text as str, got {type(text).__name__}")

    flagged_words = [word for word in settings.arabic_words if word in text]
    lowered = text.lower()
    flagged_words.extend(word for word in settings.english_words if word.lower() in lowered)

    moderation_score = min(1.0, len(flagged_words) / settings.text_score_divisor)
    if flagged_words:
        logger.debug(f"Flagged content [hits={len(flagged_words)} score={moderation_score}]")
    return ModerationResult(
        is_appropriate=not flagged_words,
        flagged_words=flagged_words,
        moderation_score=moderation_score,
    )


def check_message_content(message: Optional[str], settings: Optional[ModerationSettings] = None) -> ModerationResult:
    """Moderate a chat message (same scan as check_for_abusive_content)."""
    return check_for_abusive_content(message, settings)


def check_profile_content(profile: ProfileLike, settings: Optional[ModerationSettings] = None) -> ProfileModerationResult:
    """
    Moderate the free-text fields of a profile (name, about, marriage goals).

    Each present field is scanned on its own. The profile score spreads the
    total hit count over a larger divisor (20) than a single text (10).
    """
    settings = settings or load_moderation_settings()
    data = as_profile_data(profile)

    flagged_fields = []
    total_flags = 0
    for namespace, key, field_name in PROFILE_TEXT_FIELDS:
        value = get_field(data, namespace, key)
        if not isinstance(value, str) or not value:
            continue
        result = check_for_abusive_content(value, settings)
        if not result.is_appropriate:
            flagged_fields.append(field_name)
            total_flags += len(result.flagged_words)

    return ProfileModerationResult(
        is_appropriate=not flagged_fields,
        flagged_fields=flagged_fields,
        moderation_score=min(1.0, total_flags / settings.profile_score_divisor),
    )


def generate_moderation_report(
    content: Any,
    content_type: str,
    settings: Optional[ModerationSettings] = None,
) -> ModerationReport:
    """
    Moderate content by type and tag the result for the review queue.

    "profile" runs the profile check, "message" the message check; any other
    type scans the content as text, serializing non-string content to JSON.
    needs_review is set for inappropriate content or a score above 0.5.
    """
    settings = settings or load_moderation_settings()

    if content_type == "profile":
        result = check_profile_content(content, settings)
    elif content_type == "message":
        result = check_message_content(content, settings)
    else:
        result = check_for_abusive_content(_as_text(content), settings)

    report = ModerationReport(
        **result.model_dump(),
        content_type=content_type,
        checked_at=datetime.now(timezone.utc),
        needs_review=not result.is_appropriate or result.moderation_score > settings.review_threshold,
    )
    if report.needs_review:
        logger.info(f"Content needs review [type={content_type} score={report.moderation_score}]")
    return report


def resolve_message_status(result: ModerationResult, settings: Optional[ModerationSettings] = None) -> str:
    """Status for a new chat message: approved unless flagged (and not auto-approved)."""
    settings = settings or load_moderation_settings()
    if result.is_appropriate or settings.auto_approve_messages:
        return MESSAGE_STATUS_APPROVED
    return MESSAGE_STATUS_PENDING


def _as_text(content: Any) -> str:
    if isinstance(content, str):
        return content
    if isinstance(content, Profile):
        content = content.to_wire()
    elif isinstance(content, BaseModel):
        content = content.model_dump(mode="json")
    elif isinstance(content, Mapping):
        content = dict(content)
    return json.dumps(content, ensure_ascii=False, default=str)
