"""Result models returned by the scorers and validators.

Controllers serialize these straight into JSON responses, so the wire names
are camelCase (``model_dump(by_alias=True)`` or ``to_wire()``) while Python
code uses the snake_case attributes.
"""

from datetime import datetime
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> dict:
        """JSON-ready camelCase dict."""
        return self.model_dump(by_alias=True, mode="json", exclude_none=True)


# =============================================================================
# Compatibility
# =============================================================================


class FactorResult(WireModel):
    """One weighted attribute's contribution to a compatibility score."""

    factor: str = Field(description="Factor name (e.g., 'age', 'location')")
    weight: int = Field(description="Maximum points this factor can contribute")
    points: Union[int, float] = Field(default=0, description="Points actually contributed")
    match: bool = Field(description="Whether the factor counts as a match")
    details: dict[str, Any] = Field(default_factory=dict, description="Values compared on each side")


class CompatibilityResult(WireModel):
    score: int = Field(ge=0, le=100)
    factors: list[FactorResult] = Field(default_factory=list)


class CategoryScore(WireModel):
    """Per-factor grouping of earned versus possible points."""

    total_weight: int = 0
    earned_points: Union[int, float] = 0
    factors: list[FactorResult] = Field(default_factory=list)


class CompatibilityDetails(WireModel):
    overall_score: int
    matching_factors: list[FactorResult] = Field(default_factory=list)
    non_matching_factors: list[FactorResult] = Field(default_factory=list)
    category_scores: dict[str, CategoryScore] = Field(default_factory=dict)
    details: list[FactorResult] = Field(default_factory=list)


class RankedCandidate(BaseModel):
    """A candidate profile paired with its score against the searcher."""

    index: int = Field(ge=0, description="Position in the input candidate list")
    candidate: Any
    result: CompatibilityResult

    @property
    def score(self) -> int:
        return self.result.score


# =============================================================================
# Moderation
# =============================================================================


class ModerationResult(WireModel):
    is_appropriate: bool
    flagged_words: list[str] = Field(default_factory=list)
    moderation_score: float = Field(ge=0.0, le=1.0)


class ProfileModerationResult(WireModel):
    is_appropriate: bool
    flagged_fields: list[str] = Field(default_factory=list)
    moderation_score: float = Field(ge=0.0, le=1.0)


class ModerationReport(WireModel):
    """A moderation result tagged for the admin review queue.

    Carries ``flagged_words`` for text/message checks and ``flagged_fields``
    for profile checks; the other one stays unset.
    """

    is_appropriate: bool
    moderation_score: float = Field(ge=0.0, le=1.0)
    flagged_words: Optional[list[str]] = None
    flagged_fields: Optional[list[str]] = None
    content_type: str
    checked_at: datetime
    needs_review: bool


# =============================================================================
# Completeness
# =============================================================================


class CompletionDetails(WireModel):
    completeness: int = Field(ge=0, le=100)
    is_complete: bool
    missing_fields: list[str] = Field(default_factory=list)
    completion_message: str
