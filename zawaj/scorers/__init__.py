"""Deterministic scoring modules for profile matching."""

from zawaj.scorers.compatibility import (
    CompatibilityScorer,
    calculate_compatibility,
    get_compatibility_details,
    rank_candidates,
)
from zawaj.scorers.weight_registry import (
    DEFAULT_WEIGHTS,
    FACTOR_KEYS,
    get_weight,
    get_weights,
    validate_weights,
)

__all__ = [
    # Compatibility
    "CompatibilityScorer",
    "calculate_compatibility",
    "get_compatibility_details",
    "rank_candidates",
    # Weights
    "DEFAULT_WEIGHTS",
    "FACTOR_KEYS",
    "get_weight",
    "get_weights",
    "validate_weights",
]
