"""Weight Registry: compatibility factor weights.

Loads the per-factor point weights from defaults/compatibility_weights.yaml.
Weights must cover all seven factors and sum to 100. Without a config file
the built-in DEFAULT_WEIGHTS are used.

Usage:
    from zawaj.scorers.weight_registry import get_weights

    weights = get_weights()
    # weights["religious_commitment"] == 20
"""

import logging
from typing import Optional

import yaml

from zawaj.config import get_weights_path
from zawaj.constants import MAX_COMPATIBILITY_SCORE

logger = logging.getLogger(__name__)

# Factor keys in scoring order (must match compatibility factor names)
FACTOR_KEYS = [
    "age",
    "education",
    "location",
    "religious_commitment",
    "marriage_type",
    "children",
    "employment",
]

DEFAULT_WEIGHTS = {
    "age": 20,
    "education": 15,
    "location": 15,
    "religious_commitment": 20,
    "marriage_type": 10,
    "children": 10,
    "employment": 10,
}

# Module-level cache
_weights_cache: Optional[dict[str, int]] = None


def _load_weights() -> dict[str, int]:
    """Load and cache factor weights from YAML."""
    global _weights_cache
    if _weights_cache is not None:
        return _weights_cache

    config_path = get_weights_path()
    if not config_path.exists():
        logger.warning(f"Compatibility weights config not found at {config_path}, using defaults")
        _weights_cache = dict(DEFAULT_WEIGHTS)
        return _weights_cache

    with open(config_path, encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    weights = raw.get("weights", {})
    validate_weights(weights)
    _weights_cache = {key: weights[key] for key in FACTOR_KEYS}
    logger.info(f"Loaded compatibility weights from {config_path}")
    return _weights_cache


def validate_weights(weights: dict[str, int]) -> None:
    """Validate that weights contain the factor keys as ints summing to 100."""
    missing = set(FACTOR_KEYS) - set(weights.keys())
    if missing:
        raise ValueError(f"Compatibility weights missing keys: {sorted(missing)}")
    extra = set(weights.keys()) - set(FACTOR_KEYS)
    if extra:
        raise ValueError(f"Compatibility weights have unexpected keys: {sorted(extra)}")
    for key, value in weights.items():
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ValueError(f"Weight for {key} must be a non-negative integer, got {value!r}")
    total = sum(weights.values())
    if total != MAX_COMPATIBILITY_SCORE:
        raise ValueError(f"Compatibility weights sum to {total}, expected {MAX_COMPATIBILITY_SCORE}")


def get_weights() -> dict[str, int]:
    """Get a copy of the active factor weights."""
    return dict(_load_weights())


def get_weight(factor: str) -> int:
    """Get the weight for a single factor."""
    weights = _load_weights()
    if factor not in weights:
        raise KeyError(f"Unknown compatibility factor '{factor}'")
    return weights[factor]


def clear_cache():
    """Clear the weights cache (useful for testing)."""
    global _weights_cache
    _weights_cache = None
