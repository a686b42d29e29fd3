"""Tests for the compatibility weight registry and config loading."""

from pathlib import Path

import pytest

import zawaj
from tests.conftest import make_profile
from zawaj.config import get_config_dir
from zawaj.scorers.compatibility import calculate_compatibility
from zawaj.scorers.weight_registry import (
    DEFAULT_WEIGHTS,
    FACTOR_KEYS,
    get_weight,
    get_weights,
    validate_weights,
)

CUSTOM_YAML = """
weights:
  age: 10
  education: 10
  location: 20
  religious_commitment: 30
  marriage_type: 10
  children: 10
  employment: 10
"""


class TestDefaults:
    def test_defaults_sum_to_100(self):
        assert sum(DEFAULT_WEIGHTS.values()) == 100
        assert list(DEFAULT_WEIGHTS) == FACTOR_KEYS

    def test_shipped_config_matches_defaults(self):
        assert (get_config_dir() / "compatibility_weights.yaml").exists()
        assert get_weights() == DEFAULT_WEIGHTS

    def test_default_config_dir_inside_package(self):
        """YAML defaults ship with the package, not beside it."""
        package_dir = Path(zawaj.__file__).parent
        assert get_config_dir() == package_dir / "defaults"
        assert (package_dir / "defaults" / "moderation.yaml").exists()

    def test_missing_config_falls_back(self, config_dir):
        assert get_weights() == DEFAULT_WEIGHTS

    def test_get_weights_returns_copy(self):
        weights = get_weights()
        weights["age"] = 99
        assert get_weight("age") == 20

    def test_unknown_factor(self):
        with pytest.raises(KeyError):
            get_weight("height")


class TestCustomConfig:
    def test_loaded_from_config_dir(self, config_dir):
        (config_dir / "compatibility_weights.yaml").write_text(CUSTOM_YAML, encoding="utf-8")
        assert get_weight("religious_commitment") == 30
        assert get_weight("location") == 20

    def test_scoring_uses_loaded_weights(self, config_dir):
        (config_dir / "compatibility_weights.yaml").write_text(CUSTOM_YAML, encoding="utf-8")
        a = make_profile(location={"city": "Jeddah", "state": "Makkah"})
        b = make_profile(location={"city": "Taif", "state": "Makkah"})
        result = calculate_compatibility(a, b)
        # location half credit is 20 // 2
        assert result.score == 10 + 10 + 10 + 30 + 10 + 10 + 10


class TestValidateWeights:
    def test_wrong_total(self):
        with pytest.raises(ValueError, match="sum to 110"):
            validate_weights({**DEFAULT_WEIGHTS, "age": 30})

    def test_missing_key(self):
        weights = dict(DEFAULT_WEIGHTS)
        del weights["employment"]
        with pytest.raises(ValueError, match="missing"):
            validate_weights(weights)

    def test_extra_key(self):
        with pytest.raises(ValueError, match="unexpected"):
            validate_weights({**DEFAULT_WEIGHTS, "height": 0})

    def test_non_integer_weight(self):
        with pytest.raises(ValueError, match="non-negative integer"):
            validate_weights({**DEFAULT_WEIGHTS, "age": 19.5, "education": 15.5})

    def test_bad_config_file_rejected(self, config_dir):
        (config_dir / "compatibility_weights.yaml").write_text("weights:\n  age: 100\n", encoding="utf-8")
        with pytest.raises(ValueError):
            get_weights()
