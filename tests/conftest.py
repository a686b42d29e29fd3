"""Shared fixtures for matching, moderation and completeness tests.

Profiles are plain camelCase dicts, the shape the profile API hands over.
"""

import copy
import sys
from pathlib import Path

import pytest

# Add repo root to path so tests can import zawaj without installing
sys.path.insert(0, str(Path(__file__).parent.parent))

from zawaj.scorers import weight_registry  # noqa: E402
from zawaj.validators import moderation  # noqa: E402

BASE_PROFILE = {
    "basicInfo": {"name": "Ahmed", "age": 30, "gender": "m"},
    "location": {"city": "Riyadh", "state": "Riyadh", "country": "Saudi Arabia"},
    "education": {"level": "bachelor"},
    "professional": {"occupation": "Engineer", "currentJob": "Site engineer"},
    "religiousInfo": {"religiousLevel": "practicing"},
    "preferences": {"marriageType": "traditional", "children": "yes"},
    "personalInfo": {
        "about": "I enjoy reading and travel.",
        "marriageGoals": "A calm and loving home.",
        "hasBeard": True,
    },
    "financialInfo": {"situation": "good"},
}


def make_profile(**sections) -> dict:
    """Deep copy of BASE_PROFILE with whole sections or single keys overridden.

    make_profile(basicInfo={"age": 33}) merges into basicInfo;
    make_profile(location=None) removes the section.
    """
    profile = copy.deepcopy(BASE_PROFILE)
    for section, values in sections.items():
        if values is None:
            profile.pop(section, None)
        elif isinstance(values, dict) and isinstance(profile.get(section), dict):
            profile[section].update(values)
        else:
            profile[section] = values
    return profile


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch):
    """Drop cached config so each test sees the config dir it sets up."""
    monkeypatch.delenv("ZAWAJ_CONFIG_DIR", raising=False)
    weight_registry.clear_cache()
    moderation.clear_cache()
    yield
    weight_registry.clear_cache()
    moderation.clear_cache()


@pytest.fixture
def male_profile():
    """Fully completed male profile."""
    return make_profile()


@pytest.fixture
def female_profile():
    """Fully completed female profile with guardian details."""
    return make_profile(
        basicInfo={"name": "Fatima", "age": 27, "gender": "f"},
        professional={"occupation": "Teacher", "currentJob": "School teacher"},
        personalInfo={
            "about": "Teacher who loves gardening.",
            "marriageGoals": "Building a family on deen.",
            "wearHijab": True,
            "hasBeard": None,
        },
        guardianInfo={"name": "Yusuf", "phone": "+966500000000"},
        financialInfo=None,
    )


@pytest.fixture
def config_dir(tmp_path, monkeypatch):
    """Empty config dir selected through ZAWAJ_CONFIG_DIR."""
    monkeypatch.setenv("ZAWAJ_CONFIG_DIR", str(tmp_path))
    return tmp_path
