"""Tests for null-safe profile field access and rounding."""

import pytest

from zawaj.schemas.profile import BasicInfo, LocationInfo, Profile
from zawaj.utils.profile_fields import (
    as_number,
    as_profile_data,
    get_field,
    get_section,
    has_value,
    resolve_path,
)
from zawaj.utils.rounding import round_half_up


class TestAsProfileData:
    def test_none_is_empty(self):
        assert as_profile_data(None) == {}

    def test_mapping_passthrough(self, male_profile):
        assert as_profile_data(male_profile) is male_profile

    def test_model_uses_camel_case(self):
        data = as_profile_data(Profile(basic_info=BasicInfo(age=30)))
        assert data["basicInfo"]["age"] == 30

    @pytest.mark.parametrize("bad", ["profile", 42, ["basicInfo"]])
    def test_rejects_non_mappings(self, bad):
        with pytest.raises(TypeError):
            as_profile_data(bad)


class TestFieldAccess:
    def test_resolve_path(self, male_profile):
        assert resolve_path(male_profile, "location.city") == "Riyadh"
        assert resolve_path(male_profile, "location.city.name") is None
        assert resolve_path(male_profile, "guardianInfo.name") is None

    def test_non_mapping_namespace(self):
        assert get_field({"basicInfo": "Ahmed"}, "basicInfo", "age") is None
        assert get_section({"location": ["Riyadh"]}, "location") is None

    def test_camel_input_on_model(self):
        profile = Profile.model_validate({"location": {"city": "Jeddah"}, "extraKey": 1})
        assert isinstance(profile.location, LocationInfo)
        assert get_field(profile, "location", "city") == "Jeddah"
        assert profile.to_wire() == {"location": {"city": "Jeddah"}, "extraKey": 1}

    @pytest.mark.parametrize("value,expected", [(None, False), ("", False), (0, True), (False, True), ("x", True)])
    def test_has_value(self, value, expected):
        assert has_value(value) is expected

    @pytest.mark.parametrize("value,expected", [(30, 30), (29.5, 29.5), ("30", None), (True, None), (None, None)])
    def test_as_number(self, value, expected):
        assert as_number(value) == expected


class TestRoundHalfUp:
    @pytest.mark.parametrize("value,expected", [(12.5, 13), (0.5, 1), (90.909, 91), (91.666, 92), (72.7, 73), (3.49, 3)])
    def test_rounding(self, value, expected):
        assert round_half_up(value) == expected
