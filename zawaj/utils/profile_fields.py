"""
Null-safe access to nested profile fields.

Profiles come in as plain camelCase dicts (straight from the API layer) or
as Profile models. Every lookup here treats a missing namespace, a namespace
that is not a mapping, or a missing/None leaf as absent, so callers never
need to guard against partially-populated or malformed profiles.
"""

from collections.abc import Mapping
from typing import Any, Optional, Union

from zawaj.schemas.profile import Profile

ProfileLike = Union[Profile, Mapping, None]


def as_profile_data(profile: ProfileLike) -> Mapping:
    """
    Normalize a profile argument to a camelCase mapping.

    Args:
        profile: Profile model, camelCase mapping, or None

    Returns:
        Mapping view of the profile (empty for None)

    Raises:
        TypeError: If profile is neither a Profile, a mapping nor None
    """
    if profile is None:
        return {}
    if isinstance(profile, Profile):
        return profile.model_dump(by_alias=True)
    if isinstance(profile, Mapping):
        return profile
    raise TypeError(f"Expected a Profile or mapping, got {type(profile).__name__}")


def resolve_path(data: Mapping, path: str) -> Optional[Any]:
    """Walk a dotted path ("basicInfo.age"); None if any link is absent."""
    current: Any = data
    for part in path.split("."):
        if not isinstance(current, Mapping):
            return None
        current = current.get(part)
        if current is None:
            return None
    return current


def get_field(profile: ProfileLike, namespace: str, key: str) -> Optional[Any]:
    """Leaf value of profile[namespace][key], or None when absent."""
    return resolve_path(as_profile_data(profile), f"{namespace}.{key}")


def get_section(profile: ProfileLike, namespace: str) -> Optional[Mapping]:
    """A profile namespace if it is present and a mapping, else None."""
    section = as_profile_data(profile).get(namespace)
    return section if isinstance(section, Mapping) else None


def has_value(value: Any) -> bool:
    """True unless value is None or an empty string."""
    return value is not None and value != ""


def as_number(value: Any) -> Optional[float]:
    """Numeric value or None; bools and non-numbers count as absent."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value
