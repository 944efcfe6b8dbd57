"""Merge built-in profiles with user overrides."""

from collections.abc import Mapping

from ..values import REMOVED, ProfileEntry, ProfileOverride


def merge_profiles(
    builtins: Mapping[str, ProfileEntry],
    overrides: Mapping[str, ProfileOverride] | None = None,
) -> dict[str, ProfileEntry]:
    """Apply overrides on top of built-in profiles.

    A REMOVED override deletes the key. Any other override replaces the
    entry in place, or appends it when the key is new. Keys are compared
    case-sensitively. Neither input is modified.

    Returns:
        Merged profiles in insertion order.
    """
    merged = dict(builtins)
    for name, value in (overrides or {}).items():
        if value is REMOVED:
            merged.pop(name, None)
        else:
            merged[name] = value
    return merged
