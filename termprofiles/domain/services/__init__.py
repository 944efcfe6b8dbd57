"""Domain services - pure business logic operations."""

from .path_validator import PathValidator
from .profile_merger import merge_profiles

__all__ = [
    "PathValidator",
    "merge_profiles",
]
