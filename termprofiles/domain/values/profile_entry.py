"""Declared (unvalidated) profile entries."""

from dataclasses import dataclass
from enum import Enum
from typing import Final, Literal

from .terminal_profile import ProfileArgs, normalize_args


class _Removed(Enum):
    """Sentinel type for override values that delete a profile."""

    REMOVED = "removed"

    def __repr__(self) -> str:
        return "REMOVED"


REMOVED: Final = _Removed.REMOVED


@dataclass(frozen=True, slots=True)
class SourceProfile:
    """Profile that refers to a well-known shell family by name."""

    source: str


@dataclass(frozen=True, slots=True)
class PathProfile:
    """Profile with explicit candidate paths, tried in order."""

    paths: tuple[str, ...]
    args: ProfileArgs = None

    @classmethod
    def create(
        cls,
        path: str | list[str] | tuple[str, ...],
        args: list[str] | tuple[str, ...] | str | None = None,
    ) -> "PathProfile":
        """Create from a single path or a path list."""
        paths = (path,) if isinstance(path, str) else tuple(path)
        return cls(paths=paths, args=normalize_args(args))


ProfileEntry = SourceProfile | PathProfile
ProfileOverride = ProfileEntry | Literal[_Removed.REMOVED]
