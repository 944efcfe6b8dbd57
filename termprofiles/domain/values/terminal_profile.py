"""Terminal profile value objects."""

from dataclasses import dataclass
from typing import Any

ProfileArgs = tuple[str, ...] | str | None


def normalize_args(args: list[str] | tuple[str, ...] | str | None) -> ProfileArgs:
    """Freeze an argument list, keeping the single-string form as given."""
    if args is None or isinstance(args, str):
        return args
    return tuple(args)


@dataclass(frozen=True, slots=True)
class TerminalProfile:
    """A validated, launchable shell profile (value object).

    Emitted only after at least one candidate path passed validation.
    """

    profile_name: str
    path: str
    args: ProfileArgs = None

    def __post_init__(self) -> None:
        if not self.profile_name:
            raise ValueError("Profile name cannot be empty")
        if not self.path:
            raise ValueError("Profile path cannot be empty")

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the camel-case profile record."""
        data: dict[str, Any] = {"profileName": self.profile_name, "path": self.path}
        if self.args is not None:
            data["args"] = self.args if isinstance(self.args, str) else list(self.args)
        return data


@dataclass(frozen=True, slots=True)
class PotentialSource:
    """Candidate installation paths for a well-known shell family."""

    profile_name: str
    paths: tuple[str, ...]
    args: tuple[str, ...] | None = None


@dataclass(frozen=True, slots=True)
class PowerShellInstallation:
    """A discovered PowerShell executable."""

    display_name: str
    exe_path: str
