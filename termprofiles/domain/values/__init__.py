"""Domain value objects - immutable data structures."""

from .profile_entry import (
    REMOVED,
    PathProfile,
    ProfileEntry,
    ProfileOverride,
    SourceProfile,
)
from .profile_source import (
    CYGWIN_SOURCE,
    GIT_BASH_SOURCE,
    LOGIN_ARGS,
    POWERSHELL_SOURCE,
    WOW64_ENV_MARKER,
    cygwin_paths,
    system_folder_name,
)
from .terminal_profile import (
    PotentialSource,
    PowerShellInstallation,
    ProfileArgs,
    TerminalProfile,
    normalize_args,
)
from .workspace_folder import WorkspaceFolder

__all__ = [
    "TerminalProfile",
    "PotentialSource",
    "PowerShellInstallation",
    "ProfileArgs",
    "normalize_args",
    "SourceProfile",
    "PathProfile",
    "ProfileEntry",
    "ProfileOverride",
    "REMOVED",
    "WorkspaceFolder",
    "GIT_BASH_SOURCE",
    "CYGWIN_SOURCE",
    "POWERSHELL_SOURCE",
    "LOGIN_ARGS",
    "cygwin_paths",
    "WOW64_ENV_MARKER",
    "system_folder_name",
]
