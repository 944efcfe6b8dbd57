"""Pure domain layer - no infrastructure dependencies."""

# Ports
from .ports import (
    CommandRunner,
    PowerShellEnumerator,
    StatProvider,
    StatResult,
    VariableResolver,
)

# Services
from .services import PathValidator, merge_profiles

# Value Objects
from .values import (
    CYGWIN_SOURCE,
    GIT_BASH_SOURCE,
    LOGIN_ARGS,
    POWERSHELL_SOURCE,
    WOW64_ENV_MARKER,
    REMOVED,
    PathProfile,
    PotentialSource,
    PowerShellInstallation,
    ProfileArgs,
    ProfileEntry,
    ProfileOverride,
    SourceProfile,
    TerminalProfile,
    WorkspaceFolder,
    cygwin_paths,
    normalize_args,
    system_folder_name,
)

__all__ = [
    # Values
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
    # Services
    "PathValidator",
    "merge_profiles",
    # Ports
    "StatProvider",
    "StatResult",
    "VariableResolver",
    "CommandRunner",
    "PowerShellEnumerator",
]
