"""Well-known shell families resolvable by `source:` in profile config."""

from collections.abc import Mapping

GIT_BASH_SOURCE = "Git Bash"
CYGWIN_SOURCE = "Cygwin"
POWERSHELL_SOURCE = "PowerShell"

LOGIN_ARGS = ("--login",)

# Set only for a 32-bit process on 64-bit Windows
WOW64_ENV_MARKER = "PROCESSOR_ARCHITEW6432"


def cygwin_paths(home_drive: str) -> tuple[str, ...]:
    """Default Cygwin bash locations under a drive root."""
    return (
        f"{home_drive}\\cygwin64\\bin\\bash.exe",
        f"{home_drive}\\cygwin\\bin\\bash.exe",
    )


def system_folder_name(environ: Mapping[str, str]) -> str:
    """System32, or Sysnative when WOW64 would redirect System32."""
    return "Sysnative" if WOW64_ENV_MARKER in environ else "System32"
