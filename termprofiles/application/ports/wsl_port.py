"""WSL distribution port."""

from typing import Protocol

from termprofiles.domain import TerminalProfile

WSL_ENUMERATION_FAILED = "Problem occurred when getting wsl distros"


class WslEnumerationError(RuntimeError):
    """Raised when `wsl.exe -l` cannot be run or exits non-zero."""

    def __init__(self, message: str = WSL_ENUMERATION_FAILED) -> None:
        super().__init__(message)


class WslProfileSource(Protocol):
    """Protocol for listing WSL distributions as profiles."""

    async def get_profiles(self, wsl_path: str) -> list[TerminalProfile]:
        """Get one profile per installed distribution.

        Raises:
            WslEnumerationError: If the distribution list cannot be read.
        """
        ...
