"""Ports for external processes and installation enumeration."""

from collections.abc import AsyncIterator, Callable, Sequence
from typing import Protocol

from ..values import PowerShellInstallation

PowerShellEnumerator = Callable[[], AsyncIterator[PowerShellInstallation]]


class CommandRunner(Protocol):
    """Protocol for running a short-lived command and capturing its output."""

    async def run(self, args: Sequence[str]) -> bytes:
        """Run the command and return raw stdout.

        Raises:
            OSError: If the command cannot be launched.
            subprocess.CalledProcessError: If it exits non-zero.
        """
        ...
