"""Filesystem stat port - interface for checking candidate paths."""

from typing import Protocol


class StatResult(Protocol):
    """File type information returned by a stat provider."""

    def is_file(self) -> bool:
        """True for a regular file."""
        ...

    def is_symbolic_link(self) -> bool:
        """True for a symbolic link."""
        ...


class StatProvider(Protocol):
    """Protocol for stat operations.

    Infrastructure implements this against the real filesystem,
    tests substitute an in-memory fake.
    """

    async def stat(self, path: str) -> StatResult:
        """Stat a path, following symbolic links.

        Raises:
            OSError: If the path cannot be stat'ed.
        """
        ...

    async def lstat(self, path: str) -> StatResult:
        """Stat a path without following a final symbolic link.

        Raises:
            OSError: If the path cannot be stat'ed.
        """
        ...
