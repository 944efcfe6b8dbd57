"""System shells port."""

from typing import Protocol


class ShellsFileReader(Protocol):
    """Protocol for reading the system registry of login shells."""

    async def read_shells(self) -> list[str]:
        """Get shell paths, one per non-comment line.

        Raises:
            OSError: If the shells file cannot be read.
        """
        ...
