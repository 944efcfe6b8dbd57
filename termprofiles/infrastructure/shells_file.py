"""Reader for the system login shells file."""

import asyncio
from pathlib import Path

SHELLS_FILE = Path("/etc/shells")


def parse_shells(contents: str) -> list[str]:
    """Get shell paths, skipping comments and blank lines."""
    shells = []
    for line in contents.split("\n"):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        shells.append(stripped)
    return shells


class SystemShellsReader:
    """Read shell paths from /etc/shells."""

    def __init__(self, path: Path | str = SHELLS_FILE) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    async def read_shells(self) -> list[str]:
        contents = await asyncio.to_thread(self._path.read_text, encoding="utf-8")
        return parse_shells(contents)
