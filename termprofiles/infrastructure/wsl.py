"""WSL distribution enumeration via `wsl.exe -l`."""

import logging
import re
import subprocess

from termprofiles.application.ports import WslEnumerationError
from termprofiles.domain import CommandRunner, TerminalProfile

from .process import AsyncSubprocessRunner

logger = logging.getLogger(__name__)

LIST_COMMAND = ("wsl.exe", "-l")

# wsl.exe writes UTF-16LE (A -> 0x41 0x00)
WSL_OUTPUT_ENCODING = "utf-16-le"

DEFAULT_SUFFIX = re.compile(r" \(Default\)$")

# docker-desktop and docker-desktop-data are internal to Docker Desktop
RESERVED_PREFIX = "docker-desktop"


def parse_distro_list(output: str) -> list[str]:
    """Extract distribution names from `wsl.exe -l` output.

    The first non-blank line is a header and is dropped.
    """
    lines = [line for line in re.split(r"[\r\n]", output) if line.strip()]
    names = []
    for line in lines[1:]:
        name = DEFAULT_SUFFIX.sub("", line)
        if not name:
            continue
        if name.startswith(RESERVED_PREFIX):
            continue
        names.append(name)
    return names


class WslDistroEnumerator:
    """List installed WSL distributions as terminal profiles."""

    def __init__(self, runner: CommandRunner | None = None) -> None:
        self._runner = runner or AsyncSubprocessRunner()

    async def list_distros(self) -> list[str]:
        """Get installed distribution names.

        Raises:
            WslEnumerationError: If wsl.exe fails to launch or exits non-zero.
        """
        try:
            raw = await self._runner.run(LIST_COMMAND)
        except (OSError, subprocess.CalledProcessError) as e:
            logger.debug("wsl.exe -l failed: %s", e)
            raise WslEnumerationError() from e
        output = raw.decode(WSL_OUTPUT_ENCODING, errors="replace").lstrip("\ufeff")
        return parse_distro_list(output)

    async def get_profiles(self, wsl_path: str) -> list[TerminalProfile]:
        """Build one profile per distribution, launched via wsl_path."""
        return [
            TerminalProfile(
                profile_name=f"{name} (WSL)",
                path=wsl_path,
                args=("-d", name),
            )
            for name in await self.list_distros()
        ]
