"""Path validation for candidate shell executables."""

import logging
import os.path
from collections.abc import Sequence
from types import ModuleType

from termprofiles.logging_setup import TRACE

from ..ports import StatProvider, StatResult
from ..values import ProfileArgs, TerminalProfile

logger = logging.getLogger(__name__)


def _is_acceptable(result: StatResult) -> bool:
    return result.is_file() or result.is_symbolic_link()


class PathValidator:
    """Pick the first usable path out of an ordered candidate list.

    Candidates are tried left to right and the first success wins. A bare
    command name (no directory part) is accepted without touching the
    filesystem; it is resolved through PATH when the shell is launched.
    """

    def __init__(
        self,
        stat_provider: StatProvider,
        path_module: ModuleType = os.path,
        log: logging.Logger | None = None,
    ) -> None:
        self._stat_provider = stat_provider
        self._path = path_module
        self._logger = log or logger

    async def validate(
        self,
        label: str,
        paths: Sequence[str],
        args: ProfileArgs = None,
    ) -> TerminalProfile | None:
        """Validate candidate paths for a profile.

        Args:
            label: Profile display name.
            paths: Candidate paths in preference order. Not modified.
            args: Arguments to carry into the profile.

        Returns:
            Profile for the first acceptable path, or None if none passed.
        """
        for current in paths:
            if current == "":
                continue

            if self._path.basename(current) == current:
                return TerminalProfile(profile_name=label, path=current, args=args)

            if await self._exists(current):
                return TerminalProfile(profile_name=label, path=current, args=args)

            self._logger.log(TRACE, "candidate rejected for %s: %s", label, current)

        return None

    async def _exists(self, path: str) -> bool:
        normalized = self._path.normpath(path)
        try:
            if _is_acceptable(await self._stat_provider.stat(normalized)):
                return True
        except OSError as e:
            self._logger.info("stat failed for %s: %s", path, e)

        # Some symlinks on Windows fail stat with permission denied but pass lstat
        try:
            return _is_acceptable(await self._stat_provider.lstat(normalized))
        except OSError:
            return False
