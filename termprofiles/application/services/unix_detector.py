"""Profile detection on Linux and macOS."""

import logging
import posixpath
from collections.abc import Mapping, Sequence

from termprofiles.domain import (
    PathProfile,
    ProfileEntry,
    ProfileOverride,
    TerminalProfile,
    merge_profiles,
)

from ..ports import ShellsFileReader
from .profile_transformer import ProfileTransformer

logger = logging.getLogger(__name__)


def _display_name(shell: str) -> str:
    """Basename of a shell path, ignoring trailing slashes."""
    return posixpath.basename(shell.rstrip("/")) or shell


class UnixProfileDetector:
    """Detect shells listed in the system shells file."""

    def __init__(
        self,
        transformer: ProfileTransformer,
        shells_reader: ShellsFileReader,
        log: logging.Logger | None = None,
    ) -> None:
        self._transformer = transformer
        self._shells_reader = shells_reader
        self._logger = log or logger

    async def detect(
        self,
        quick_launch_only: bool = False,
        config_profiles: Mapping[str, ProfileOverride] | None = None,
        test_paths: Sequence[str] | None = None,
    ) -> list[TerminalProfile]:
        """Detect available profiles.

        Args:
            quick_launch_only: Skip reading the shells file.
            config_profiles: User overrides keyed by profile name.
            test_paths: Shell paths to use instead of the shells file.

        Returns:
            Validated profiles.
        """
        detected: dict[str, ProfileEntry] = {}

        if not quick_launch_only:
            if test_paths is not None:
                shells = list(test_paths)
            else:
                shells = await self._shells_reader.read_shells()
            for shell in shells:
                detected[_display_name(shell)] = PathProfile(paths=(shell,))
            self._logger.debug("system shells: %s", shells)

        merged = merge_profiles(detected, config_profiles)
        return await self._transformer.transform(merged.items())
