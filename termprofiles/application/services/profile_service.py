"""Profile detection service - platform dispatch."""

import logging
import sys
from collections.abc import Sequence
from typing import TYPE_CHECKING

from termprofiles.domain import TerminalProfile

from .unix_detector import UnixProfileDetector
from .windows_detector import WindowsProfileDetector

if TYPE_CHECKING:
    from termprofiles.infrastructure.config import TerminalProfilesConfig

logger = logging.getLogger(__name__)


class ProfileDetectionService:
    """Entry point for detecting available terminal profiles."""

    def __init__(
        self,
        windows_detector: WindowsProfileDetector,
        unix_detector: UnixProfileDetector,
        platform: str | None = None,
    ) -> None:
        self._windows_detector = windows_detector
        self._unix_detector = unix_detector
        self._platform = platform or sys.platform

    @property
    def platform(self) -> str:
        return self._platform

    async def detect_available_profiles(
        self,
        quick_launch_only: bool = False,
        config: "TerminalProfilesConfig | None" = None,
        test_paths: Sequence[str] | None = None,
    ) -> list[TerminalProfile]:
        """Detect profiles for the current platform.

        Args:
            quick_launch_only: Restrict detection to the quick launch subset.
            config: Parsed profile configuration.
            test_paths: Shell paths replacing the system shells file (Unix).

        Returns:
            Validated profiles in display order.
        """
        if self._platform == "win32":
            profiles = await self._windows_detector.detect(
                quick_launch_only=quick_launch_only,
                config_profiles=config.entries_for("windows") if config else None,
                show_quick_launch_wsl_profiles=(
                    config.show_quick_launch_wsl_profiles if config else False
                ),
            )
        else:
            key = "osx" if self._platform == "darwin" else "linux"
            profiles = await self._unix_detector.detect(
                quick_launch_only=quick_launch_only,
                config_profiles=config.entries_for(key) if config else None,
                test_paths=test_paths,
            )

        logger.info("detected %d profile(s) on %s", len(profiles), self._platform)
        return profiles
