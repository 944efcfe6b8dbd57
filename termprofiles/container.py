"""Dependency container - holds all wired dependencies."""

from collections.abc import Sequence
from dataclasses import dataclass

from termprofiles.application.services import ProfileDetectionService
from termprofiles.domain import TerminalProfile
from termprofiles.infrastructure.config import TerminalProfilesConfig
from termprofiles.infrastructure.registry import ProfileSourceRegistry


@dataclass(frozen=True)
class Container:
    """Immutable dependency container.

    All dependencies are wired at startup and cannot be modified.
    The registry is shared so its one-time build happens once per process.
    """

    # Services
    detection_service: ProfileDetectionService

    # Registry
    profile_sources: ProfileSourceRegistry

    # Configuration
    config: TerminalProfilesConfig

    async def detect_profiles(
        self,
        quick_launch_only: bool = False,
        test_paths: Sequence[str] | None = None,
    ) -> list[TerminalProfile]:
        """Detect profiles using the loaded configuration."""
        return await self.detection_service.detect_available_profiles(
            quick_launch_only=quick_launch_only,
            config=self.config,
            test_paths=test_paths,
        )
