"""Profile detection on Windows."""

import logging
import os
import platform
import re
from collections.abc import Mapping
from typing import TYPE_CHECKING

from termprofiles.domain import (
    GIT_BASH_SOURCE,
    LOGIN_ARGS,
    POWERSHELL_SOURCE,
    PathProfile,
    ProfileEntry,
    ProfileOverride,
    SourceProfile,
    TerminalProfile,
    cygwin_paths,
    merge_profiles,
    system_folder_name,
)

from ..ports import WslEnumerationError, WslProfileSource
from .profile_transformer import ProfileTransformer

if TYPE_CHECKING:
    from termprofiles.infrastructure.registry import ProfileSourceRegistry

logger = logging.getLogger(__name__)

# First build that ships wsl.exe; older builds only have bash.exe
WSL_EXE_MIN_BUILD = 16299


def get_windows_build_number(version: str | None = None) -> int:
    """Parse the build number out of a "major.minor.build" version string.

    Returns:
        Build number, 0 when it cannot be determined.
    """
    if version is None:
        version = platform.version()
    match = re.match(r"^(\d+)\.(\d+)\.(\d+)", version)
    return int(match.group(3)) if match else 0


class WindowsProfileDetector:
    """Detect shells available on Windows, plus WSL distributions."""

    def __init__(
        self,
        registry: "ProfileSourceRegistry",
        transformer: ProfileTransformer,
        wsl_source: WslProfileSource,
        environ: Mapping[str, str] | None = None,
        build_number: int | None = None,
        log: logging.Logger | None = None,
    ) -> None:
        self._registry = registry
        self._transformer = transformer
        self._wsl_source = wsl_source
        self._environ = os.environ if environ is None else environ
        self._build_number = build_number
        self._logger = log or logger

    @property
    def system32_path(self) -> str:
        """System directory as seen by shells; Sysnative under WOW64."""
        return f"{self._environ.get('windir')}\\{system_folder_name(self._environ)}"

    @property
    def wsl_launcher(self) -> str:
        """wsl.exe on current builds, bash.exe on older ones."""
        build = self._build_number if self._build_number is not None else get_windows_build_number()
        exe = "wsl.exe" if build >= WSL_EXE_MIN_BUILD else "bash.exe"
        return f"{self.system32_path}\\{exe}"

    def builtin_profiles(self) -> dict[str, ProfileEntry]:
        """Built-in candidates, in display order."""
        return {
            "PowerShell": SourceProfile(POWERSHELL_SOURCE),
            "Git Bash": SourceProfile(GIT_BASH_SOURCE),
            "Cygwin": PathProfile(
                paths=cygwin_paths(str(self._environ.get("HOMEDRIVE"))),
                args=LOGIN_ARGS,
            ),
            "Command Prompt": PathProfile(paths=(f"{self.system32_path}\\cmd.exe",)),
        }

    async def detect(
        self,
        quick_launch_only: bool = False,
        config_profiles: Mapping[str, ProfileOverride] | None = None,
        show_quick_launch_wsl_profiles: bool = False,
    ) -> list[TerminalProfile]:
        """Detect available Windows profiles.

        Args:
            quick_launch_only: Skip the built-in candidates.
            config_profiles: User overrides keyed by profile name.
            show_quick_launch_wsl_profiles: List WSL distributions even in
                quick launch mode.

        Returns:
            Validated profiles; WSL distributions last.
        """
        await self._registry.ensure_initialized()

        builtins = {} if quick_launch_only else self.builtin_profiles()
        merged = merge_profiles(builtins, config_profiles)
        profiles = await self._transformer.transform(merged.items())

        if not quick_launch_only or show_quick_launch_wsl_profiles:
            try:
                profiles.extend(await self._wsl_source.get_profiles(self.wsl_launcher))
            except WslEnumerationError as e:
                self._logger.warning("WSL profiles skipped: %s", e)

        return profiles
