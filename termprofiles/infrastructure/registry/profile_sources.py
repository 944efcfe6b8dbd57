"""Registry of well-known shell families and their install locations."""

import asyncio
import logging
import os
from collections.abc import Mapping

from termprofiles.domain import (
    CYGWIN_SOURCE,
    GIT_BASH_SOURCE,
    LOGIN_ARGS,
    PotentialSource,
    PowerShellEnumerator,
    cygwin_paths,
)

logger = logging.getLogger(__name__)


class ProfileSourceRegistry:
    """Lookup table from source identifier to candidate install paths.

    Built once by ensure_initialized(); concurrent first callers wait on
    a lock and observe the same completed table. Read-only afterwards.
    """

    def __init__(
        self,
        environ: Mapping[str, str] | None = None,
        powershell_enumerator: PowerShellEnumerator | None = None,
        log: logging.Logger | None = None,
    ) -> None:
        self._environ = os.environ if environ is None else environ
        self._powershell_enumerator = powershell_enumerator
        self._logger = log or logger
        self._sources: dict[str, PotentialSource] = {}
        self._initialized = False
        self._lock = asyncio.Lock()

    @property
    def initialized(self) -> bool:
        return self._initialized

    async def ensure_initialized(self) -> None:
        """Build the table on first call. Safe to call repeatedly."""
        if self._initialized:
            return
        async with self._lock:
            if self._initialized:
                return
            sources = self._builtin_sources()
            if self._powershell_enumerator is not None:
                async for install in self._powershell_enumerator():
                    sources[install.display_name] = PotentialSource(
                        profile_name=install.display_name,
                        paths=(install.exe_path,),
                    )
            self._sources = sources
            self._initialized = True
            self._logger.debug("profile sources registered: %s", list(sources))

    def get(self, source: str) -> PotentialSource | None:
        """Get a source by identifier.

        Raises:
            RuntimeError: If called before ensure_initialized().
        """
        if not self._initialized:
            raise RuntimeError("Profile source registry is not initialized")
        return self._sources.get(source)

    def __contains__(self, source: object) -> bool:
        return self._initialized and source in self._sources

    def __len__(self) -> int:
        return len(self._sources)

    def _env(self, name: str) -> str:
        # Unset variables render as "None" so the path fails validation
        return str(self._environ.get(name))

    def _builtin_sources(self) -> dict[str, PotentialSource]:
        program_w6432 = self._env("ProgramW6432")
        program_files = self._env("ProgramFiles")
        local_app_data = self._env("LocalAppData")
        home_drive = self._env("HOMEDRIVE")
        return {
            GIT_BASH_SOURCE: PotentialSource(
                profile_name=GIT_BASH_SOURCE,
                paths=(
                    f"{program_w6432}\\Git\\bin\\bash.exe",
                    f"{program_w6432}\\Git\\usr\\bin\\bash.exe",
                    f"{program_files}\\Git\\bin\\bash.exe",
                    f"{program_files}\\Git\\usr\\bin\\bash.exe",
                    f"{local_app_data}\\Programs\\Git\\bin\\bash.exe",
                ),
                args=LOGIN_ARGS,
            ),
            CYGWIN_SOURCE: PotentialSource(
                profile_name=CYGWIN_SOURCE,
                paths=cygwin_paths(home_drive),
                args=LOGIN_ARGS,
            ),
        }
