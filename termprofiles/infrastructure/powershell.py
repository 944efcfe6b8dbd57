"""PowerShell installation discovery on Windows."""

import asyncio
import ntpath
import os
import re
import sys
from collections.abc import AsyncIterator, Mapping
from types import ModuleType

from termprofiles.domain import PowerShellInstallation, system_folder_name

_STABLE_DIR = re.compile(r"^(\d+(?:\.\d+)*)$")
_PREVIEW_DIR = re.compile(r"^(\d+(?:\.\d+)*)-preview$")


def _version_key(version: str) -> tuple[int, ...]:
    return tuple(int(p) for p in version.split("."))


def _pick_version_dir(names: list[str], pattern: re.Pattern[str]) -> str | None:
    """Return the directory name with the highest version matching pattern."""
    matches = [(m.group(1), name) for name in names if (m := pattern.match(name))]
    if not matches:
        return None
    return max(matches, key=lambda item: _version_key(item[0]))[1]


def _listdir(path: str) -> list[str]:
    try:
        return os.listdir(path)
    except OSError:
        return []


class PowerShellLocator:
    """Enumerate PowerShell installations in preference order.

    Only installations whose executable exists are yielded. Nothing is
    yielded when not running on Windows.
    """

    def __init__(
        self,
        environ: Mapping[str, str] | None = None,
        is_windows: bool | None = None,
        path_module: ModuleType = ntpath,
    ) -> None:
        self._environ = os.environ if environ is None else environ
        self._is_windows = sys.platform == "win32" if is_windows is None else is_windows
        self._path = path_module

    async def __call__(self) -> AsyncIterator[PowerShellInstallation]:
        if not self._is_windows:
            return
        for display_name, exe_path in await asyncio.to_thread(self._candidates):
            if await asyncio.to_thread(os.path.isfile, exe_path):
                yield PowerShellInstallation(display_name=display_name, exe_path=exe_path)

    def _candidates(self) -> list[tuple[str, str]]:
        join = self._path.join
        candidates: list[tuple[str, str]] = []

        program_files = self._environ.get("ProgramFiles")
        if program_files:
            root = join(program_files, "PowerShell")
            names = _listdir(root)
            stable = _pick_version_dir(names, _STABLE_DIR)
            if stable:
                candidates.append(("PowerShell", join(root, stable, "pwsh.exe")))
            preview = _pick_version_dir(names, _PREVIEW_DIR)
            if preview:
                candidates.append(("PowerShell Preview", join(root, preview, "pwsh.exe")))

        program_files_x86 = self._environ.get("ProgramFiles(x86)")
        if program_files_x86:
            root = join(program_files_x86, "PowerShell")
            stable = _pick_version_dir(_listdir(root), _STABLE_DIR)
            if stable:
                candidates.append(("PowerShell (x86)", join(root, stable, "pwsh.exe")))

        local_app_data = self._environ.get("LOCALAPPDATA")
        if local_app_data:
            candidates.append(
                (
                    "PowerShell (Store)",
                    join(local_app_data, "Microsoft", "WindowsApps", "pwsh.exe"),
                )
            )

        windir = self._environ.get("windir") or self._environ.get("WINDIR")
        if windir:
            system_dir = join(windir, system_folder_name(self._environ))
            candidates.append(
                (
                    "Windows PowerShell",
                    join(system_dir, "WindowsPowerShell", "v1.0", "powershell.exe"),
                )
            )

        return candidates
