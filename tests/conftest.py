"""Shared test fixtures and configuration."""

import ntpath
import posixpath
import subprocess
from collections.abc import Sequence

import pytest

from termprofiles.application.services import (
    ProfileTransformer,
    UnixProfileDetector,
    WindowsProfileDetector,
)
from termprofiles.domain import PathValidator, PowerShellInstallation
from termprofiles.infrastructure.registry import ProfileSourceRegistry
from termprofiles.infrastructure.wsl import WslDistroEnumerator

# ============= Environment Fixtures =============


WINDOWS_ENV = {
    "windir": "C:\\Windows",
    "HOMEDRIVE": "C:",
    "ProgramW6432": "C:\\Program Files",
    "ProgramFiles": "C:\\Program Files",
    "LocalAppData": "C:\\Users\\dev\\AppData\\Local",
}


@pytest.fixture
def windows_env():
    """Environment of a 64-bit process on 64-bit Windows."""
    return dict(WINDOWS_ENV)


# ============= Mock Fixtures =============


class FakeStat:
    """Stat result with fixed file type."""

    def __init__(self, is_file: bool = False, is_symlink: bool = False):
        self._is_file = is_file
        self._is_symlink = is_symlink

    def is_file(self) -> bool:
        return self._is_file

    def is_symbolic_link(self) -> bool:
        return self._is_symlink


class FakeStatProvider:
    """In-memory stat provider recording every call."""

    def __init__(
        self,
        files: Sequence[str] = (),
        directories: Sequence[str] = (),
        stat_denied: Sequence[str] = (),
        symlinks: Sequence[str] = (),
    ):
        self.files = set(files)
        self.directories = set(directories)
        # Paths whose stat raises PermissionError but whose lstat succeeds
        self.stat_denied = set(stat_denied)
        self.symlinks = set(symlinks)
        self.calls: list[tuple[str, str]] = []

    async def stat(self, path: str) -> FakeStat:
        self.calls.append(("stat", path))
        if path in self.stat_denied:
            raise PermissionError(13, "Permission denied", path)
        if path in self.files:
            return FakeStat(is_file=True)
        if path in self.directories:
            return FakeStat()
        raise FileNotFoundError(2, "No such file or directory", path)

    async def lstat(self, path: str) -> FakeStat:
        self.calls.append(("lstat", path))
        if path in self.symlinks or path in self.stat_denied:
            return FakeStat(is_symlink=True)
        if path in self.files:
            return FakeStat(is_file=True)
        if path in self.directories:
            return FakeStat()
        raise FileNotFoundError(2, "No such file or directory", path)

    @property
    def stat_paths(self) -> list[str]:
        return [path for kind, path in self.calls if kind == "stat"]


@pytest.fixture
def stat_provider():
    """Empty fake filesystem."""
    return FakeStatProvider()


class FakeRunner:
    """Command runner returning canned output or raising."""

    def __init__(self, output: bytes = b"", error: Exception | None = None):
        self._output = output
        self._error = error
        self.calls: list[list[str]] = []

    async def run(self, args: Sequence[str]) -> bytes:
        self.calls.append(list(args))
        if self._error is not None:
            raise self._error
        return self._output


def wsl_output(*lines: str) -> bytes:
    """Encode lines the way wsl.exe prints them."""
    return "\r\n".join(lines).encode("utf-16-le")


@pytest.fixture
def failing_runner():
    """Runner simulating wsl.exe exiting non-zero."""
    return FakeRunner(error=subprocess.CalledProcessError(1, ["wsl.exe", "-l"]))


def make_powershell_enumerator(*installs: tuple[str, str]):
    """Create an enumerator yielding the given (name, path) pairs."""

    async def enumerate_installs():
        for display_name, exe_path in installs:
            yield PowerShellInstallation(display_name=display_name, exe_path=exe_path)

    return enumerate_installs


# ============= Detector Fixtures =============


def create_windows_detector(
    stat_provider,
    environ,
    runner=None,
    powershell_installs=(),
    build_number: int = 19045,
    variable_resolver=None,
):
    """Wire a Windows detector over fakes."""
    registry = ProfileSourceRegistry(
        environ=environ,
        powershell_enumerator=make_powershell_enumerator(*powershell_installs),
    )
    transformer = ProfileTransformer(
        validator=PathValidator(stat_provider, path_module=ntpath),
        registry=registry,
        variable_resolver=variable_resolver,
    )
    return WindowsProfileDetector(
        registry=registry,
        transformer=transformer,
        wsl_source=WslDistroEnumerator(runner or FakeRunner(wsl_output("Header"))),
        environ=environ,
        build_number=build_number,
    )


class FakeShellsReader:
    """Shells reader with a fixed file body."""

    def __init__(self, shells: Sequence[str] = ()):
        self._shells = list(shells)
        self.reads = 0

    async def read_shells(self) -> list[str]:
        self.reads += 1
        return list(self._shells)


def create_unix_detector(stat_provider, shells_reader=None, variable_resolver=None):
    """Wire a Unix detector over fakes."""
    transformer = ProfileTransformer(
        validator=PathValidator(stat_provider, path_module=posixpath),
        variable_resolver=variable_resolver,
    )
    return UnixProfileDetector(
        transformer=transformer,
        shells_reader=shells_reader or FakeShellsReader(),
    )
