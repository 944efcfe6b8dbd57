"""Tests for ProfileDetectionService platform dispatch."""

from termprofiles.application.services import ProfileDetectionService
from termprofiles.infrastructure.config import TerminalProfilesConfig

from ..conftest import (
    FakeRunner,
    FakeShellsReader,
    FakeStatProvider,
    create_unix_detector,
    create_windows_detector,
    wsl_output,
)


def _config():
    return TerminalProfilesConfig.model_validate(
        {
            "showQuickLaunchWslProfiles": True,
            "profiles": {
                "windows": {"Cmd": {"path": "cmd.exe"}},
                "osx": {"zsh": {"path": "/bin/zsh", "args": ["-l"]}},
                "linux": {"bash": {"path": "/bin/bash", "args": ["-l"]}},
            },
        }
    )


def _service(platform, windows_env, runner=None, shells=("/bin/bash", "/bin/zsh")):
    fs = FakeStatProvider(files=["/bin/bash", "/bin/zsh"])
    return ProfileDetectionService(
        windows_detector=create_windows_detector(FakeStatProvider(), windows_env, runner=runner),
        unix_detector=create_unix_detector(fs, FakeShellsReader(shells)),
        platform=platform,
    )


class TestProfileDetectionService:
    """Tests for ProfileDetectionService."""

    async def test_linux_uses_linux_profiles(self, windows_env):
        """Test that Linux applies the linux overrides."""
        service = _service("linux", windows_env)

        profiles = await service.detect_available_profiles(config=_config())

        assert [(p.profile_name, p.args) for p in profiles] == [("bash", ("-l",)), ("zsh", None)]

    async def test_macos_uses_osx_profiles(self, windows_env):
        """Test that macOS applies the osx overrides."""
        service = _service("darwin", windows_env)

        profiles = await service.detect_available_profiles(config=_config())

        assert [(p.profile_name, p.args) for p in profiles] == [("bash", None), ("zsh", ("-l",))]

    async def test_windows_uses_windows_profiles(self, windows_env):
        """Test that Windows applies windows overrides and the WSL flag."""
        runner = FakeRunner(wsl_output("Header", "Ubuntu (Default)"))
        service = _service("win32", windows_env, runner=runner)

        profiles = await service.detect_available_profiles(quick_launch_only=True, config=_config())

        assert [p.profile_name for p in profiles] == ["Cmd", "Ubuntu (WSL)"]

    async def test_windows_without_config(self, windows_env):
        """Test that quick launch on Windows without config is empty."""
        runner = FakeRunner(wsl_output("Header", "Ubuntu"))
        service = _service("win32", windows_env, runner=runner)

        assert await service.detect_available_profiles(quick_launch_only=True) == []
        assert runner.calls == []

    async def test_unix_quick_launch_without_config(self, windows_env):
        """Test that quick launch on Unix without config is empty."""
        service = _service("linux", windows_env)

        assert await service.detect_available_profiles(quick_launch_only=True) == []

    async def test_test_paths_forwarded(self, windows_env):
        """Test that test paths reach the Unix detector."""
        service = _service("linux", windows_env)

        profiles = await service.detect_available_profiles(test_paths=["/bin/zsh"])

        assert [p.profile_name for p in profiles] == ["zsh"]
