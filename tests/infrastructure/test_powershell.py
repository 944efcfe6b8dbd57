"""Tests for PowerShellLocator."""

import posixpath

from termprofiles.infrastructure.powershell import PowerShellLocator


async def _collect(locator):
    return [(i.display_name, i.exe_path) async for i in locator()]


class TestPowerShellLocator:
    """Tests for PowerShellLocator."""

    async def test_nothing_off_windows(self, tmp_path):
        """Test that non-Windows hosts yield nothing."""
        locator = PowerShellLocator({"ProgramFiles": str(tmp_path)}, is_windows=False)

        assert await _collect(locator) == []

    async def test_highest_stable_and_preview(self, tmp_path):
        """Test version directory selection."""
        for version in ["6", "7", "7.10", "7-preview", "notes"]:
            folder = tmp_path / "PowerShell" / version
            folder.mkdir(parents=True)
            (folder / "pwsh.exe").write_text("")
        locator = PowerShellLocator(
            {"ProgramFiles": str(tmp_path)}, is_windows=True, path_module=posixpath
        )

        installs = await _collect(locator)

        assert installs == [
            ("PowerShell", str(tmp_path / "PowerShell" / "7.10" / "pwsh.exe")),
            ("PowerShell Preview", str(tmp_path / "PowerShell" / "7-preview" / "pwsh.exe")),
        ]

    async def test_windows_powershell(self, tmp_path):
        """Test the inbox Windows PowerShell location."""
        exe = tmp_path / "System32" / "WindowsPowerShell" / "v1.0" / "powershell.exe"
        exe.parent.mkdir(parents=True)
        exe.write_text("")
        locator = PowerShellLocator(
            {"windir": str(tmp_path)}, is_windows=True, path_module=posixpath
        )

        assert await _collect(locator) == [("Windows PowerShell", str(exe))]

    async def test_windows_powershell_sysnative_under_wow64(self, tmp_path):
        """Test that a 32-bit process on 64-bit Windows looks under Sysnative."""
        for folder in ["System32", "Sysnative"]:
            exe = tmp_path / folder / "WindowsPowerShell" / "v1.0" / "powershell.exe"
            exe.parent.mkdir(parents=True)
            exe.write_text("")
        locator = PowerShellLocator(
            {"windir": str(tmp_path), "PROCESSOR_ARCHITEW6432": "AMD64"},
            is_windows=True,
            path_module=posixpath,
        )

        installs = await _collect(locator)

        assert installs == [
            (
                "Windows PowerShell",
                str(tmp_path / "Sysnative" / "WindowsPowerShell" / "v1.0" / "powershell.exe"),
            )
        ]

    async def test_missing_executables_skipped(self, tmp_path):
        """Test that candidates without an executable are not yielded."""
        (tmp_path / "PowerShell" / "7").mkdir(parents=True)
        locator = PowerShellLocator(
            {"ProgramFiles": str(tmp_path), "LOCALAPPDATA": str(tmp_path)},
            is_windows=True,
            path_module=posixpath,
        )

        assert await _collect(locator) == []
