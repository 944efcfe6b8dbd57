"""Application ports - interfaces for infrastructure adapters."""

from .shells_port import ShellsFileReader
from .wsl_port import WSL_ENUMERATION_FAILED, WslEnumerationError, WslProfileSource

__all__ = [
    "ShellsFileReader",
    "WslProfileSource",
    "WslEnumerationError",
    "WSL_ENUMERATION_FAILED",
]
