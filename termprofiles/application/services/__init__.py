"""Application services - use case orchestration."""

from .profile_service import ProfileDetectionService
from .profile_transformer import ProfileTransformer
from .unix_detector import UnixProfileDetector
from .windows_detector import (
    WSL_EXE_MIN_BUILD,
    WindowsProfileDetector,
    get_windows_build_number,
)

__all__ = [
    "ProfileDetectionService",
    "ProfileTransformer",
    "UnixProfileDetector",
    "WindowsProfileDetector",
    "WSL_EXE_MIN_BUILD",
    "get_windows_build_number",
]
