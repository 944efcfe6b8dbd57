"""Configuration infrastructure - loading and validation."""

from .settings import (
    PlatformProfiles,
    ProfileConfig,
    TerminalProfilesConfig,
    load_profiles_config,
)
from .yaml_loader import YAMLConfigLoader

__all__ = [
    "YAMLConfigLoader",
    "ProfileConfig",
    "PlatformProfiles",
    "TerminalProfilesConfig",
    "load_profiles_config",
]
