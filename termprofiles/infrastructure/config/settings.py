"""Profile configuration models using Pydantic."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from termprofiles.domain import (
    REMOVED,
    PathProfile,
    ProfileOverride,
    SourceProfile,
)

from .yaml_loader import YAMLConfigLoader

PLATFORM_KEYS = ("windows", "osx", "linux")


class ProfileConfig(BaseModel):
    """A single profile entry from config: explicit path(s) or a source."""

    model_config = ConfigDict(extra="ignore")

    path: str | list[str] | None = None
    source: str | None = None
    args: list[str] | str | None = None

    @field_validator("path")
    @classmethod
    def validate_path_not_empty(cls, v: str | list[str] | None) -> str | list[str] | None:
        """Reject an empty path list."""
        if isinstance(v, list) and not v:
            raise ValueError("Profile path list cannot be empty")
        return v

    @model_validator(mode="after")
    def validate_path_or_source(self) -> "ProfileConfig":
        """Exactly one of path/source must be set."""
        if (self.path is None) == (self.source is None):
            raise ValueError("Profile needs exactly one of 'path' or 'source'")
        return self

    def to_entry(self) -> PathProfile | SourceProfile:
        """Convert to the domain entry."""
        if self.source is not None:
            return SourceProfile(self.source)
        return PathProfile.create(self.path, self.args)


class PlatformProfiles(BaseModel):
    """Profile overrides per platform. A null value removes a profile."""

    windows: dict[str, ProfileConfig | None] = Field(default_factory=dict)
    osx: dict[str, ProfileConfig | None] = Field(default_factory=dict)
    linux: dict[str, ProfileConfig | None] = Field(default_factory=dict)


class TerminalProfilesConfig(BaseModel):
    """Terminal profile configuration."""

    model_config = ConfigDict(populate_by_name=True)

    profiles: PlatformProfiles = Field(default_factory=PlatformProfiles)
    show_quick_launch_wsl_profiles: bool = Field(
        default=False, alias="showQuickLaunchWslProfiles"
    )

    def entries_for(self, platform_key: str) -> dict[str, ProfileOverride]:
        """Get domain overrides for a platform key, in config order."""
        if platform_key not in PLATFORM_KEYS:
            raise ValueError(f"Unknown platform key: {platform_key}")
        raw: dict[str, ProfileConfig | None] = getattr(self.profiles, platform_key)
        return {
            name: REMOVED if value is None else value.to_entry() for name, value in raw.items()
        }


def load_profiles_config(config_path: Path | str = "termprofiles.yaml") -> TerminalProfilesConfig:
    """Load profile configuration from YAML.

    A missing file yields the default (empty) configuration.

    Raises:
        pydantic.ValidationError: If the file contents are invalid.
    """
    data = YAMLConfigLoader(config_path).load()
    # Accept both a top-level document and one nested under "terminal"
    if "terminal" in data and isinstance(data["terminal"], dict):
        data = data["terminal"]
    return TerminalProfilesConfig.model_validate(data)
