"""Composition root - the ONLY place where dependencies are wired."""

import ntpath
import os
import posixpath
from collections.abc import Mapping
from pathlib import Path

from termprofiles.application.services import (
    ProfileDetectionService,
    ProfileTransformer,
    UnixProfileDetector,
    WindowsProfileDetector,
)
from termprofiles.container import Container
from termprofiles.domain import (
    CommandRunner,
    PathValidator,
    StatProvider,
    VariableResolver,
    WorkspaceFolder,
)
from termprofiles.infrastructure.config import TerminalProfilesConfig, load_profiles_config
from termprofiles.infrastructure.filesystem import OSStatProvider
from termprofiles.infrastructure.powershell import PowerShellLocator
from termprofiles.infrastructure.registry import ProfileSourceRegistry
from termprofiles.infrastructure.shells_file import SHELLS_FILE, SystemShellsReader
from termprofiles.infrastructure.variables import EnvironmentVariableResolver
from termprofiles.infrastructure.wsl import WslDistroEnumerator


def create_detection_service(
    registry: ProfileSourceRegistry,
    stat_provider: StatProvider | None = None,
    variable_resolver: VariableResolver | None = None,
    workspace_folder: WorkspaceFolder | None = None,
    environ: Mapping[str, str] | None = None,
    runner: CommandRunner | None = None,
    shells_file: Path | str = SHELLS_FILE,
    platform: str | None = None,
    build_number: int | None = None,
) -> ProfileDetectionService:
    """Wire both platform detectors around a shared registry."""
    stat_provider = stat_provider or OSStatProvider()

    # Windows paths are validated with ntpath semantics on any host
    windows_transformer = ProfileTransformer(
        validator=PathValidator(stat_provider, path_module=ntpath),
        registry=registry,
        variable_resolver=variable_resolver,
        workspace_folder=workspace_folder,
    )
    unix_transformer = ProfileTransformer(
        validator=PathValidator(stat_provider, path_module=posixpath),
        variable_resolver=variable_resolver,
        workspace_folder=workspace_folder,
    )

    return ProfileDetectionService(
        windows_detector=WindowsProfileDetector(
            registry=registry,
            transformer=windows_transformer,
            wsl_source=WslDistroEnumerator(runner),
            environ=environ,
            build_number=build_number,
        ),
        unix_detector=UnixProfileDetector(
            transformer=unix_transformer,
            shells_reader=SystemShellsReader(shells_file),
        ),
        platform=platform,
    )


def create_container(
    config_path: Path | str = "termprofiles.yaml",
    config: TerminalProfilesConfig | None = None,
    environ: Mapping[str, str] | None = None,
    workspace_folder: WorkspaceFolder | None = None,
) -> Container:
    """Create the dependency container with all wired dependencies.

    This is the composition root - the single place where all
    dependencies are created and wired together.

    Args:
        config_path: Path to config file; ignored when config is given.
        config: Already-parsed configuration.
        environ: Environment mapping, defaults to os.environ.
        workspace_folder: Workspace used for ${workspaceFolder}.

    Returns:
        Fully wired dependency container.
    """
    environ = os.environ if environ is None else environ

    if config is None:
        config = load_profiles_config(config_path)

    registry = ProfileSourceRegistry(
        environ=environ,
        powershell_enumerator=PowerShellLocator(environ),
    )

    detection_service = create_detection_service(
        registry=registry,
        variable_resolver=EnvironmentVariableResolver(environ),
        workspace_folder=workspace_folder,
        environ=environ,
    )

    return Container(
        detection_service=detection_service,
        profile_sources=registry,
        config=config,
    )
