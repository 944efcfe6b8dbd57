"""Workspace folder value object."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class WorkspaceFolder:
    """Workspace context used when resolving ${workspaceFolder}."""

    name: str
    path: str
