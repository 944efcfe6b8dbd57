"""${...} placeholder substitution for configured profile paths."""

import os
import re
from collections.abc import Mapping
from pathlib import Path

from termprofiles.domain import WorkspaceFolder

_VARIABLE = re.compile(r"\$\{([^}]+)\}")


class EnvironmentVariableResolver:
    """Resolve environment and workspace placeholders.

    Supported:
        ${env:NAME}                  environment variable (empty if unset)
        ${userHome}                  home directory
        ${workspaceFolder}           workspace path
        ${workspaceFolderBasename}   workspace folder name
        ${pathSeparator}             os.sep

    Unknown placeholders are left as written. Workspace placeholders are
    left as written when there is no workspace.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = os.environ if environ is None else environ

    def resolve(self, workspace_folder: WorkspaceFolder | None, value: str) -> str | None:
        if "${" not in value:
            return value

        def replace(match: re.Match[str]) -> str:
            resolved = self._lookup(match.group(1), workspace_folder)
            return match.group(0) if resolved is None else resolved

        return _VARIABLE.sub(replace, value)

    def _lookup(self, name: str, workspace_folder: WorkspaceFolder | None) -> str | None:
        if name.startswith("env:"):
            return self._environ.get(name[4:], "")
        if name == "userHome":
            return self._environ.get("HOME") or self._environ.get("USERPROFILE") or str(Path.home())
        if name == "pathSeparator":
            return os.sep
        if workspace_folder is None:
            return None
        if name == "workspaceFolder":
            return workspace_folder.path
        if name == "workspaceFolderBasename":
            return workspace_folder.name
        return None
