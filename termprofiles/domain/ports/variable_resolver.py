"""Variable resolution port."""

from typing import Protocol

from ..values.workspace_folder import WorkspaceFolder


class VariableResolver(Protocol):
    """Protocol for substituting ${...} placeholders in profile paths."""

    def resolve(self, workspace_folder: WorkspaceFolder | None, value: str) -> str | None:
        """Resolve placeholders in value.

        Returns:
            The resolved string, or None to keep the raw value.
        """
        ...
