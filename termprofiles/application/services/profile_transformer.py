"""Transform merged profile entries into validated profiles."""

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from termprofiles.domain import (
    PathProfile,
    PathValidator,
    ProfileArgs,
    ProfileEntry,
    SourceProfile,
    TerminalProfile,
    VariableResolver,
    WorkspaceFolder,
)
from termprofiles.logging_setup import TRACE

if TYPE_CHECKING:
    from termprofiles.infrastructure.registry import ProfileSourceRegistry

logger = logging.getLogger(__name__)


class ProfileTransformer:
    """Resolve and validate profile entries in order.

    A profile that cannot be resolved or validated is logged and left
    out; it never fails the whole pass.
    """

    def __init__(
        self,
        validator: PathValidator,
        registry: "ProfileSourceRegistry | None" = None,
        variable_resolver: VariableResolver | None = None,
        workspace_folder: WorkspaceFolder | None = None,
        log: logging.Logger | None = None,
    ) -> None:
        self._validator = validator
        self._registry = registry
        self._variable_resolver = variable_resolver
        self._workspace_folder = workspace_folder
        self._logger = log or logger

    async def transform(
        self, entries: Iterable[tuple[str, ProfileEntry]]
    ) -> list[TerminalProfile]:
        """Validate entries, keeping their order.

        Args:
            entries: (profile name, entry) pairs, usually merged.items().

        Returns:
            Profiles whose paths passed validation.
        """
        profiles: list[TerminalProfile] = []
        for name, entry in entries:
            if not name:
                self._logger.log(TRACE, "profile without a name skipped: %r", entry)
                continue

            paths: tuple[str, ...]
            args: ProfileArgs
            match entry:
                case SourceProfile(source=source_id):
                    source = self._registry.get(source_id) if self._registry is not None else None
                    if source is None:
                        self._logger.log(
                            TRACE, "profile source not found: %s (%s)", name, source_id
                        )
                        continue
                    paths, args = source.paths, source.args
                case PathProfile(paths=paths, args=args):
                    pass
                case _:
                    raise TypeError(f"Unsupported profile entry for {name!r}: {entry!r}")

            resolved = [self._resolve(path) for path in paths]
            profile = await self._validator.validate(name, resolved, args)
            if profile is not None:
                profiles.append(profile)
            else:
                self._logger.log(TRACE, "profile not validated: %s %s", name, resolved)
        return profiles

    def _resolve(self, path: str) -> str:
        if self._variable_resolver is None:
            return path
        return self._variable_resolver.resolve(self._workspace_folder, path) or path
