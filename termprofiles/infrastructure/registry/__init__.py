"""Profile source registry."""

from .profile_sources import ProfileSourceRegistry

__all__ = ["ProfileSourceRegistry"]
