"""Domain ports - interfaces for infrastructure to implement."""

from .process_port import CommandRunner, PowerShellEnumerator
from .stat_provider import StatProvider, StatResult
from .variable_resolver import VariableResolver

__all__ = [
    "StatProvider",
    "StatResult",
    "VariableResolver",
    "CommandRunner",
    "PowerShellEnumerator",
]
