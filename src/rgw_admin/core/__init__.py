"""Core layer — command registry, token matcher, and handlers.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
* Handlers report rejected option sets as values, not exceptions.
"""

from rgw_admin.core.handlers import build_registry, validate_options
from rgw_admin.core.models import (
    Command,
    CommandId,
    CommandResult,
    ExtraOption,
    Match,
    MissingOption,
    ParsedInvocation,
    Success,
)
from rgw_admin.core.options import OPTION_TABLE, OptionEntry, OptionType
from rgw_admin.core.protocols import OptionParser
from rgw_admin.core.registry import CommandRegistry

__all__: list[str] = [
    "OPTION_TABLE",
    "Command",
    "CommandId",
    "CommandRegistry",
    "CommandResult",
    "ExtraOption",
    "Match",
    "MissingOption",
    "OptionEntry",
    "OptionParser",
    "OptionType",
    "ParsedInvocation",
    "Success",
    "build_registry",
    "validate_options",
]
