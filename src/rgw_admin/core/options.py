"""The option table: every option name the command line may carry.

The table knows value types only.  Which options belong to which
command is decided by the handlers in :mod:`rgw_admin.core.handlers`.
"""

from __future__ import annotations

import enum
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

OPTIONS_HEADER: str = "options:"

# Gap between the option column and its help text.
_HELP_GAP: int = 2
_INDENT: str = "  "


class OptionType(enum.Enum):
    """Declared value type of an option."""

    INTEGER = "integer"
    STRING = "string"
    FLAG = "flag"
    """Presence-only, carries no value."""

    @property
    def takes_value(self) -> bool:
        return self is not OptionType.FLAG


@dataclass(frozen=True, slots=True)
class OptionEntry:
    """One recognised ``--name`` option."""

    name: str
    value_type: OptionType
    help: str = ""
    is_global: bool = False
    """Global options are ignored by per-command validation."""

    @property
    def flag(self) -> str:
        return f"--{self.name}"

    @property
    def usage(self) -> str:
        """Left-column rendering, e.g. ``--uid arg``."""
        return f"{self.flag} arg" if self.value_type.takes_value else self.flag


def build_option_table(entries: Iterable[OptionEntry]) -> Mapping[str, OptionEntry]:
    """Return an immutable name → entry mapping, preserving declaration order."""
    table: dict[str, OptionEntry] = {}
    for entry in entries:
        if entry.name in table:
            raise ValueError(f"duplicate option {entry.name!r}")
        table[entry.name] = entry
    return MappingProxyType(table)


OPTION_TABLE: Mapping[str, OptionEntry] = build_option_table(
    (
        OptionEntry("help", OptionType.FLAG, "produce help message", is_global=True),
        OptionEntry("uid", OptionType.INTEGER, "user id"),
        OptionEntry("display-name", OptionType.STRING),
        OptionEntry("email", OptionType.STRING),
    )
)


def global_option_names(table: Mapping[str, OptionEntry] = OPTION_TABLE) -> frozenset[str]:
    return frozenset(name for name, entry in table.items() if entry.is_global)


def render_options_help(table: Mapping[str, OptionEntry] = OPTION_TABLE) -> str:
    """Render the option table as aligned two-column text."""
    width = max((len(entry.usage) for entry in table.values()), default=0)
    lines = [OPTIONS_HEADER]
    for entry in table.values():
        if entry.help:
            lines.append(f"{_INDENT}{entry.usage.ljust(width + _HELP_GAP)}{entry.help}")
        else:
            lines.append(f"{_INDENT}{entry.usage}")
    return "\n".join(lines)
