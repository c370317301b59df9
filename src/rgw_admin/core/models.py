"""Domain models for rgw-admin.

All models are **frozen** dataclasses — immutable value objects.  They
carry zero I/O and zero dependencies on external packages.

Command handlers never raise for a rejected option set; they return one
of :class:`Success`, :class:`MissingOption` or :class:`ExtraOption`
(collectively :data:`CommandResult`).
"""

from __future__ import annotations

import enum
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from rgw_admin.exceptions import CommandRegistrationError


# ---------------------------------------------------------------------------
# Command identifiers
# ---------------------------------------------------------------------------

class CommandId(enum.Enum):
    """Stable tag identifying which concrete action a command performs."""

    USER_CREATE = "user-create"
    USER_DELETE = "user-delete"
    USER_INFO = "user-info"


# ---------------------------------------------------------------------------
# Handler results
# ---------------------------------------------------------------------------

def _option_list(names: tuple[str, ...]) -> str:
    return ", ".join(f"--{name}" for name in names)


@dataclass(frozen=True, slots=True)
class Success:
    """The option set was accepted and the action was performed."""

    message: str
    """Single confirmation line."""

    ok: bool = field(default=True, init=False)


@dataclass(frozen=True, slots=True)
class MissingOption:
    """One or more required options were not supplied."""

    command: str
    """Merged command text (e.g. ``"user create"``)."""

    names: tuple[str, ...]
    """Missing option names, in declaration order."""

    ok: bool = field(default=False, init=False)

    @property
    def message(self) -> str:
        return f"{self.command}: missing required option(s): {_option_list(self.names)}"


@dataclass(frozen=True, slots=True)
class ExtraOption:
    """One or more options the command does not accept were supplied."""

    command: str
    names: tuple[str, ...]
    ok: bool = field(default=False, init=False)

    @property
    def message(self) -> str:
        return f"{self.command}: unexpected option(s): {_option_list(self.names)}"


CommandResult = Success | MissingOption | ExtraOption

Handler = Callable[[Mapping[str, object]], CommandResult]


# ---------------------------------------------------------------------------
# Command
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Command:
    """One registered multi-token subcommand."""

    id: CommandId
    """Discriminator for the action this command performs."""

    text: tuple[str, ...]
    """Literal tokens that select this command, e.g. ``("user", "create")``."""

    help: str
    """One-line description shown in the command table."""

    handler: Handler = field(repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.text:
            raise CommandRegistrationError("command-text is empty")
        if not all(isinstance(token, str) and token for token in self.text):
            raise CommandRegistrationError(
                f"command-text tokens must be non-empty strings: {self.text!r}",
            )

    @property
    def merged_text(self) -> str:
        """Tokens joined by single spaces."""
        return " ".join(self.text)

    def invoke(self, options: Mapping[str, object]) -> CommandResult:
        """Validate *options* and perform the action."""
        return self.handler(options)


# ---------------------------------------------------------------------------
# Matcher output
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Match:
    """Outcome of a successful token match."""

    command: Command
    consumed: tuple[str, ...]
    """Tokens that formed the command path."""

    remaining: tuple[str, ...]
    """Trailing tokens not used for command matching."""


# ---------------------------------------------------------------------------
# Parsed invocation
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ParsedInvocation:
    """Structured result of option parsing.

    ``options`` holds only the options actually supplied on the command
    line; ``tokens`` holds the positional words in their original order.
    """

    options: Mapping[str, object] = field(default_factory=dict)
    tokens: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        # Stored as a read-only copy.
        object.__setattr__(self, "options", MappingProxyType(dict(self.options)))
        object.__setattr__(self, "tokens", tuple(self.tokens))

    def get(self, name: str) -> object | None:
        """Return the value of option *name*, or ``None`` when absent."""
        return self.options.get(name)

    def has(self, name: str) -> bool:
        return name in self.options
