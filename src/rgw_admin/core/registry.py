"""Command registry and token-sequence matcher.

Commands are kept in a list that is sorted lexicographically by their
token tuples.  Matching descends one token at a time, narrowing a
contiguous ``[lo, hi)`` range of that list with two binary searches per
token, which is equivalent to walking a trie keyed by token without
building explicit nodes.

Matching policy
---------------
Tokens are consumed greedily while the range stays non-empty.  The
result is the *longest* registered command whose full text equals a
prefix of the input; tokens after it are returned as
:attr:`Match.remaining`.  A command is never selected from fewer tokens
than its own text, so an incomplete prefix such as ``user`` is no match.
"""

from __future__ import annotations

import bisect
import logging
from collections.abc import Iterable, Iterator, Sequence

from rgw_admin.core.models import Command, CommandId, Handler, Match
from rgw_admin.exceptions import CommandRegistrationError

logger = logging.getLogger(__name__)

COMMANDS_HEADER: str = "commands:"

# Spaces between the longest command text and the help column.
HELP_GAP: int = 4


class CommandRegistry:
    """Holds the registered commands and resolves token sequences to them.

    Registration happens once at startup.  The sorted-order cache is
    invalidated on every :meth:`register` and rebuilt lazily before the
    next lookup or help render.
    """

    def __init__(self) -> None:
        self._commands: list[Command] = []
        self._sorted: list[Command] = []
        self._is_sorted: bool = True

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(
        self,
        text: str | Sequence[str],
        help: str,
        handler: Handler,
        *,
        command_id: CommandId,
    ) -> Command:
        """Register a command and return it.

        *text* is either a whitespace-separated string (``"user create"``)
        or a sequence of tokens.

        Raises
        ------
        CommandRegistrationError
            If *text* is empty or another command already has the same text.
        """
        tokens = tuple(text.split()) if isinstance(text, str) else tuple(text)
        command = Command(id=command_id, text=tokens, help=help, handler=handler)
        if command in self:
            raise CommandRegistrationError(
                f"command {command.merged_text!r} is already registered",
            )
        self._commands.append(command)
        self._is_sorted = False
        logger.debug("registered command %r (%s)", command.merged_text, command_id.value)
        return command

    # ------------------------------------------------------------------
    # Sorted view
    # ------------------------------------------------------------------

    def _ensure_sorted(self) -> list[Command]:
        if not self._is_sorted:
            self._sorted = sorted(self._commands, key=lambda command: command.text)
            self._is_sorted = True
            logger.debug("rebuilt sorted command cache (%d commands)", len(self._sorted))
        return self._sorted

    @property
    def commands(self) -> tuple[Command, ...]:
        """All commands in lexicographic token order."""
        return tuple(self._ensure_sorted())

    def __len__(self) -> int:
        return len(self._commands)

    def __iter__(self) -> Iterator[Command]:
        return iter(self.commands)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, Command):
            text = item.text
        elif isinstance(item, str):
            text = tuple(item.split())
        elif isinstance(item, (tuple, list)):
            text = tuple(item)
        else:
            return False
        return any(command.text == text for command in self._commands)

    # ------------------------------------------------------------------
    # Matching
    # ------------------------------------------------------------------

    def _narrow(self, lo: int, hi: int, depth: int, token: str) -> tuple[int, int]:
        """Return the sub-range of ``[lo, hi)`` whose token at *depth* is *token*.

        Commands shorter than ``depth + 1`` tokens compare as ``()`` and
        therefore sort before every literal token at that depth.
        """
        commands = self._ensure_sorted()

        def key(command: Command) -> tuple[str, ...]:
            return command.text[depth:depth + 1]

        needle = (token,)
        lo = bisect.bisect_left(commands, needle, lo, hi, key=key)
        hi = bisect.bisect_right(commands, needle, lo, hi, key=key)
        return lo, hi

    def match(self, tokens: Iterable[str]) -> Match | None:
        """Resolve the leading *tokens* to exactly one command.

        Returns ``None`` when no registered command's full text is a
        prefix of *tokens* (unknown, empty or incomplete input).
        """
        commands = self._ensure_sorted()
        tokens = tuple(tokens)
        lo, hi = 0, len(commands)
        best: tuple[int, Command] | None = None

        for depth, token in enumerate(tokens):
            lo, hi = self._narrow(lo, hi, depth, token)
            if lo == hi:
                break
            # Every command left shares tokens[:depth + 1]; an exact one sorts first.
            if len(commands[lo].text) == depth + 1:
                best = (depth + 1, commands[lo])

        if best is None:
            logger.debug("no command matches %r", tokens)
            return None

        consumed, command = best
        logger.debug(
            "matched %r using %d of %d token(s)",
            command.merged_text,
            consumed,
            len(tokens),
        )
        return Match(command=command, consumed=tokens[:consumed], remaining=tokens[consumed:])

    def lookup(self, tokens: Iterable[str]) -> Command | None:
        """Return the command selected by *tokens*, or ``None``."""
        match = self.match(tokens)
        return match.command if match is not None else None

    # ------------------------------------------------------------------
    # Help
    # ------------------------------------------------------------------

    def render_help(self) -> str:
        """Render the aligned two-column command table.

        The help column starts at the longest merged command text plus
        :data:`HELP_GAP` spaces, for every row.
        """
        commands = self._ensure_sorted()
        width = max((len(command.merged_text) for command in commands), default=0)
        lines = [COMMANDS_HEADER]
        lines.extend(
            f"{command.merged_text.ljust(width)}{' ' * HELP_GAP}{command.help}"
            for command in commands
        )
        return "\n".join(lines)
