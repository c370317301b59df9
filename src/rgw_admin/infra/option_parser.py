"""argparse-backed implementation of :class:`~rgw_admin.core.protocols.OptionParser`.

This module is the **only** place in the codebase that drives
``argparse``.  argparse normally prints a message and calls
``sys.exit`` on bad input; here every such failure is caught and
re-raised as :class:`~rgw_admin.exceptions.OptionParseError` —
nothing raw escapes the infrastructure boundary.

Only options actually present on the command line end up in the
resulting option map (all defaults are ``argparse.SUPPRESS``).
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Mapping, Sequence
from typing import Any, NoReturn

from rgw_admin.core.models import ParsedInvocation
from rgw_admin.core.options import OPTION_TABLE, OptionEntry, OptionType
from rgw_admin.exceptions import OptionParseError

logger = logging.getLogger(__name__)

_TOKENS_DEST: str = "_tokens"

_CONVERTERS: dict[OptionType, type] = {
    OptionType.INTEGER: int,
    OptionType.STRING: str,
}


class _RaisingArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of printing and exiting."""

    def error(self, message: str) -> NoReturn:
        raise OptionParseError(message)


class _StoreOnce(argparse.Action):
    """Store a value, rejecting a second occurrence of the same option."""

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Any,
        option_string: str | None = None,
    ) -> None:
        if getattr(namespace, self.dest, None) is not None:
            raise argparse.ArgumentError(self, "may only be given once")
        setattr(namespace, self.dest, self.const if self.nargs == 0 else values)


class ArgparseOptionParser:
    """Concrete :class:`OptionParser` built from an option table.

    Usage::

        parser = ArgparseOptionParser()
        invocation = parser.parse(["user", "info", "--uid=7"])
        invocation.tokens        # ("user", "info")
        invocation.get("uid")    # 7

    This class satisfies the :class:`~rgw_admin.core.protocols.OptionParser`
    protocol structurally — no explicit inheritance required.
    """

    def __init__(self, option_table: Mapping[str, OptionEntry] = OPTION_TABLE) -> None:
        self._option_table: Mapping[str, OptionEntry] = option_table
        self._parser: argparse.ArgumentParser = self._build_parser()

    def _build_parser(self) -> argparse.ArgumentParser:
        parser = _RaisingArgumentParser(
            add_help=False,
            allow_abbrev=False,
            exit_on_error=False,
        )
        for entry in self._option_table.values():
            if entry.value_type.takes_value:
                parser.add_argument(
                    entry.flag,
                    dest=entry.name,
                    action=_StoreOnce,
                    type=_CONVERTERS[entry.value_type],
                    default=argparse.SUPPRESS,
                )
            else:
                parser.add_argument(
                    entry.flag,
                    dest=entry.name,
                    action=_StoreOnce,
                    nargs=0,
                    const=True,
                    default=argparse.SUPPRESS,
                )
        parser.add_argument(_TOKENS_DEST, nargs="*", metavar="TOKEN")
        return parser

    # ------------------------------------------------------------------
    # Protocol method
    # ------------------------------------------------------------------

    def parse(self, argv: Sequence[str]) -> ParsedInvocation:
        """Parse *argv* (without the program name).

        Raises
        ------
        OptionParseError
            On malformed syntax, unknown options, missing values, repeated
            options or values of the wrong type.
        """
        try:
            namespace = self._parser.parse_intermixed_args(list(argv))
        except OptionParseError:
            raise
        except argparse.ArgumentError as exc:
            raise OptionParseError(str(exc)) from exc

        values = vars(namespace)
        tokens = values.pop(_TOKENS_DEST, None) or []
        logger.debug("parsed options=%r tokens=%r", sorted(values), tokens)
        return ParsedInvocation(options=values, tokens=tuple(tokens))
