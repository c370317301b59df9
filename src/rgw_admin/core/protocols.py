"""Protocols (interfaces) consumed by the core and CLI layers.

These define the contracts that infrastructure adapters must satisfy.
Callers depend ONLY on these protocols — never on concrete
implementations — preserving the dependency inversion principle.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from rgw_admin.core.models import ParsedInvocation


class OptionParser(Protocol):
    """Contract for option-tokenizing backends.

    Any object that implements :meth:`parse` with the correct signature
    satisfies this protocol structurally (no explicit inheritance
    required).
    """

    def parse(self, argv: Sequence[str]) -> ParsedInvocation:
        """Split *argv* into supplied options and positional tokens.

        ``--name=value`` and ``--name value`` forms are both accepted and
        values are converted to their declared type.

        Raises
        ------
        OptionParseError
            On malformed syntax, an unknown option, a missing value or
            a value of the wrong type.
        """
        ...  # pragma: no cover
