"""Custom exception hierarchy for rgw-admin.

All exceptions that cross layer boundaries must inherit from
:class:`RgwAdminError`.  Raw third-party exceptions (e.g. from
``argparse``) must NEVER propagate beyond the infrastructure layer —
they must be caught and re-raised as a typed subclass defined here.

Command matching and option validation failures are *not* exceptions:
they are returned as values (``None`` and the result types in
:mod:`rgw_admin.core.models`) and rendered by the CLI layer.

Hierarchy
---------
RgwAdminError
├── OptionParseError
├── CommandRegistrationError
└── ConfigurationError
"""

from __future__ import annotations


class RgwAdminError(Exception):
    """Base exception for all rgw-admin errors.

    Every error condition that escapes a layer must map to a subclass of
    this exception so that the CLI error boundary can render a clean
    message without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Command line ----------------------------------------------------------

class OptionParseError(RgwAdminError):
    """Raised when the argument vector has malformed or unknown options."""


# --- Registration ----------------------------------------------------------

class CommandRegistrationError(RgwAdminError):
    """Raised when a command is registered with empty or duplicate text.

    This is a programming error: it can only be triggered while the
    registry is being built at startup, never by ordinary CLI usage.
    """


# --- Environment -----------------------------------------------------------

class ConfigurationError(RgwAdminError):
    """Raised when an environment setting holds an invalid value."""
