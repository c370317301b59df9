"""Runtime settings read from the process environment.

Recognised variables
--------------------
``RGW_ADMIN_PROG``
    Program name shown in the usage banner.  Defaults to ``radosgw-admin``.
``RGW_ADMIN_STRICT_EXIT``
    When true, parse / match / validation failures exit with
    :data:`~rgw_admin.cli.exit_codes.USAGE_ERROR` instead of ``0``.
``RGW_ADMIN_LOG_LEVEL``
    Standard :mod:`logging` level name.  Defaults to ``WARNING``.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from rgw_admin.exceptions import ConfigurationError

DEFAULT_PROG: str = "radosgw-admin"

_TRUE_VALUES: frozenset[str] = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES: frozenset[str] = frozenset({"0", "false", "no", "off", ""})
_LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True, slots=True)
class Settings:
    """Immutable runtime settings."""

    prog: str = DEFAULT_PROG
    """Program name used in ``usage:`` lines."""

    strict_exit: bool = False
    """Use non-zero exit codes for user errors."""

    log_level: int = logging.WARNING
    """Numeric logging level."""

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from *environ* (``os.environ`` by default).

        Raises
        ------
        ConfigurationError
            If a variable is set to a value that cannot be interpreted.
        """
        env = os.environ if environ is None else environ
        prog = env.get("RGW_ADMIN_PROG", "").strip() or DEFAULT_PROG
        return cls(
            prog=prog,
            strict_exit=_parse_bool("RGW_ADMIN_STRICT_EXIT", env.get("RGW_ADMIN_STRICT_EXIT", "")),
            log_level=_parse_level(env.get("RGW_ADMIN_LOG_LEVEL", "")),
        )


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigurationError(
        f"Invalid boolean for {name}: {raw!r}",
        hint="Use one of: 1, 0, true, false, yes, no, on, off.",
    )


def _parse_level(raw: str) -> int:
    value = raw.strip().upper()
    if not value:
        return logging.WARNING
    if value not in _LOG_LEVELS:
        raise ConfigurationError(
            f"Invalid log level for RGW_ADMIN_LOG_LEVEL: {raw!r}",
            hint=f"Use one of: {', '.join(_LOG_LEVELS)}.",
        )
    return logging.getLevelName(value)
