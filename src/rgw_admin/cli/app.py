"""CLI application entry point and command dispatch for rgw-admin.

This module is the **sole error boundary** for the entire application.
It catches :class:`~rgw_admin.exceptions.RgwAdminError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — matching and validation are delegated
  to the core layer, option tokenizing to the infra layer.
* ``print()`` is forbidden outside the CLI layer; the console proxy is
  used exclusively.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from rgw_admin.cli import exit_codes
from rgw_admin.cli.console import console, error_console
from rgw_admin.config import Settings
from rgw_admin.core.handlers import build_registry
from rgw_admin.core.options import OPTION_TABLE, render_options_help
from rgw_admin.core.protocols import OptionParser
from rgw_admin.core.registry import CommandRegistry
from rgw_admin.exceptions import OptionParseError, RgwAdminError

logger = logging.getLogger(__name__)

LOG_FORMAT: str = "[%(name)s] %(levelname)s: %(message)s"


# ---------------------------------------------------------------------------
# Help rendering
# ---------------------------------------------------------------------------

def render_help(registry: CommandRegistry, prog: str) -> str:
    """Return the usage banner, the command table and the option table."""
    return "\n".join(
        (
            f"usage: {prog} <cmd> [options...]",
            registry.render_help(),
            render_options_help(OPTION_TABLE),
        )
    )


def _report_failure(message: str, registry: CommandRegistry, settings: Settings) -> int:
    """Print *message* followed by the help text and pick the exit code."""
    console.print(message)
    console.print(render_help(registry, settings.prog))
    if settings.strict_exit:
        return exit_codes.USAGE_ERROR
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: Sequence[str] | None = None,
    *,
    registry: CommandRegistry | None = None,
    parser: OptionParser | None = None,
    settings: Settings | None = None,
) -> int:
    """Run the rgw-admin CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.
    registry, parser, settings:
        Collaborators; built with their defaults when omitted.

    Returns
    -------
    int
        OS process exit code.
    """
    from rgw_admin.infra.option_parser import ArgparseOptionParser

    settings = settings if settings is not None else Settings.from_env()
    registry = registry if registry is not None else build_registry()
    parser = parser if parser is not None else ArgparseOptionParser()
    args = list(sys.argv[1:] if argv is None else argv)

    if not args:
        console.print(render_help(registry, settings.prog))
        return exit_codes.SUCCESS

    try:
        invocation = parser.parse(args)
    except OptionParseError as exc:
        logger.debug("option parsing failed: %s", exc)
        return _report_failure(f"invalid command: {exc}", registry, settings)

    if invocation.has("help"):
        console.print(render_help(registry, settings.prog))
        return exit_codes.SUCCESS

    match = registry.match(invocation.tokens)
    if match is None:
        return _report_failure(
            f"no such command {' '.join(invocation.tokens)}".rstrip(),
            registry,
            settings,
        )
    if match.remaining:
        logger.debug("ignoring trailing tokens %r", match.remaining)

    result = match.command.invoke(invocation.options)
    if not result.ok:
        logger.debug("%s rejected options: %s", match.command.merged_text, result)
        return _report_failure(result.message, registry, settings)

    console.print(result.message)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def configure_logging(level: int) -> None:
    """Send log records at *level* and above to stderr."""
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        settings = Settings.from_env()
        configure_logging(settings.log_level)
        code = main(settings=settings)
        sys.exit(code)
    except RgwAdminError as exc:
        error_console.print(f"Error: {exc}")
        if exc.hint:
            error_console.print(f"Hint: {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        error_console.print("\nAborted by user.")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        error_console.print(
            "Unexpected error. Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
