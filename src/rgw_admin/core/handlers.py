"""Per-command handlers and the registry initialization routine.

Each handler checks the supplied option map against the fixed set of
options its command requires.  Validation is complete before any
message is produced: a handler either returns :class:`Success` with
its confirmation line or a failure value, never both.

Users are not stored anywhere; the actions are simulated.
"""

from __future__ import annotations

from collections.abc import Collection, Mapping

from rgw_admin.core.models import (
    CommandId,
    CommandResult,
    ExtraOption,
    MissingOption,
    Success,
)
from rgw_admin.core.options import global_option_names
from rgw_admin.core.registry import CommandRegistry

_GLOBAL_OPTIONS: frozenset[str] = global_option_names()


def validate_options(
    command: str,
    options: Mapping[str, object],
    required: Collection[str],
) -> CommandResult | None:
    """Check that *options* holds exactly *required* (plus global options).

    Returns ``None`` when the option set is acceptable, otherwise the
    failure to report.  Extraneous options are reported before missing
    ones.
    """
    extra = tuple(
        name for name in options if name not in required and name not in _GLOBAL_OPTIONS
    )
    if extra:
        return ExtraOption(command=command, names=extra)
    missing = tuple(name for name in required if name not in options)
    if missing:
        return MissingOption(command=command, names=missing)
    return None


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------

def user_create(options: Mapping[str, object]) -> CommandResult:
    failure = validate_options("user create", options, ("uid", "display-name", "email"))
    if failure is not None:
        return failure
    return Success(
        f"user created with uid {options['uid']} "
        f"display-name {options['display-name']} "
        f"and email {options['email']}"
    )


def user_delete(options: Mapping[str, object]) -> CommandResult:
    failure = validate_options("user delete", options, ("uid",))
    if failure is not None:
        return failure
    return Success(f"user with uid {options['uid']} was deleted")


def user_info(options: Mapping[str, object]) -> CommandResult:
    failure = validate_options("user info", options, ("uid",))
    if failure is not None:
        return failure
    return Success(f"info about user with uid {options['uid']}")


# ---------------------------------------------------------------------------
# Registry construction
# ---------------------------------------------------------------------------

def build_registry() -> CommandRegistry:
    """Create a registry holding every built-in command."""
    registry = CommandRegistry()
    registry.register("user create", "create a new user", user_create, command_id=CommandId.USER_CREATE)
    registry.register("user delete", "delete a user", user_delete, command_id=CommandId.USER_DELETE)
    registry.register("user info", "get user info", user_info, command_id=CommandId.USER_INFO)
    return registry
