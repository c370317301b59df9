"""CLI console helpers with optional Rich support.

This module avoids module-level imports of the optional UI dependency
so every code path (help, errors, confirmations) remains functional
even when Rich is not installed.

Output is emitted verbatim: markup, highlighting and line wrapping are
disabled so confirmation lines and aligned help tables are never
reformatted.
"""

from __future__ import annotations

import sys
from typing import Any

from rgw_admin.exceptions import RgwAdminError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``RgwAdminError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise RgwAdminError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console(*, stderr: bool = False) -> Any:
	"""Create a plain-text Rich console targeting stdout (or stderr)."""
	console_class = _load_rich_console_class()
	return console_class(stderr=stderr, markup=False, highlight=False, emoji=False)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def __init__(self, *, stderr: bool = False) -> None:
		self._stderr = stderr

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain ``print``."""
		try:
			rich_console = get_rich_console(stderr=self._stderr)
		except RgwAdminError:
			print(*objects, file=sys.stderr if self._stderr else sys.stdout)
			return
		rich_console.print(*objects, soft_wrap=True)


console = _ConsoleProxy()
error_console = _ConsoleProxy(stderr=True)
