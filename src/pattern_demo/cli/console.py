"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so the demo and bootstrap paths (``--help``,
``--version``) keep working even when Rich is not installed.

Two proxies are exported: :data:`console` writes results to stdout and
:data:`err_console` writes errors and hints to stderr.
"""

from __future__ import annotations

import sys
from typing import Any

from pattern_demo.exceptions import OptionalDependencyError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``OptionalDependencyError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise OptionalDependencyError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def escape_markup(text: object) -> str:
	"""Escape square brackets in *text* so Rich prints them literally.

	Without Rich the fallback path prints raw text, so nothing needs escaping.
	"""
	try:
		_load_rich_console_class()
	except OptionalDependencyError:
		return str(text)
	from rich.markup import escape

	return escape(str(text))


def get_rich_console(*, stderr: bool = False) -> Any:
	"""Create a Rich console instance targeting stdout or stderr."""
	console_class = _load_rich_console_class()
	return console_class(stderr=stderr)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def __init__(self, *, stderr: bool = False) -> None:
		self._stderr = stderr

	def print(self, *objects: object, markup: bool = True) -> None:
		"""Render with Rich when available, else plain print.

		Pass ``markup=False`` for text that may contain square brackets
		which Rich would otherwise parse as style tags.
		"""
		stream = sys.stderr if self._stderr else sys.stdout
		try:
			rich_console = get_rich_console(stderr=self._stderr)
		except OptionalDependencyError:
			print(*objects, file=stream)
			return
		rich_console.print(*objects, markup=markup, highlight=False, soft_wrap=True)


console = _ConsoleProxy()
err_console = _ConsoleProxy(stderr=True)
