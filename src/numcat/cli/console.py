"""CLI console helpers with optional Rich support.

All diagnostics go to stderr; stdout carries nothing but copied bytes.
Rich is imported lazily so the tool keeps working, with plain text,
when it is not installed.
"""

from __future__ import annotations

import sys
from typing import Any

from numcat.exceptions import NumcatError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``NumcatError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise NumcatError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console() -> Any:
	"""Create a Rich console instance targeting stderr."""
	console_class = _load_rich_console_class()
	return console_class(stderr=True)


class _ConsoleProxy:
	"""Minimal stderr writer with Rich fallback."""

	def plain(self, text: str) -> None:
		"""Write *text* as one verbatim line.

		Markup, emoji codes, highlighting and wrapping are all disabled
		so file names come out exactly as given.
		"""
		try:
			rich_console = get_rich_console()
		except NumcatError:
			print(text, file=sys.stderr, flush=True)
			return
		rich_console.print(
			text,
			markup=False,
			emoji=False,
			highlight=False,
			soft_wrap=True,
		)

	def error(self, message: str, hint: str | None = None) -> None:
		"""Render an ``Error:`` line and an optional ``Hint:`` line."""
		try:
			rich_console = get_rich_console()
		except NumcatError:
			print(f"Error: {message}", file=sys.stderr, flush=True)
			if hint:
				print(f"Hint: {hint}", file=sys.stderr, flush=True)
			return

		from rich.markup import escape

		rich_console.print(
			f"[bold red]Error:[/bold red] {escape(message)}",
			emoji=False,
			highlight=False,
			soft_wrap=True,
		)
		if hint:
			rich_console.print(
				f"[yellow]Hint:[/yellow] {escape(hint)}",
				emoji=False,
				highlight=False,
				soft_wrap=True,
			)


console = _ConsoleProxy()
