"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so bootstrap paths (``--help``, ``--version``) remain
functional even when Rich is not installed.

Manifest text routinely contains square brackets, which Rich would read
as markup.  Anything that echoes user input goes through
:func:`print_error`, which escapes it first.
"""

from __future__ import annotations

import re
import sys
from typing import Any

from manifest_tool.exceptions import EnvironmentError

_MARKUP_TAG = re.compile(r"\[/?(?:bold|dim|red|green|yellow|cyan| )+\]")


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console(*, stderr: bool = True) -> Any:
    """Create a Rich console instance, targeting stderr by default."""
    console_class = _load_rich_console_class()
    return console_class(stderr=stderr, highlight=False)


def _escape(text: str) -> str:
    try:
        from rich.markup import escape
    except ModuleNotFoundError:
        return text
    return escape(text)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with Rich fallback."""

    def print(self, *objects: object) -> None:
        """Render with Rich when available, else plain stderr print.

        The plain fallback drops simple style tags such as ``[bold red]``.
        """
        try:
            rich_console = get_rich_console()
        except EnvironmentError:
            plain = [_MARKUP_TAG.sub("", str(obj)) for obj in objects]
            print(*plain, file=sys.stderr)
            return
        rich_console.print(*objects)


console = _ConsoleProxy()


def print_error(message: str, hint: str | None = None) -> None:
    """Show an error (and optional hint) with user text escaped."""
    console.print(f"[bold red]Error:[/bold red] {_escape(message)}")
    if hint:
        console.print(f"[yellow]Hint:[/yellow] {_escape(hint)}")
