"""Process-wide logging for manifest-tool.

Every module logs through ``logging.getLogger(__name__)``; this module
attaches exactly one handler to the ``manifest_tool`` package logger.
Rich renders the records when it is installed; otherwise a plain
stderr handler is used, matching the console proxy's fallback.
"""

from __future__ import annotations

import logging
import sys

from manifest_tool.cli.console import get_rich_console
from manifest_tool.exceptions import EnvironmentError

PACKAGE_LOGGER: str = "manifest_tool"

_HANDLER_MARKER: str = "_manifest_tool_handler"


def resolve_level(*, verbose: bool = False, quiet: bool = False, debug: bool = False) -> int:
    """Map CLI verbosity flags to a logging level."""
    if debug or verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def _build_handler(show_tracebacks: bool) -> logging.Handler:
    try:
        rich_console = get_rich_console()
        from rich.logging import RichHandler
    except (EnvironmentError, ModuleNotFoundError):
        handler: logging.Handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
        return handler
    return RichHandler(
        console=rich_console,
        show_time=False,
        show_path=False,
        markup=False,
        rich_tracebacks=show_tracebacks,
    )


def configure_logging(level: int = logging.INFO) -> logging.Logger:
    """Install (or replace) the package handler and set *level*.

    Safe to call repeatedly; earlier handlers installed here are removed.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in list(logger.handlers):
        if getattr(existing, _HANDLER_MARKER, False):
            logger.removeHandler(existing)

    handler = _build_handler(show_tracebacks=level <= logging.DEBUG)
    setattr(handler, _HANDLER_MARKER, True)
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
