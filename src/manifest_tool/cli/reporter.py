"""Console reporter used by the runners.

Satisfies :class:`~manifest_tool.core.protocols.RunReporter`.  Headers and
rendered trees go to standard output verbatim so they can be piped and
diffed; errors and notices go through the logging facility to stderr.
The reporter holds no decision logic — runners decide *when* to call it.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable
from typing import TextIO

from manifest_tool.exceptions import MissingFileError

logger = logging.getLogger(__name__)


class Reporter:
    """Write run output to *out* (``sys.stdout`` when omitted)."""

    def __init__(self, out: TextIO | None = None) -> None:
        self._out: TextIO | None = out

    @property
    def out(self) -> TextIO:
        # sys.stdout is looked up on every write.
        return self._out if self._out is not None else sys.stdout

    def header(self, origin: str) -> None:
        self.out.write(f"--- {origin}\n")

    def output(self, text: str) -> None:
        self.out.write(text if text.endswith("\n") else f"{text}\n")

    def error(self, message: str) -> None:
        logger.error(message)

    def exception(self, exc: BaseException) -> None:
        # Tracebacks only at debug level.
        exc_info = exc if logger.isEnabledFor(logging.DEBUG) else None
        logger.error(str(exc), exc_info=exc_info)

    def notice(self, message: str) -> None:
        logger.info(message)

    @staticmethod
    def aggregate_missing(paths: Iterable[str]) -> MissingFileError:
        """Build the single error reported for every missing file."""
        return MissingFileError(
            paths,
            hint="Check the spelling of the file names and the working directory.",
        )
