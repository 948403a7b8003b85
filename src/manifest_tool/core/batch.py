"""Shared batch loop for the ``validate`` and ``dump`` runners.

Both commands walk their sources in order, existence-check file
references, defer missing files into one aggregated error, and hand each
readable source to a per-command step.  A file that exists but cannot be
read counts as a failed source.  The only policy difference is
:attr:`BatchRunner.halt_on_failure`: fail-fast runners stop at the first
:class:`Failure`, fail-soft runners keep going.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from manifest_tool.core.models import (
    Failure,
    MissingFilesReport,
    ParseOutcome,
    PathRef,
    RunReport,
    SourceRef,
)
from manifest_tool.core.parse_service import ParseService
from manifest_tool.core.protocols import FileSystem, RunReporter
from manifest_tool.exceptions import SourceReadError, ValidationInternalError

logger = logging.getLogger(__name__)

SourceStep = Callable[[SourceRef, str], ParseOutcome]


class BatchRunner:
    """Base class holding the collaborators and the iteration policy.

    Parameters
    ----------
    service:
        Parses sources and renders trees.
    reporter:
        Receives headers, output, errors and notices.
    filesystem:
        Answers existence checks and reads files.
    """

    halt_on_failure: bool = False

    def __init__(
        self,
        service: ParseService,
        reporter: RunReporter,
        filesystem: FileSystem,
    ) -> None:
        self._service: ParseService = service
        self._reporter: RunReporter = reporter
        self._filesystem: FileSystem = filesystem

    # ------------------------------------------------------------------
    # Iteration
    # ------------------------------------------------------------------

    def _run_batch(self, sources: Sequence[SourceRef], step: SourceStep) -> RunReport:
        """Feed every readable source to *step*, honouring the halt policy.

        Raises
        ------
        MissingFileError
            After a complete pass, when any file reference did not exist.
        """
        missing = MissingFilesReport()
        outcomes: list[ParseOutcome] = []

        for ref in sources:
            try:
                source = self._load(ref, missing)
            except SourceReadError as exc:
                self._reporter.error(str(exc))
                outcome: ParseOutcome = Failure(origin=ref.origin, message=str(exc))
            else:
                if source is None:
                    continue
                outcome = step(ref, source)
            outcomes.append(outcome)
            if isinstance(outcome, Failure) and self.halt_on_failure:
                logger.debug("Halting batch after failure in %s", ref.origin)
                return RunReport(outcomes=tuple(outcomes), halted=True)

        if missing:
            raise self._reporter.aggregate_missing(missing.paths)
        return RunReport(outcomes=tuple(outcomes))

    def _load(self, ref: SourceRef, missing: MissingFilesReport) -> str | None:
        """Return the text of *ref*, or ``None`` when its file is absent.

        Raises
        ------
        SourceReadError
            When the file exists but cannot be read or decoded.
        """
        if isinstance(ref, PathRef):
            if not self._filesystem.exists(ref.path):
                logger.debug("Missing file: %s", ref.path)
                missing.add(ref.path)
                return None
            return self._filesystem.read_text(ref.path)
        return ref.text

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    def _parse(self, source: str, origin: str, *, validate: bool) -> ParseOutcome:
        """Parse one source; internal errors become logged failures."""
        try:
            outcome = self._service.parse(source, origin, validate=validate)
        except ValidationInternalError as exc:
            self._reporter.exception(exc)
            return Failure(origin=origin, message=str(exc), internal=True)
        if isinstance(outcome, Failure):
            self._reporter.error(outcome.message)
        return outcome
