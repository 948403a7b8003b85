"""Fail-soft runner behind ``manifest-tool dump``.

``dump`` is a debugging aid: it shows as much as it can.  A source that
fails to parse gets its error reported and the batch moves on.
"""

from __future__ import annotations

from collections.abc import Sequence

from manifest_tool.core.batch import BatchRunner
from manifest_tool.core.models import (
    InvocationOptions,
    ParseOutcome,
    RunReport,
    SourceRef,
    Success,
)


class DumpRunner(BatchRunner):
    """Parse and render every source, continuing past failures."""

    halt_on_failure = False

    def run(
        self,
        sources: Sequence[SourceRef],
        options: InvocationOptions | None = None,
    ) -> RunReport:
        """Dump *sources*.

        Parameters
        ----------
        sources:
            Resolved sources, in command-line order.
        options:
            ``validate`` selects full validation over a syntax-only parse;
            ``show_headers`` forces origin headers on or off.  When it is
            ``None``, headers appear only for batches of more than one.

        Raises
        ------
        MissingFileError
            After all other sources were dumped, when some files did not
            exist.
        """
        opts = options if options is not None else InvocationOptions()
        show_headers = opts.show_headers
        if show_headers is None:
            show_headers = len(sources) > 1

        def dump_one(ref: SourceRef, source: str) -> ParseOutcome:
            if show_headers:
                self._reporter.header(ref.origin)
            outcome = self._parse(source, ref.origin, validate=opts.validate)
            if isinstance(outcome, Success):
                self._reporter.output(self._service.render(outcome.ast))
            return outcome

        return self._run_batch(sources, dump_one)
