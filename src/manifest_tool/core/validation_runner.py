"""Fail-fast runner behind ``manifest-tool validate``.

Every source is parsed *and* validated.  The first failure stops the
batch: later sources are neither existence-checked nor parsed, and any
missing files seen so far are not reported.
"""

from __future__ import annotations

from collections.abc import Sequence

from manifest_tool.core.batch import BatchRunner
from manifest_tool.core.models import (
    DefaultManifestRef,
    MissingFilesReport,
    ParseOutcome,
    RunReport,
    SourceRef,
)


class ValidationRunner(BatchRunner):
    """Validate sources in order, halting on the first failure."""

    halt_on_failure = True

    def run(self, sources: Sequence[SourceRef]) -> RunReport:
        """Validate *sources*.

        Returns
        -------
        RunReport
            ``halted`` is set when a source failed to validate.

        Raises
        ------
        MissingFileError
            When the batch completed but some files did not exist.
        """
        return self._run_batch(sources, self._validate_one)

    def _load(self, ref: SourceRef, missing: MissingFilesReport) -> str | None:
        if isinstance(ref, DefaultManifestRef):
            self._reporter.notice(
                f"No manifest specified. Validating the default manifest {ref.path}",
            )
        return super()._load(ref, missing)

    def _validate_one(self, ref: SourceRef, source: str) -> ParseOutcome:
        return self._parse(source, ref.origin, validate=True)
