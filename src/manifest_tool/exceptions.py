"""Custom exception hierarchy for manifest-tool.

All exceptions that cross layer boundaries must inherit from
:class:`ManifestToolError`.  Raw third-party exceptions (e.g. from lark,
or ``OSError`` from the filesystem) must NEVER propagate beyond the
infrastructure layer — they must be caught and re-raised as a typed
subclass defined here.

Hierarchy
---------
ManifestToolError
├── ParseError
├── NoInputError
├── MissingFileError
├── ValidationInternalError
├── SourceReadError
├── ConfigurationError
└── EnvironmentError
"""

from __future__ import annotations

from collections.abc import Iterable


class ManifestToolError(Exception):
    """Base exception for all manifest-tool errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Parsing ---------------------------------------------------------------

class ParseError(ManifestToolError):
    """Raised by a parser backend for a syntax or validation failure.

    The message is complete and human-readable on its own; *origin*,
    *line* and *column* are kept for callers that want to inspect them.
    """

    def __init__(
        self,
        message: str,
        *,
        origin: str | None = None,
        line: int | None = None,
        column: int | None = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.origin: str | None = origin
        self.line: int | None = line
        self.column: int | None = column


class ValidationInternalError(ManifestToolError):
    """Raised when the parser fails with something other than a parse error."""


# --- Input resolution ------------------------------------------------------

class NoInputError(ManifestToolError):
    """Raised when no source could be resolved for a command."""


class MissingFileError(ManifestToolError):
    """Raised once per run, listing every named file that did not exist."""

    def __init__(self, paths: Iterable[str], *, hint: str | None = None) -> None:
        self.paths: tuple[str, ...] = tuple(paths)
        lines = "".join(f"\n   {path}" for path in self.paths)
        super().__init__(
            f"One or more file(s) specified did not exist:{lines}",
            hint=hint,
        )


class SourceReadError(ManifestToolError):
    """Raised when an existing source file or piped stdin cannot be read."""


# --- Environment / tooling -------------------------------------------------

class ConfigurationError(ManifestToolError):
    """Raised when an environment setting has an unusable value."""


class EnvironmentError(ManifestToolError):
    """Raised when a required runtime dependency is not available."""
