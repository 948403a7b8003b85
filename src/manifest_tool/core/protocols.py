"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters and the CLI
reporter must satisfy.  Core code depends ONLY on these protocols —
never on concrete implementations — preserving the dependency
inversion principle.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Protocol

from manifest_tool.exceptions import MissingFileError


class ManifestParser(Protocol):
    """Contract for parser backends.

    The tree returned by the parse methods is opaque to the core; it is
    only ever handed back to :meth:`render` of the same backend.
    """

    def parse_and_validate(self, source: str, origin: str) -> Any:
        """Parse *source* and run semantic validation on the result.

        Raises
        ------
        ParseError
            On the first syntax or validation problem.  The message must
            identify *origin*.
        """
        ...  # pragma: no cover

    def parse_only(self, source: str, origin: str | None = None) -> Any:
        """Parse *source*, reporting syntax errors only.

        Raises
        ------
        ParseError
            When *source* is not syntactically valid.
        """
        ...  # pragma: no cover

    def render(self, ast: Any) -> str:
        """Return a human-readable dump of *ast*."""
        ...  # pragma: no cover


class EnvironmentProvider(Protocol):
    """Contract for the active environment's settings."""

    def default_manifest(self) -> str:
        """Path of the manifest used when no input was given."""
        ...  # pragma: no cover

    def dump_validates_by_default(self) -> bool:
        """Whether ``dump`` validates when neither flag was passed."""
        ...  # pragma: no cover


class FileSystem(Protocol):
    """Contract for reading source files.

    Implementations must map ``OSError`` and decoding failures to
    :class:`~manifest_tool.exceptions.SourceReadError`.
    """

    def exists(self, path: str) -> bool:
        ...  # pragma: no cover

    def read_text(self, path: str) -> str:
        ...  # pragma: no cover


class RunReporter(Protocol):
    """Contract for the output side of a runner."""

    def header(self, origin: str) -> None:
        ...  # pragma: no cover

    def output(self, text: str) -> None:
        ...  # pragma: no cover

    def error(self, message: str) -> None:
        ...  # pragma: no cover

    def exception(self, exc: BaseException) -> None:
        ...  # pragma: no cover

    def notice(self, message: str) -> None:
        ...  # pragma: no cover

    def aggregate_missing(self, paths: Iterable[str]) -> MissingFileError:
        ...  # pragma: no cover
