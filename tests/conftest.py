"""Shared pytest fixtures and configuration for the manifest-tool test suite.

Guidelines
----------
* The parser backend is faked at the protocol boundary unless a test
  exercises the lark backend itself.
* Core tests must be pure — files come from :class:`FakeFileSystem`.
* Tests must not depend on OS state or on the terminal attached to stdin.
"""

from __future__ import annotations

import io
import logging
from typing import Any

import pytest

from manifest_tool.cli.reporter import Reporter
from manifest_tool.core.parse_service import ParseService
from manifest_tool.exceptions import ParseError


# ---------------------------------------------------------------------------
# Fakes
# ---------------------------------------------------------------------------

class FakeStdin(io.StringIO):
    """A text stream that can pretend to be a terminal."""

    def __init__(self, text: str = "", *, tty: bool = False) -> None:
        super().__init__(text)
        self._tty = tty
        self.reads = 0

    def isatty(self) -> bool:
        if self.closed:
            raise ValueError("I/O operation on closed file.")
        return self._tty

    def read(self, size: int | None = -1) -> str:  # type: ignore[override]
        self.reads += 1
        return super().read(size)


class FakeEnvironment:
    def __init__(
        self,
        manifest: str = "/etc/manifest-tool/environments/production/manifests/site.pp",
        *,
        dump_validate: bool = False,
    ) -> None:
        self.manifest = manifest
        self.dump_validate = dump_validate

    def default_manifest(self) -> str:
        return self.manifest

    def dump_validates_by_default(self) -> bool:
        return self.dump_validate


class FakeFileSystem:
    """In-memory files; records every existence check and read.

    A file whose content is an exception instance exists but raises it
    when read.
    """

    def __init__(self, files: dict[str, str | Exception] | None = None) -> None:
        self.files: dict[str, str | Exception] = dict(files or {})
        self.exists_calls: list[str] = []
        self.read_calls: list[str] = []

    def exists(self, path: str) -> bool:
        self.exists_calls.append(path)
        return path in self.files

    def read_text(self, path: str) -> str:
        self.read_calls.append(path)
        content = self.files[path]
        if isinstance(content, Exception):
            raise content
        return content


class FakeParser:
    """Parser double driven by markers in the source text.

    * ``SYNTAX`` — syntax error from both entry points.
    * ``INVALID`` — validation error from :meth:`parse_and_validate` only.
    * ``BOOM`` — an unexpected ``RuntimeError``.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[str, str, str | None]] = []

    def _parse(self, source: str, origin: str | None) -> Any:
        if "BOOM" in source:
            raise RuntimeError("parser exploded")
        if "SYNTAX" in source:
            raise ParseError(f"Syntax error at 'SYNTAX' (file: {origin})", origin=origin)
        return ("ast", source)

    def parse_and_validate(self, source: str, origin: str) -> Any:
        self.calls.append(("parse_and_validate", source, origin))
        ast = self._parse(source, origin)
        if "INVALID" in source:
            raise ParseError(f"Validation failed (file: {origin})", origin=origin)
        return ast

    def parse_only(self, source: str, origin: str | None = None) -> Any:
        self.calls.append(("parse_only", source, origin))
        return self._parse(source, origin)

    def render(self, ast: Any) -> str:
        return f"tree({ast[1]})"


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def fake_parser() -> FakeParser:
    return FakeParser()


@pytest.fixture
def service(fake_parser: FakeParser) -> ParseService:
    return ParseService(fake_parser)


@pytest.fixture
def out() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def reporter(out: io.StringIO) -> Reporter:
    return Reporter(out)


@pytest.fixture
def package_logs(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    """Capture INFO and above from the ``manifest_tool`` loggers."""
    caplog.set_level(logging.INFO, logger="manifest_tool")
    return caplog


@pytest.fixture(autouse=True)
def _reset_package_logging() -> Any:
    """Drop handlers installed by ``configure_logging`` after each test."""
    yield
    logger = logging.getLogger("manifest_tool")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
