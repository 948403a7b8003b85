"""Decide which sources a command invocation processes.

Precedence, highest first:

1. an inline source (``-e``) — positional files are ignored;
2. positional file arguments, in the order given;
3. standard input, when it is not attached to a terminal;
4. the environment's default manifest (``validate`` only).

Standard input is buffered completely in one read, so memory use grows
with the size of the piped input.  It is decoded as strict UTF-8, the same
encoding files are read with.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TextIO

from manifest_tool.core.models import (
    DefaultManifestRef,
    FileRef,
    InlineRef,
    InvocationOptions,
    InvocationRequest,
    Mode,
    SourceRef,
    StdinRef,
)
from manifest_tool.core.protocols import EnvironmentProvider
from manifest_tool.exceptions import NoInputError, SourceReadError

logger = logging.getLogger(__name__)

STDIN_ENCODING: str = "utf-8"


class InputResolver:
    """Turn raw CLI arguments into an :class:`InvocationRequest`.

    Parameters
    ----------
    environment:
        Supplies the default manifest for ``validate``.
    stdin:
        The stream to fall back to.  ``None`` is treated like a terminal.
    """

    def __init__(
        self,
        environment: EnvironmentProvider,
        stdin: TextIO | None,
    ) -> None:
        self._environment: EnvironmentProvider = environment
        self._stdin: TextIO | None = stdin
        self._stdin_consumed: bool = False

    def resolve(
        self,
        mode: Mode,
        paths: Sequence[str],
        options: InvocationOptions | None = None,
    ) -> InvocationRequest:
        """Return the ordered, non-empty sources for *mode*.

        Raises
        ------
        NoInputError
            For ``dump`` when there are no arguments and stdin is a terminal.
        """
        opts = options if options is not None else InvocationOptions()
        sources = self._resolve_sources(mode, list(paths), opts)
        return InvocationRequest(sources=sources, mode=mode, options=opts)

    def _resolve_sources(
        self,
        mode: Mode,
        paths: list[str],
        options: InvocationOptions,
    ) -> tuple[SourceRef, ...]:
        if options.inline_source is not None:
            if paths:
                logger.warning(
                    "Ignoring file argument(s) because -e was given: %s",
                    ", ".join(paths),
                )
            return (InlineRef(options.inline_source),)

        if paths:
            return tuple(FileRef(path) for path in paths)

        if self._stdin is not None and self._stdin_is_piped(self._stdin):
            return (StdinRef(self._read_stdin(self._stdin)),)

        if mode is Mode.VALIDATE:
            return (DefaultManifestRef(self._environment.default_manifest()),)

        raise NoInputError(
            "No input to parse given on command line or stdin",
            hint="Pass one or more manifest files, -e <source>, or pipe source text.",
        )

    def _stdin_is_piped(self, stream: TextIO) -> bool:
        if self._stdin_consumed:
            return False
        try:
            return not stream.isatty()
        except (AttributeError, ValueError):
            # Closed or detached stream: nothing to read.
            return False

    def _read_stdin(self, stream: TextIO) -> str:
        """Read all of *stream* as UTF-8.

        Raises
        ------
        SourceReadError
            When the piped bytes are not valid UTF-8.
        """
        self._stdin_consumed = True
        buffer = getattr(stream, "buffer", None)
        try:
            if buffer is not None:
                # Newlines are translated the way a text-mode read would.
                raw = buffer.read().decode(STDIN_ENCODING)
                text = raw.replace("\r\n", "\n").replace("\r", "\n")
            else:
                text = stream.read()
                # Undecodable bytes survive a text read as lone surrogates.
                text.encode(STDIN_ENCODING)
        except (UnicodeDecodeError, UnicodeEncodeError) as exc:
            raise SourceReadError(
                f"Could not decode stdin as {STDIN_ENCODING}: {exc.reason}",
                hint="Convert the input to UTF-8 before piping it.",
            ) from exc
        logger.debug("Read %d character(s) from stdin", len(text))
        return text
