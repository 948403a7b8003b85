"""Domain models for manifest-tool.

Source references, invocation requests and parse outcomes are **frozen**
dataclasses — immutable value objects with no behaviour beyond data
access.  :class:`MissingFilesReport` is the one deliberately mutable
accumulator; it lives for the duration of a single runner call.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Union


# ---------------------------------------------------------------------------
# Invocation
# ---------------------------------------------------------------------------

class Mode(enum.Enum):
    """Which command an invocation belongs to."""

    VALIDATE = "validate"
    DUMP = "dump"


@dataclass(frozen=True, slots=True)
class InvocationOptions:
    """Per-invocation options collected from the command line."""

    inline_source: str | None = None
    """Source text given with ``-e``; takes precedence over files."""

    validate: bool = True
    """Run semantic validation in addition to the syntax check."""

    show_headers: bool | None = None
    """Force ``--- <origin>`` headers on or off.  ``None`` means automatic."""


# ---------------------------------------------------------------------------
# Source references
# ---------------------------------------------------------------------------

COMMAND_LINE_LABEL: str = "command-line-string"
STDIN_LABEL: str = "stdin"


@dataclass(frozen=True, slots=True)
class FileRef:
    """A manifest named on the command line."""

    path: str

    @property
    def origin(self) -> str:
        return self.path


@dataclass(frozen=True, slots=True)
class DefaultManifestRef:
    """The active environment's manifest, used when nothing else was given."""

    path: str

    @property
    def origin(self) -> str:
        return self.path


@dataclass(frozen=True, slots=True)
class InlineRef:
    """Source text passed directly on the command line."""

    text: str
    label: str = COMMAND_LINE_LABEL

    @property
    def origin(self) -> str:
        return self.label


@dataclass(frozen=True, slots=True)
class StdinRef:
    """Source text buffered from standard input."""

    text: str

    @property
    def origin(self) -> str:
        return STDIN_LABEL


SourceRef = Union[FileRef, DefaultManifestRef, InlineRef, StdinRef]
PathRef = (FileRef, DefaultManifestRef)
"""Source kinds that must be existence-checked before reading."""


@dataclass(frozen=True, slots=True)
class InvocationRequest:
    """The resolved inputs for one command invocation."""

    sources: tuple[SourceRef, ...]
    mode: Mode
    options: InvocationOptions = field(default_factory=InvocationOptions)


# ---------------------------------------------------------------------------
# Outcomes
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Success:
    """The parser produced a tree for *origin*."""

    origin: str
    ast: Any
    """Opaque to the core; owned by the parser backend."""


@dataclass(frozen=True, slots=True)
class Failure:
    """The parser rejected *origin*."""

    origin: str
    message: str
    internal: bool = False
    """``True`` when the failure was not an ordinary parse error."""


ParseOutcome = Union[Success, Failure]


@dataclass(frozen=True, slots=True)
class RunReport:
    """What a runner did with its batch of sources."""

    outcomes: tuple[ParseOutcome, ...]
    halted: bool = False
    """``True`` when a fail-fast runner stopped before the end of the batch."""

    @property
    def failures(self) -> tuple[Failure, ...]:
        return tuple(o for o in self.outcomes if isinstance(o, Failure))

    @property
    def succeeded(self) -> bool:
        return not self.halted and not self.failures


# ---------------------------------------------------------------------------
# Missing files accumulator
# ---------------------------------------------------------------------------

class MissingFilesReport:
    """Paths that did not exist, in the order they were encountered."""

    def __init__(self) -> None:
        self._paths: list[str] = []

    def add(self, path: str) -> None:
        self._paths.append(path)

    @property
    def paths(self) -> tuple[str, ...]:
        return tuple(self._paths)

    def __len__(self) -> int:
        return len(self._paths)

    def __bool__(self) -> bool:
        return len(self._paths) > 0
