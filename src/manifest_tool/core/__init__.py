"""Core / service layer — input resolution and batch orchestration.

Rules
-----
* No ``print()`` calls; output goes through an injected reporter.
* File access goes through an injected :class:`FileSystem`.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from manifest_tool.core.dump_runner import DumpRunner
from manifest_tool.core.input_resolver import InputResolver
from manifest_tool.core.models import (
    DefaultManifestRef,
    Failure,
    FileRef,
    InlineRef,
    InvocationOptions,
    InvocationRequest,
    MissingFilesReport,
    Mode,
    ParseOutcome,
    RunReport,
    SourceRef,
    StdinRef,
    Success,
)
from manifest_tool.core.parse_service import ParseService
from manifest_tool.core.protocols import (
    EnvironmentProvider,
    FileSystem,
    ManifestParser,
    RunReporter,
)
from manifest_tool.core.validation_runner import ValidationRunner

__all__: list[str] = [
    "DefaultManifestRef",
    "DumpRunner",
    "EnvironmentProvider",
    "Failure",
    "FileRef",
    "FileSystem",
    "InlineRef",
    "InputResolver",
    "InvocationOptions",
    "InvocationRequest",
    "ManifestParser",
    "MissingFilesReport",
    "Mode",
    "ParseOutcome",
    "ParseService",
    "RunReport",
    "RunReporter",
    "SourceRef",
    "StdinRef",
    "Success",
    "ValidationRunner",
]
