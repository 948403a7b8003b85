"""Infrastructure layer — external system integration.

This layer wraps all interaction with lark, the filesystem and the
process environment.  Every raw third-party exception must be caught
here and re-raised as a :class:`~manifest_tool.exceptions.ManifestToolError`
subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from manifest_tool.infra.environment import ProcessEnvironment
from manifest_tool.infra.filesystem import LocalFileSystem
from manifest_tool.infra.lark_parser import LarkManifestParser

__all__: list[str] = [
    "LarkManifestParser",
    "LocalFileSystem",
    "ProcessEnvironment",
]
