"""Infrastructure: local filesystem access for manifest sources.

Satisfies :class:`~manifest_tool.core.protocols.FileSystem`.  ``OSError``
and decoding failures are re-raised as
:class:`~manifest_tool.exceptions.SourceReadError`.
"""

from __future__ import annotations

from pathlib import Path

from manifest_tool.exceptions import SourceReadError


class LocalFileSystem:
    """Read manifests from disk as UTF-8 text."""

    encoding: str = "utf-8"

    def exists(self, path: str) -> bool:
        return Path(path).exists()

    def read_text(self, path: str) -> str:
        try:
            return Path(path).read_text(encoding=self.encoding)
        except UnicodeDecodeError as exc:
            raise SourceReadError(
                f"Could not decode {path} as {self.encoding}: {exc.reason}",
            ) from exc
        except OSError as exc:
            raise SourceReadError(
                f"Could not read {path}: {exc.strerror or exc}",
            ) from exc
