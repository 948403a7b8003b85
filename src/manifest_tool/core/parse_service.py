"""Core parse service — the safe boundary around the parser backend.

The service depends on a :class:`~manifest_tool.core.protocols.ManifestParser`
injected at construction time (dependency inversion).  It turns the
backend's exception-based contract into explicit outcomes:

* :class:`~manifest_tool.exceptions.ParseError` → :class:`Failure`.
* Anything else → :class:`~manifest_tool.exceptions.ValidationInternalError`.

Guarantees
----------
* No ``print()``, no filesystem access.
* Only :class:`~manifest_tool.exceptions.ManifestToolError` subclasses escape.
"""

from __future__ import annotations

from typing import Any

from manifest_tool.core.models import Failure, ParseOutcome, Success
from manifest_tool.core.protocols import ManifestParser
from manifest_tool.exceptions import (
    ManifestToolError,
    ParseError,
    ValidationInternalError,
)


class ParseService:
    """Stateless service that parses sources and renders trees.

    Parameters
    ----------
    parser:
        Any object satisfying the :class:`ManifestParser` protocol.
    """

    def __init__(self, parser: ManifestParser) -> None:
        self._parser: ManifestParser = parser

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def parse(self, source: str, origin: str, *, validate: bool = True) -> ParseOutcome:
        """Parse *source* and return its outcome.

        With ``validate=False`` the backend's syntax-only entry point is
        used and semantic validation is skipped entirely.

        Raises
        ------
        ValidationInternalError
            When the backend fails with anything but a parse error.
        """
        try:
            if validate:
                ast = self._parser.parse_and_validate(source, origin)
            else:
                ast = self._parser.parse_only(source, origin)
        except ParseError as exc:
            return Failure(origin=origin, message=str(exc))
        except ManifestToolError:
            # Already one of ours — let it propagate unchanged.
            raise
        except Exception as exc:
            raise ValidationInternalError(
                f"Unexpected parser error in {origin}: {exc}",
            ) from exc
        return Success(origin=origin, ast=ast)

    def render(self, ast: Any) -> str:
        """Render *ast* with the backend's tree printer."""
        try:
            return self._parser.render(ast)
        except ManifestToolError:
            raise
        except Exception as exc:
            raise ValidationInternalError(
                f"Unexpected error while rendering parse tree: {exc}",
            ) from exc
