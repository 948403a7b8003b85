"""lark backed implementation of :class:`~manifest_tool.core.protocols.ManifestParser`.

This module is the **only** place in the codebase that imports ``lark``.
All lark exceptions are caught here and re-raised as
:class:`~manifest_tool.exceptions.ParseError` — nothing raw escapes the
infrastructure boundary.
"""

from __future__ import annotations

from typing import Any

from manifest_tool.exceptions import EnvironmentError, ParseError
from manifest_tool.infra.manifest_grammar import GRAMMAR

_SCOPE_RULES: frozenset[str] = frozenset(
    {"class_definition", "define_definition", "node_definition"},
)


class LarkManifestParser:
    """Concrete :class:`ManifestParser` backed by a lark LALR parser.

    Usage::

        parser = LarkManifestParser()
        tree = parser.parse_and_validate("$x = 1 + 1", "site.pp")
        print(parser.render(tree))

    The compiled parser is built on first use and reused afterwards.
    """

    def __init__(self) -> None:
        self._lark: Any = None

    # ------------------------------------------------------------------
    # Protocol methods
    # ------------------------------------------------------------------

    def parse_only(self, source: str, origin: str | None = None) -> Any:
        """Parse *source* into a lark ``Tree``; syntax errors only."""
        lark_parser = self._get_lark()

        from lark.exceptions import UnexpectedInput

        try:
            return lark_parser.parse(source)
        except UnexpectedInput as exc:
            raise self._syntax_error(exc, origin) from exc

    def parse_and_validate(self, source: str, origin: str) -> Any:
        """Parse *source* and apply the semantic checks to the result."""
        tree = self.parse_only(source, origin)
        _ScopeValidator(origin).check(tree)
        return tree

    def render(self, ast: Any) -> str:
        """Return lark's indented dump of *ast*."""
        return str(ast.pretty())

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _get_lark(self) -> Any:
        if self._lark is not None:
            return self._lark
        try:
            from lark import Lark
        except ModuleNotFoundError as exc:
            raise EnvironmentError(
                "lark is not installed. Install with: pip install lark",
            ) from exc
        self._lark = Lark(
            GRAMMAR,
            parser="lalr",
            propagate_positions=True,
            maybe_placeholders=False,
        )
        return self._lark

    @staticmethod
    def _syntax_error(exc: Any, origin: str | None) -> ParseError:
        """Translate a lark ``UnexpectedInput`` into a :class:`ParseError`."""
        token = getattr(exc, "token", None)
        char = getattr(exc, "char", None)
        if token is not None and token.type not in ("$END", "<EOF>"):
            detail = f"'{token}'"
        elif char is not None:
            detail = f"'{char}'"
        else:
            detail = "end of input"

        line = exc.line if isinstance(exc.line, int) and exc.line > 0 else None
        column = exc.column if isinstance(exc.column, int) and exc.column > 0 else None
        return ParseError(
            f"Syntax error at {detail}{_location(origin, line, column)}",
            origin=origin,
            line=line,
            column=column,
        )


class _ScopeValidator:
    """Walk a parse tree and raise on the first semantic problem.

    Classes, defines and nodes open a new variable scope; conditionals
    do not.
    """

    def __init__(self, origin: str) -> None:
        self._origin = origin

    def check(self, tree: Any) -> None:
        self._walk(tree, {})

    def _walk(self, tree: Any, assigned: dict[str, Any]) -> None:
        for child in tree.children:
            if not hasattr(child, "data"):
                continue
            if child.data in _SCOPE_RULES:
                self._walk(child, self._declare_parameters(child))
                continue
            if child.data == "assignment":
                self._check_assignment(child, assigned)
            elif child.data == "attributes":
                self._check_attributes(child)
            self._walk(child, assigned)

    def _declare_parameters(self, definition: Any) -> dict[str, Any]:
        scope: dict[str, Any] = {}
        for child in definition.children:
            if getattr(child, "data", None) != "parameters":
                continue
            for param in child.children:
                token = param.children[0]
                if str(token) in scope:
                    self._fail(f"The parameter '{token}' is declared more than once", token)
                scope[str(token)] = token
        return scope

    def _check_assignment(self, node: Any, assigned: dict[str, Any]) -> None:
        token = node.children[0]
        name = str(token)
        bare = name.lstrip("$")
        if bare.isdigit():
            self._fail(
                f"Illegal attempt to assign to the numeric match result variable '{name}'",
                token,
            )
        if "::" in bare:
            self._fail(
                f"Illegal attempt to assign to '{name}'. "
                "Cannot assign to variables in other namespaces",
                token,
            )
        if name in assigned:
            self._fail(f"Cannot reassign variable '{name}'", token)
        assigned[name] = token

    def _check_attributes(self, node: Any) -> None:
        seen: set[str] = set()
        for attribute in node.children:
            token = attribute.children[0]
            if str(token) in seen:
                self._fail(f"The attribute '{token}' has already been set", token)
            seen.add(str(token))

    def _fail(self, message: str, token: Any) -> None:
        line = getattr(token, "line", None)
        column = getattr(token, "column", None)
        raise ParseError(
            f"{message}{_location(self._origin, line, column)}",
            origin=self._origin,
            line=line,
            column=column,
        )


def _location(origin: str | None, line: int | None, column: int | None) -> str:
    """Build the ``(file: …, line: …, column: …)`` suffix of a message."""
    parts: list[str] = []
    if origin:
        parts.append(f"file: {origin}")
    if line is not None:
        parts.append(f"line: {line}")
    if column is not None:
        parts.append(f"column: {column}")
    return f" ({', '.join(parts)})" if parts else ""
