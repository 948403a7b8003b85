"""Infrastructure: the active environment, read from process variables.

Satisfies :class:`~manifest_tool.core.protocols.EnvironmentProvider`.

Variables
---------
``MANIFEST_TOOL_CONFDIR``
    Configuration directory (default ``/etc/manifest-tool``).
``MANIFEST_TOOL_ENVIRONMENT``
    Active environment name (default ``production``).
``MANIFEST_TOOL_MANIFEST``
    Explicit default manifest; overrides the derived path.
``MANIFEST_TOOL_DUMP_VALIDATE``
    Default for ``dump --[no-]validate`` (default off).
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from manifest_tool.exceptions import ConfigurationError

DEFAULT_CONFDIR: str = "/etc/manifest-tool"
DEFAULT_ENVIRONMENT: str = "production"

_TRUE_VALUES: frozenset[str] = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES: frozenset[str] = frozenset({"0", "false", "no", "off"})


class ProcessEnvironment:
    """Environment settings backed by a mapping (``os.environ`` by default)."""

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ: Mapping[str, str] = os.environ if environ is None else environ

    @property
    def confdir(self) -> Path:
        return Path(self._environ.get("MANIFEST_TOOL_CONFDIR") or DEFAULT_CONFDIR)

    @property
    def name(self) -> str:
        return self._environ.get("MANIFEST_TOOL_ENVIRONMENT") or DEFAULT_ENVIRONMENT

    # ------------------------------------------------------------------
    # Protocol methods
    # ------------------------------------------------------------------

    def default_manifest(self) -> str:
        explicit = self._environ.get("MANIFEST_TOOL_MANIFEST")
        if explicit:
            return explicit
        return str(self.confdir / "environments" / self.name / "manifests" / "site.pp")

    def dump_validates_by_default(self) -> bool:
        return _parse_bool(
            "MANIFEST_TOOL_DUMP_VALIDATE",
            self._environ.get("MANIFEST_TOOL_DUMP_VALIDATE"),
            default=False,
        )


def _parse_bool(name: str, raw: str | None, *, default: bool) -> bool:
    """Interpret an on/off environment value."""
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigurationError(
        f"Invalid value for {name}: {raw!r}",
        hint="Use one of: 1, true, yes, on, 0, false, no, off.",
    )
