"""Allow ``python -m manifest_tool`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m manifest_tool`` behaves identically to the
``manifest-tool`` console script.
"""

from __future__ import annotations

from manifest_tool.cli.app import cli

if __name__ == "__main__":
    cli()
