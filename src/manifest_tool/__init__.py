"""manifest-tool — validate and dump manifests from the command line.

Built around an injected parser with a strict layered architecture.
"""

from manifest_tool.version import __version__

__all__: list[str] = ["__version__"]
