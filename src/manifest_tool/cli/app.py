"""CLI application entry point and command routing for manifest-tool.

This module is the **sole error boundary** for the entire application.
It catches :class:`~manifest_tool.exceptions.ManifestToolError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the core
  runners and the infrastructure adapters.
* Collaborators are created by small ``_make_*`` factories so tests can
  swap them without touching the wiring.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import sys

from manifest_tool.cli import exit_codes
from manifest_tool.cli.console import console, print_error
from manifest_tool.cli.logging_setup import configure_logging, resolve_level
from manifest_tool.cli.reporter import Reporter
from manifest_tool.core.dump_runner import DumpRunner
from manifest_tool.core.input_resolver import InputResolver
from manifest_tool.core.models import InvocationOptions, Mode, RunReport
from manifest_tool.core.parse_service import ParseService
from manifest_tool.core.protocols import EnvironmentProvider, FileSystem, ManifestParser
from manifest_tool.core.validation_runner import ValidationRunner
from manifest_tool.exceptions import ManifestToolError
from manifest_tool.version import __version__

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Sub-commands:
    * ``manifest-tool validate [<manifest> ...]``
    * ``manifest-tool dump [-e <source>] [--[no-]validate] [<manifest> ...]``
    """
    parser = argparse.ArgumentParser(
        prog="manifest-tool",
        description="Interact directly with the manifest parser.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-v", "--verbose", action="store_true", help="Log progress details.",
    )
    verbosity.add_argument(
        "-q", "--quiet", action="store_true", help="Only log warnings and errors.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log debug output, including tracebacks.",
    )

    commands = parser.add_subparsers(dest="command", metavar="<command>")

    validate = commands.add_parser(
        "validate",
        help="Validate the syntax of one or more manifests.",
        description=(
            "Validate manifest syntax without applying anything. With no "
            "manifests, read stdin when it is not a terminal, else validate "
            "the environment's default manifest. Stops at the first error."
        ),
    )
    validate.add_argument("manifests", nargs="*", metavar="manifest")

    dump = commands.add_parser(
        "dump",
        help="Print the parse tree of manifests for debugging.",
        description=(
            "Parse manifests (or -e source text, or stdin) and print the "
            "resulting tree. The output format is not a stable API."
        ),
    )
    dump.add_argument(
        "-e",
        dest="source",
        default=None,
        metavar="<source>",
        help="Dump one source expression given on the command line.",
    )
    dump.add_argument(
        "--validate",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Validate the parsed result; with --no-validate only syntax errors are reported.",
    )
    dump.add_argument(
        "--headers",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Print a '--- <origin>' line before each source (default: when more than one).",
    )
    dump.add_argument("manifests", nargs="*", metavar="manifest")

    return parser


# ---------------------------------------------------------------------------
# Collaborator factories
# ---------------------------------------------------------------------------

def _make_parser() -> ManifestParser:
    from manifest_tool.infra.lark_parser import LarkManifestParser

    return LarkManifestParser()


def _make_environment() -> EnvironmentProvider:
    from manifest_tool.infra.environment import ProcessEnvironment

    return ProcessEnvironment()


def _make_filesystem() -> FileSystem:
    from manifest_tool.infra.filesystem import LocalFileSystem

    return LocalFileSystem()


def _exit_code(report: RunReport) -> int:
    return exit_codes.SUCCESS if report.succeeded else exit_codes.GENERAL_ERROR


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_validate(args: argparse.Namespace) -> int:
    """Validate the resolved sources, halting at the first failure."""
    resolver = InputResolver(_make_environment(), sys.stdin)
    request = resolver.resolve(Mode.VALIDATE, args.manifests)

    runner = ValidationRunner(ParseService(_make_parser()), Reporter(), _make_filesystem())
    return _exit_code(runner.run(request.sources))


def _handle_dump(args: argparse.Namespace) -> int:
    """Dump every resolved source, continuing past failures."""
    environment = _make_environment()
    validate: bool = (
        args.validate if args.validate is not None
        else environment.dump_validates_by_default()
    )
    options = InvocationOptions(
        inline_source=args.source,
        validate=validate,
        show_headers=args.headers,
    )
    request = InputResolver(environment, sys.stdin).resolve(
        Mode.DUMP, args.manifests, options,
    )

    runner = DumpRunner(ParseService(_make_parser()), Reporter(), _make_filesystem())
    return _exit_code(runner.run(request.sources, request.options))


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the manifest-tool CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(
        resolve_level(verbose=args.verbose, quiet=args.quiet, debug=args.debug),
    )

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    if args.command == "validate":
        return _handle_validate(args)

    return _handle_dump(args)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except ManifestToolError as exc:
        logger.debug("Command failed", exc_info=exc)
        print_error(str(exc), exc.hint)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        logger.debug("Unexpected error", exc_info=exc)
        print_error(
            "Unexpected error. Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}",
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
