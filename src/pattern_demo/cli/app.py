"""CLI application entry point and command routing for pattern-demo.

This module is the **sole error boundary** for the entire application.
It catches :class:`~pattern_demo.exceptions.PatternDemoError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages on stderr and returning well-defined exit codes.

Architecture notes
------------------
* No pattern logic lives here — all work is delegated to ``core``.
* Results go to stdout, errors and log records to stderr.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import sys

from pattern_demo.cli import exit_codes
from pattern_demo.cli.console import err_console, escape_markup
from pattern_demo.cli.logging_config import configure_logging
from pattern_demo.exceptions import PatternDemoError
from pattern_demo.version import __version__

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    * ``pattern-demo [demo]``                 — run every pattern once
    * ``pattern-demo build --cpu .. --ram ..`` — build one computer spec
    * ``pattern-demo animal [KIND]``           — create one animal
    * ``pattern-demo --version``
    """
    parser = argparse.ArgumentParser(
        prog="pattern-demo",
        description="Singleton, Builder and Factory pattern demonstrations.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging on stderr.",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    subparsers.add_parser("demo", help="Run the full demonstration (default).")

    build = subparsers.add_parser("build", help="Build a single computer spec.")
    build.add_argument("--cpu", default=None, help="Processor (required).")
    build.add_argument("--ram", default=None, help="Memory (required).")
    build.add_argument("--storage", default=None, help="Storage (optional).")
    build.add_argument("--gpu", default=None, help="Graphics card (optional).")

    animal = subparsers.add_parser("animal", help="Create an animal by kind.")
    kind_source = animal.add_mutually_exclusive_group()
    kind_source.add_argument(
        "kind",
        nargs="?",
        default=None,
        help="Animal kind, case-insensitive (e.g. dog, cat).",
    )
    kind_source.add_argument(
        "-i",
        "--interactive",
        action="store_true",
        help="Pick the kind from a list instead.",
    )

    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_demo() -> int:
    from pattern_demo.cli.demo import run_demo

    return run_demo()


def _handle_build(args: argparse.Namespace) -> int:
    """Build one spec from the command-line parts and print it."""
    from pattern_demo.cli.demo import show_computer
    from pattern_demo.core.builder import ComputerSpecBuilder
    from pattern_demo.core.protocols import ComputerBuilder

    builder: ComputerBuilder = ComputerSpecBuilder()
    spec = (
        builder
        .set_cpu(args.cpu)
        .set_ram(args.ram)
        .set_storage(args.storage)
        .set_gpu(args.gpu)
        .build()
    )
    show_computer(spec)
    return exit_codes.SUCCESS


def _handle_animal(args: argparse.Namespace) -> int:
    """Create one animal, optionally choosing the kind interactively."""
    from pattern_demo.cli.demo import show_animal
    from pattern_demo.core.factory import AnimalFactory

    factory = AnimalFactory()
    kind: str | None = args.kind
    if args.interactive:
        from pattern_demo.cli.animal_prompt import prompt_animal_kind

        kind = prompt_animal_kind(factory.known_kinds())

    show_animal(factory.create_animal(kind))
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the pattern-demo CLI.

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

    configure_logging(args.verbose)
    logger.debug("Dispatching command %r", args.command or "demo")

    if args.command == "build":
        return _handle_build(args)
    if args.command == "animal":
        return _handle_animal(args)
    return _handle_demo()


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
    except PatternDemoError as exc:
        err_console.print(
            f"[bold red]Error:[/bold red] {type(exc).__name__}: {escape_markup(exc)}"
        )
        if exc.hint:
            err_console.print(f"[yellow]Hint:[/yellow] {escape_markup(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        err_console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        logger.debug("Unexpected error", exc_info=True)
        err_console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape_markup(exc)}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
