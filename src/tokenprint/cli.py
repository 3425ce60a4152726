#!/usr/bin/env python3
import argparse
import os
import sys
from contextlib import suppress

from tokenprint import __version__
from tokenprint.lib.logger import Logger
from tokenprint.report import OutputWriteError, write_report


def _build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser. The report takes no arguments."""

    parser = argparse.ArgumentParser(prog="tokenprint", description="Print the fixed token report")
    parser.add_argument("--version", action="version", version=__version__)
    parser.set_defaults(handler=cmd_report)

    return parser


def _detach_stdout() -> None:
    """Point stdout at devnull so the exit-time flush cannot fail again."""

    with suppress(OSError, ValueError):
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())


def cmd_report(_: argparse.Namespace) -> int:
    """
    Write the token report to stdout.

    Returns:
        int: 0 when every line was written, 1 if stdout could not be written.
    """

    Logger.debug("Writing token report...")

    try:
        count = write_report()
    except OutputWriteError as e:
        if isinstance(e.__cause__, BrokenPipeError):
            _detach_stdout()
        Logger.error(str(e))
        return 1

    Logger.debug(f"Report complete ({count} tokens).")
    return 0


def main(argv: list[str] | None = None) -> int:
    """
    Entry point for the `tokenprint` CLI.

    Sets up logging and writes the report. Unrecognized arguments are ignored.

    Args:
        argv (list[str] | None): Arguments excluding the executable; if None, uses sys.argv[1:].

    Returns:
        int: Process exit code.
    """

    Logger.setup(Logger.INFO)

    ns, _ = _build_parser().parse_known_args(argv)
    return ns.handler(ns)


def _run() -> None:
    """Console-script wrapper around `main` that exits with its status."""

    try:
        sys.exit(main())
    except Exception as e:
        Logger.error(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    _run()
