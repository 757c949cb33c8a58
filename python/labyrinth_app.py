#!/usr/bin/env python3
"""
Command-line entry point for the labyrinth solver.

Reads labyrinth definitions from stdin, or from a single content
argument, and prints one verdict per labyrinth once "0 0 0" is read.

Usage:
    labyrinth [content] [--interactive] [--debug]
"""

from __future__ import annotations

import argparse
import logging
import re
import sys
from typing import Iterable, TextIO

from rich.console import Console
from rich.text import Text

from labyrinth_cli import LabyrinthCli
from labyrinth_types import LabyrinthError

logger = logging.getLogger(__name__)

# Content passed on the command line may carry escaped newlines
CONTENT_LINE_SPLIT = re.compile(r"\r?\n|\\r\\n|\\n")


def split_content(content: str) -> list[str]:
    """Split inline content into input lines."""
    return CONTENT_LINE_SPLIT.split(content)


def run(
    cli: LabyrinthCli,
    lines: Iterable[str],
    console: Console,
    err_console: Console,
) -> int:
    """
    Feed lines to the CLI until it is done or an error occurs.

    Returns:
        0 if the session was finished with "0 0 0", otherwise 1
    """
    cli.print_instructions()
    cli.flush(console)

    for line in lines:
        try:
            cli.process_line(line.rstrip("\r\n"))
        except LabyrinthError as e:
            cli.flush(console)
            err_console.print(
                Text.assemble(("Fatal Error: ", "bold red"), (str(e), "red")),
                soft_wrap=True,
            )
            logger.debug("Aborted on line %r", line)
            return 1
        cli.flush(console)
        if cli.is_done:
            return 0

    return 0 if cli.is_done else 1


def main(argv: list[str] | None = None, stdin: TextIO | None = None) -> int:
    parser = argparse.ArgumentParser(description="Find the fastest way out of 3D labyrinths.")
    parser.add_argument(
        "content",
        nargs="?",
        help="Labyrinth definition (lines separated by newlines or literal \\n); read from stdin if omitted",
    )
    parser.add_argument("--interactive", action="store_true", help="Print input instructions")
    parser.add_argument("--debug", action="store_true", help="Print solved labyrinths and debug logging")
    args = parser.parse_args(argv)

    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s: %(message)s")

    console = Console(highlight=False)
    err_console = Console(stderr=True, highlight=False)
    cli = LabyrinthCli(interactive=args.interactive, debug=args.debug)

    if args.content is not None:
        lines: Iterable[str] = split_content(args.content)
    else:
        lines = stdin if stdin is not None else sys.stdin

    return run(cli, lines, console, err_console)


if __name__ == "__main__":
    raise SystemExit(main())
