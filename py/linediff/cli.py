"""linediff command line: compare two files line by line."""

import argparse
import logging
import os
import sys
from typing import List, Optional

from .document import load
from .hunks import diff_documents
from .render import render, render_stat
from .types import (
    DiffError, DiffOptions, InvalidConfigurationError,
    DEFAULT_CONTEXT_LINES, DEFAULT_MAX_CELLS,
)

logger = logging.getLogger("linediff")

EXIT_SAME = 0
EXIT_DIFFERENT = 1
EXIT_TROUBLE = 2


def _env_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    if value is None or value == "":
        return default
    try:
        return int(value)
    except ValueError:
        raise InvalidConfigurationError(f"{name} must be an integer, got {value!r}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="linediff",
        description="Compare two files line by line and print a unified diff.",
    )
    parser.add_argument("file_a", help="original file, or - for standard input")
    parser.add_argument("file_b", help="new file, or - for standard input")
    parser.add_argument("-U", "--context", type=int, metavar="N",
                        help=f"lines of context (default {DEFAULT_CONTEXT_LINES})")
    parser.add_argument("-w", "--ignore-all-space", action="store_true",
                        help="ignore all whitespace when comparing lines")
    parser.add_argument("--strip-trailing-cr", action="store_true",
                        help="ignore carriage returns at the end of lines")
    parser.add_argument("--max-cells", type=int, metavar="N",
                        help=f"largest LCS table to build (default {DEFAULT_MAX_CELLS})")
    parser.add_argument("-q", "--brief", action="store_true",
                        help="only report whether the files differ")
    parser.add_argument("--stat", action="store_true",
                        help="print a summary of insertions and deletions")
    parser.add_argument("--no-headers", action="store_true",
                        help="omit the ---/+++ file header lines")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="log debug information to standard error")
    return parser


def options_from_args(args: argparse.Namespace) -> DiffOptions:
    """Build DiffOptions from arguments, falling back to the environment."""
    context = args.context
    if context is None:
        context = _env_int("LINEDIFF_CONTEXT", DEFAULT_CONTEXT_LINES)
    max_cells = args.max_cells
    if max_cells is None:
        max_cells = _env_int("LINEDIFF_MAX_CELLS", DEFAULT_MAX_CELLS)

    return DiffOptions(
        context_lines=context,
        ignore_whitespace=args.ignore_all_space,
        ignore_line_endings=args.strip_trailing_cr,
        max_cells=max_cells,
    ).validate()


def run(args: argparse.Namespace) -> int:
    """Diff the two files named in args and write the result to stdout."""
    options = options_from_args(args)
    if args.file_a == "-" and args.file_b == "-":
        raise InvalidConfigurationError("standard input can only be used once")

    a = load(args.file_a)
    b = load(args.file_b)
    script = diff_documents(a, b, options)

    if script.is_empty:
        return EXIT_SAME

    if args.brief:
        output = f"Files {a.source} and {b.source} differ\n"
    elif args.stat:
        output = render_stat(script)
    else:
        output = render(script, file_headers=not args.no_headers)

    sys.stdout.write(output)
    return EXIT_DIFFERENT


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        return run(args)
    except DiffError as e:
        logger.debug("aborting", exc_info=True)
        print(f"linediff: {e.kind}: {e}", file=sys.stderr)
        return EXIT_TROUBLE


if __name__ == "__main__":
    sys.exit(main())
