"""Command line entry point for linking dotfiles."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from dotsym.dotfiles import Dots, DotfilesError, Flags

_VERSION = "0.1.0"


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the command."""
    parser = argparse.ArgumentParser(
        prog="dotsym",
        description="Symlink dotfiles declared in a table file.",
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {_VERSION}")
    parser.add_argument(
        "-f", "--force", action="store_true", help="Overrides files and directories."
    )
    parser.add_argument(
        "-j",
        "--headers",
        action="store_true",
        help="Indicates whether the dots file includes headers or not.",
    )
    parser.add_argument(
        "--source-prefix",
        dest="source_prefix",
        default=None,
        help="Specify the prefix path for source (default: current directory)",
    )
    parser.add_argument(
        "--dest-prefix",
        dest="destination_prefix",
        default=None,
        help="Specify the prefix path for destination (default: home directory)",
    )
    parser.add_argument(
        "-t",
        "--file-format",
        dest="file_format",
        default="org",
        choices=["org", "csv"],
        help="Specify the file format for dots declaration file.",
    )
    parser.add_argument(
        "-d",
        "--dots",
        dest="filename",
        default="DOTS",
        help="Specify the dots declaration file.",
    )
    parser.add_argument(
        "-u",
        "--url",
        default="",
        help="[EXPERIMENTAL]. Specify the repository url.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the command; return the exit status."""
    args = build_parser().parse_args(argv)
    source_prefix = args.source_prefix if args.source_prefix is not None else os.getcwd()
    destination_prefix = (
        args.destination_prefix
        if args.destination_prefix is not None
        else str(Path.home())
    )

    print(f"[DEBUG]: Force status: {str(args.force).lower()}")

    flags = Flags.build(
        args.file_format,
        args.headers,
        args.force,
        source_prefix,
        destination_prefix,
    )
    dots = Dots(flags)

    try:
        dots.parse_file(args.filename)
        dots.verify()
    except DotfilesError as err:
        print(err, file=sys.stderr)
        return 1

    dots.execute()
    return 0


if __name__ == "__main__":
    sys.exit(main())