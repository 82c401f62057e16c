"""Main CLI entry point for crcsum."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .. import __version__
from ..cli.report import parse_hex, report_bytes, report_file

BANNER = "crcsum: CRC algorithm sample program"


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the crcsum CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        prog="crcsum",
        description=BANNER,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  crcsum data.bin more.bin       CRC values of each file
  crcsum -a                      Prompt for a line of ASCII text
  crcsum -x                      Prompt for a line of hexadecimal bytes
        """,
    )

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "-a",
        "-A",
        "--ascii",
        action="store_true",
        help="Ask for ASCII input. Following parameters ignored.",
    )
    mode.add_argument(
        "-x",
        "-X",
        "--hex",
        action="store_true",
        help="Ask for hexadecimal input. Following parameters ignored.",
    )

    parser.add_argument(
        "files",
        nargs="*",
        metavar="FILE",
        help="Files whose CRC values are calculated separately",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"crcsum {__version__}",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    out = sys.stdout

    if args.ascii or args.hex:
        print("Input: ", end="", file=out, flush=True)
        line = sys.stdin.readline().rstrip("\r\n")
        if args.ascii:
            report_bytes(f'"{line}"', line.encode("utf-8"), out)
        else:
            report_bytes(f'"{line}"', parse_hex(line), out)
        return 0

    # If no input specified, show help
    if not args.files:
        print(BANNER, file=out)
        print(file=out)
        parser.print_help(out)
        return 0

    for name in args.files:
        report_file(Path(name), out)

    return 0


if __name__ == "__main__":
    sys.exit(main())
