"""
Command-line interface for the hex dump utility.
"""

import argparse
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from .binary_reader import BinaryReader
from .data_models import (
    __version__,
    DEFAULT_BYTES_PER_LINE,
    HELP_TEXT,
    PROG,
    UNBOUNDED,
    DumpConfig,
)
from .dumper import Dumper
from .errors import HexdumpError, UsageError


@dataclass(frozen=True)
class Options:
    """Everything parsed from the command line."""
    config: DumpConfig
    path: Optional[Path] = None
    show_help: bool = False
    show_version: bool = False


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of printing and exiting."""

    def error(self, message):
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(prog=PROG, add_help=False)
    parser.add_argument('-l', dest='bytes_per_line', type=int, default=DEFAULT_BYTES_PER_LINE,
                        metavar='<int>', help='bytes per line in output')
    parser.add_argument('-n', dest='bytes_to_read', type=int, default=UNBOUNDED,
                        metavar='<int>', help='number of bytes to read')
    parser.add_argument('-o', dest='offset', type=int, default=0,
                        metavar='<int>', help='byte offset at which to begin reading')
    parser.add_argument('file', nargs='?', type=Path, help='file to dump (default: stdin)')
    return parser


def _flag_present(argv: List[str], flag: str) -> bool:
    for arg in argv:
        if arg == '--':
            return False
        if arg == flag:
            return True
    return False


def parse_args(argv: Optional[List[str]] = None) -> Options:
    """
    Parse command-line arguments.

    --help and --version are looked for before anything else, so they work
    even alongside arguments that would otherwise be rejected.

    Raises:
        UsageError: on unknown options, missing or malformed values, or
            values out of range
    """
    if argv is None:
        argv = sys.argv[1:]

    if _flag_present(argv, '--help'):
        return Options(config=DumpConfig(), show_help=True)
    if _flag_present(argv, '--version'):
        return Options(config=DumpConfig(), show_version=True)

    args = build_parser().parse_args(argv)
    config = DumpConfig(
        bytes_per_line=args.bytes_per_line,
        bytes_to_read=args.bytes_to_read,
        offset=args.offset,
    )
    return Options(config=config, path=args.file)


def _silence_stdout():
    # Python flushes stdout again at exit; point it somewhere harmless.
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, sys.stdout.fileno())


def main(argv: Optional[List[str]] = None) -> int:
    try:
        options = parse_args(argv)
    except UsageError as e:
        print(f"Error: {e}", file=sys.stderr)
        print(file=sys.stderr)
        print(HELP_TEXT, end='', file=sys.stderr)
        return 1

    if options.show_help:
        print(HELP_TEXT, end='')
        return 0

    if options.show_version:
        print(__version__)
        return 0

    try:
        with BinaryReader(options.path) as reader:
            Dumper(reader, options.config).dump(sys.stdout)
        sys.stdout.flush()
    except HexdumpError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except BrokenPipeError:
        _silence_stdout()
        return 1

    return 0


if __name__ == '__main__':
    raise SystemExit(main())
