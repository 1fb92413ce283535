import argparse
import logging
import re
import sys

from pydantic import ValidationError

from splitfile.config import SplitFileSettings
from splitfile.exceptions import SplitFileError
from splitfile.merger import FileMerger
from splitfile.report import get_logger
from splitfile.splitter import FileSplitter

LEADING_INT = re.compile(r"\s*([+-]?\d+)")

SIZE_UNITS = {
    "b": 1,
    "k": 1024,
    "m": 1024 * 1024,
    "g": 1024 * 1024 * 1024,
}

EPILOG = """\
examples:
  split-file -s input.bin 5
  split-file -x input.bin 457000
  split-file -m output.bin part1 part2 ...
"""


class _UsageRequested(Exception):
    pass


class _UsageParser(argparse.ArgumentParser):
    """Prints the full help instead of exiting with status 2 on bad arguments."""

    def error(self, message: str) -> None:
        self.print_help()
        raise _UsageRequested(message)


def parse_size(size_str: str) -> int | None:
    """
    Convert a size string ('457000', '500k', '1m', '2g') to bytes.
    Returns None when the string is not a valid size.
    """
    size_str = size_str.strip().lower()
    if size_str.isdigit():
        return int(size_str)

    unit = size_str[-1:]
    if unit in SIZE_UNITS:
        try:
            return int(float(size_str[:-1]) * SIZE_UNITS[unit])
        except ValueError:
            return None
    return None


def _parse_parts(value: str) -> int | None:
    """Leading decimal integer of ``value``, e.g. '5abc' -> 5; None if absent."""
    match = LEADING_INT.match(value)
    if match is None:
        return None
    return int(match.group(1))


def build_parser() -> argparse.ArgumentParser:
    parser = _UsageParser(
        prog="split-file",
        description="Split a file into raw byte-range parts, or merge parts back.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    action = parser.add_mutually_exclusive_group(required=True)
    action.add_argument(
        "-s",
        dest="split",
        nargs=2,
        metavar=("INPUT", "NUM_PARTS"),
        help="Split the input file in the number of parts given.",
    )
    action.add_argument(
        "-x",
        dest="split_size",
        nargs=2,
        metavar=("INPUT", "MAX_SIZE"),
        help=(
            "Split the input file into multiple parts with file size maximum "
            "of MAX_SIZE bytes (k, m and g suffixes accepted)."
        ),
    )
    action.add_argument(
        "-m",
        dest="merge",
        nargs="+",
        metavar=("OUTPUT", "PART"),
        help="Merge the given parts, in the given order, into the output file.",
    )
    parser.add_argument(
        "-d",
        "--dest",
        default=None,
        help="Existing directory to write parts to (default: next to the input).",
    )
    parser.add_argument(
        "-w",
        "--workers",
        type=int,
        default=None,
        help="Maximum number of parts written concurrently.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log every part written."
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except _UsageRequested:
        return 0

    logger = get_logger()
    logger.setLevel(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        settings = SplitFileSettings.from_env(max_workers=args.workers)
    except ValidationError as e:
        print(f"Invalid settings: {e}", file=sys.stderr)
        return 1

    try:
        if args.split:
            source, raw_parts = args.split
            parts = _parse_parts(raw_parts)
            if parts is None:
                parser.print_help()
                return 0
            splitter = FileSplitter(settings=settings, logger=logger)
            names = splitter.split_by_count(source, parts, args.dest)
            print("Successfully split into: " + ", ".join(names))

        elif args.split_size:
            source, raw_size = args.split_size
            max_size = parse_size(raw_size)
            if max_size is None:
                parser.print_help()
                return 0
            splitter = FileSplitter(settings=settings, logger=logger)
            names = splitter.split_by_size(source, max_size, args.dest)
            print("Successfully split into: " + ", ".join(names))

        else:
            output, *parts = args.merge
            if not parts:
                parser.print_help()
                return 0
            FileMerger(settings=settings, logger=logger).merge(parts, output)
            print(f"Successfully merged the parts into {output}")

    except SplitFileError as e:
        print("An error occurred:", file=sys.stderr)
        print(e, file=sys.stderr)
        return 1

    return 0


__all__ = ["main", "build_parser", "parse_size"]
