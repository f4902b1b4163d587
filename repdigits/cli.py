import argparse
import logging
import sys
import time
from typing import Optional, Sequence

from repdigits.aggregate import total
from repdigits.ranges import Range, parse_ranges
from repdigits.scanners import get_scanner

logger = logging.getLogger(__name__)

PARTS = {"doubled": "Part 1", "repeated": "Part 2"}


def read_ranges(path: str) -> list[Range]:
    with open(path, "r", encoding="utf-8") as f:
        ranges = parse_ranges(f.read())
    logger.debug("read %d ranges from %s", len(ranges), path)
    return ranges


def solve(path: str, mode: str) -> int:
    return total(read_ranges(path), get_scanner(mode))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="repdigits",
        description="Sum identifiers made of a repeated digit fragment.",
    )
    parser.add_argument("input", help="file holding start-end,start-end,... ranges")
    parser.add_argument(
        "--mode",
        choices=["doubled", "repeated", "both"],
        default="both",
        help="doubled: fragment repeated exactly twice; repeated: two or more times",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    try:
        ranges = read_ranges(args.input)
    except OSError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    modes = list(PARTS) if args.mode == "both" else [args.mode]
    for mode in modes:
        scanner = get_scanner(mode)
        started = time.perf_counter()
        try:
            result = total(ranges, scanner)
        except ValueError as e:
            print(f"error: {e}", file=sys.stderr)
            return 1
        elapsed = time.perf_counter() - started
        print(f"{PARTS[mode]}: {result} (time: {elapsed:.6f}s)")
    return 0
