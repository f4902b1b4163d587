from repdigits.errors import ArithmeticOverflow, InvalidRange
from repdigits.ranges import Range, parse_ranges
from repdigits.scanners import (
    BruteForceScanner,
    GeneralRepetitionScanner,
    PairwiseScanner,
    Scanner,
    get_scanner,
)

__all__ = [
    "ArithmeticOverflow",
    "BruteForceScanner",
    "GeneralRepetitionScanner",
    "InvalidRange",
    "PairwiseScanner",
    "Range",
    "Scanner",
    "get_scanner",
    "parse_ranges",
]

__version__ = "0.1.0"
