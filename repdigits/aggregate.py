from typing import Iterable

from repdigits.ranges import Range
from repdigits.scanners import Scanner


def collect(ranges: Iterable[Range], scanner: Scanner) -> set[int]:
    """Union of the matches of every range; overlapping ranges count once."""
    found: set[int] = set()
    for rng in ranges:
        found |= scanner.scan(rng)
    return found


def total(ranges: Iterable[Range], scanner: Scanner) -> int:
    if scanner.dedupe_across_ranges:
        return sum(collect(ranges, scanner))
    return sum(sum(scanner.scan(rng)) for rng in ranges)
