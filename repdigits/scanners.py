"""Search strategies for identifiers made of a repeated digit fragment.

Each scanner builds candidate values directly from digit fragments instead of
walking every integer in the range, so ranges with billions of members are
scanned in time proportional to the number of fragments tried.

- ``PairwiseScanner`` only finds fragments repeated exactly twice and only at
  the digit length of the (adjusted) range start. It is fast but partial.
- ``GeneralRepetitionScanner`` finds every fragment repeated two or more times
  at every digit length the range covers.
- ``BruteForceScanner`` checks every integer and is meant for small ranges.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Optional

from repdigits.digits import (
    digits_count,
    is_repeated,
    pow10,
    repeat_value,
    split_first,
    split_last,
)
from repdigits.ranges import Range

logger = logging.getLogger(__name__)


class Scanner(ABC):
    name: str = ""
    # when False, totals count a value once for every range that holds it
    dedupe_across_ranges: bool = True

    @abstractmethod
    def scan(self, rng: Range) -> set[int]:
        """Return every matching identifier inside ``rng``."""


class PairwiseScanner(Scanner):
    name = "doubled"
    dedupe_across_ranges = False

    def scan(self, rng: Range) -> set[int]:
        return set(self.find_doubled(rng) or ())

    def find_doubled(self, rng: Range) -> Optional[list[int]]:
        start_digits = digits_count(rng.start)
        end_digits = digits_count(rng.end)
        if start_digits % 2 and start_digits == end_digits:
            logger.debug(
                "range %s only holds %d-digit numbers, nothing can be doubled",
                rng,
                start_digits,
            )
            return None

        start = rng.start
        end = rng.end
        if start_digits % 2:
            start = pow10(start_digits)
            start_digits += 1
            logger.debug("odd-length start moved up to %d", start)
        if end_digits % 2:
            end_digits -= 1
            end = pow10(end_digits) - 1
            logger.debug("odd-length end moved down to %d", end)
        assert end_digits >= start_digits, f"inconsistent range {rng}"

        half = start_digits // 2
        first_half_start = split_first(start, start_digits, half)
        first_half_end = split_first(end, end_digits, end_digits // 2)
        last_half_end = split_last(end, end_digits // 2)
        window_end = max(last_half_end, first_half_end)
        if window_end < first_half_start:
            logger.debug(
                "window %d-%d is empty for range %s",
                first_half_start,
                window_end,
                rng,
            )
            return None

        logger.debug("checking doubled halves %d-%d", first_half_start, window_end)
        found: list[int] = []
        for seed in range(first_half_start, window_end + 1):
            candidate = repeat_value(seed, half, 2)
            # the leading half has grown past its slot
            if candidate is None:
                break
            if candidate > rng.end:
                logger.debug("%d exceeds range %s, stopping early", candidate, rng)
                break
            if rng.contains(candidate):
                found.append(candidate)

        logger.debug("range %s: %d doubled ids", rng, len(found))
        return found


class GeneralRepetitionScanner(Scanner):
    name = "repeated"

    def scan(self, rng: Range) -> set[int]:
        return self.find_repeated(rng) or set()

    def find_repeated(self, rng: Range) -> Optional[set[int]]:
        # 2222 is both 22 twice and 2 four times, so collect into a set
        found: set[int] = set()
        start_digits = digits_count(rng.start)
        end_digits = digits_count(rng.end)
        logger.debug("range %s spans %d-%d digits", rng, start_digits, end_digits)

        for total_digits in range(start_digits, end_digits + 1):
            for times in range(2, total_digits + 1):
                if total_digits % times:
                    continue
                width = total_digits // times
                if total_digits == start_digits:
                    seed = split_first(rng.start, start_digits, width)
                else:
                    # smaller seeds would give fewer than total_digits digits
                    seed = pow10(width - 1)
                logger.debug(
                    "%d digits as %d x %d, first seed %d",
                    total_digits,
                    times,
                    width,
                    seed,
                )
                while True:
                    candidate = repeat_value(seed, width, times)
                    if candidate is None or candidate > rng.end:
                        break
                    if rng.contains(candidate):
                        found.add(candidate)
                    seed += 1

        logger.debug("range %s: %d repeated ids", rng, len(found))
        return found or None


class BruteForceScanner(Scanner):
    name = "brute"

    def scan(self, rng: Range) -> set[int]:
        return {v for v in range(rng.start, rng.end + 1) if is_repeated(v)}


SCANNERS: dict[str, type[Scanner]] = {
    cls.name: cls
    for cls in (PairwiseScanner, GeneralRepetitionScanner, BruteForceScanner)
}


def get_scanner(name: str) -> Scanner:
    try:
        return SCANNERS[name]()
    except KeyError:
        raise KeyError(f"unknown scanner: {name}") from None
