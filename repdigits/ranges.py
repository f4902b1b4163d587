from dataclasses import dataclass

from repdigits.digits import MAX_DIGITS, pow10
from repdigits.errors import ArithmeticOverflow, InvalidRange


@dataclass(frozen=True)
class Range:
    """Inclusive range of identifiers. Bounds are not checked on construction."""

    start: int
    end: int

    @classmethod
    def checked(cls, start: int, end: int) -> "Range":
        if start <= 0 or end <= 0:
            raise InvalidRange(f"range bounds must be positive: {start}-{end}")
        if start > end:
            raise InvalidRange(f"range start exceeds end: {start}-{end}")
        if end >= pow10(MAX_DIGITS):
            raise ArithmeticOverflow(
                f"range end {end} has more than {MAX_DIGITS} digits"
            )
        return cls(start, end)

    def contains(self, value: int) -> bool:
        return self.start <= value <= self.end

    def __str__(self) -> str:
        return f"{self.start}-{self.end}"


def parse_ranges(text: str) -> list[Range]:
    ranges: list[Range] = []
    for token in text.strip().split(","):
        token = token.strip()
        if not token:
            continue
        s, sep, e = token.partition("-")
        if not sep:
            raise ValueError(f"missing range separator '-': {token}")
        try:
            start = int(s)
            end = int(e)
        except ValueError:
            raise ValueError(f"invalid range: {token}") from None
        ranges.append(Range.checked(start, end))
    return ranges
