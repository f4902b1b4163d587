"""Decimal digit arithmetic shared by the scanners.

Values are treated as digit strings without converting them to ``str``:
a number is split into its leading and trailing digits with powers of ten.
"""

from typing import Optional

from repdigits.errors import ArithmeticOverflow, InvalidRange

MAX_DIGITS = 18


def digits_count(n: int) -> int:
    if n <= 0:
        raise InvalidRange(f"digit count undefined for non-positive value: {n}")
    c = 1
    rest = n
    while rest >= 10:
        rest //= 10
        c += 1
    if c > MAX_DIGITS:
        raise ArithmeticOverflow(f"{n} has more than {MAX_DIGITS} digits")
    return c


def pow10(n: int) -> int:
    if n < 0 or n > MAX_DIGITS:
        raise ArithmeticOverflow(f"10^{n} is outside the supported width")
    return 10**n


def split_last(value: int, k: int) -> int:
    return value % pow10(k)


def split_first(value: int, total_digits: int, k: int) -> int:
    rest = total_digits - k
    return (value - split_last(value, rest)) // pow10(rest)


def repeat_value(seed: int, width: int, times: int) -> Optional[int]:
    """Concatenate ``times`` copies of ``seed`` padded to ``width`` digits.

    Returns None when ``seed`` does not fit in ``width`` digits.
    """
    base = pow10(width)
    if seed >= base:
        return None
    acc = 0
    for _ in range(times):
        acc = acc * base + seed
    return acc


def has_repeated_pattern_len(value: int, total_len: int, chunk_len: int) -> bool:
    """Check one chunk width by splitting the value. Used by the brute-force scanner."""
    if total_len % chunk_len != 0:
        return False
    repeats = total_len // chunk_len
    if repeats < 2:
        return False
    seed = split_first(value, total_len, chunk_len)
    return repeat_value(seed, chunk_len, repeats) == value


def is_repeated(value: int) -> bool:
    """Try every chunk width on a single value.

    Slow reference check for ``BruteForceScanner``; the real scanners build
    candidates instead of testing values.
    """
    total_len = digits_count(value)
    for chunk_len in range(1, total_len // 2 + 1):
        if has_repeated_pattern_len(value, total_len, chunk_len):
            return True
    return False
