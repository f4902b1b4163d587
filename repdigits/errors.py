class InvalidRange(ValueError):
    """A range bound is non-positive or the bounds are out of order."""


class ArithmeticOverflow(ValueError):
    """A digit length does not fit a signed 64-bit integer."""
