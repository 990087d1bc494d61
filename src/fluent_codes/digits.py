"""
Fixed-width numeric suffixes.
"""

import random

SIX_DIGITS = 6

# Recipe step name for a six digit suffix
SIX_DIGITS_STEP = "six_digits"


def random_digits(rng: random.Random, width: int = SIX_DIGITS) -> str:
    """
    Draw a uniform integer in [0, 10**width - 1] and zero-pad it to width.

    Both ends are reachable: for width 6 the output runs from "000000"
    to "999999".

    Args:
        rng: Random source for the draw
        width: Number of digits in the result

    Returns:
        A string of exactly `width` decimal digits
    """
    if isinstance(width, bool) or not isinstance(width, int) or width < 1:
        raise ValueError(f"width must be a positive integer, got {width!r}")

    value = rng.randint(0, 10 ** width - 1)
    return f"{value:0{width}d}"
