"""
Numeric Helpers

Python's built-in round() uses banker's rounding (round(2.5) == 2).
Sizing percentages, CFM and backup heat figures are quoted to contractors
using plain arithmetic rounding, so every derived value in the engine goes
through these helpers instead.
"""

import math


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, halves rounding towards +infinity.

    Examples:
        >>> round_half_up(119.5)
        120
        >>> round_half_up(2.5)
        3
        >>> round_half_up(-2.5)
        -2
    """
    return int(math.floor(value + 0.5))


def round_to_tenths(value: float) -> float:
    """
    Round to one decimal place using half-up rounding.

    Examples:
        >>> round_to_tenths(5.8617)
        5.9
    """
    return round_half_up(value * 10) / 10
