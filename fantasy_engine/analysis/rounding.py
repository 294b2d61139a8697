"""Rounding helpers shared by the calculators."""

import math


def round_half_up(value: float, step: float = 0.1) -> float:
    """
    Round to the nearest multiple of step, with halves rounding up.

    Python's round() uses banker's rounding; prices and form figures round
    halves towards positive infinity instead (2.25 -> 2.3, -2.25 -> -2.2).

    Args:
        value: Number to round.
        step: Rounding granularity, e.g. 0.1 or 0.5.

    Returns:
        The rounded value.
    """
    scale = 1 / step
    return math.floor(value * scale + 0.5) / scale
