"""Rounding helper shared by the scorers."""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest int with .5 going up (12.5 -> 13), unlike round()."""
    return int(math.floor(value + 0.5))
