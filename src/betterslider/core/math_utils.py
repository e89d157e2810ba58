"""Scalar math helpers shared by the mapping and controller code.

Everything here works on plain floats; numpy is only used where its
rounding primitives match the behaviour we want.
"""

import numpy as np


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp *value* into ``[lo, hi]``.

    When ``hi < lo`` the lower limit wins, so callers that build an upper
    limit from an anchor never get a value below *lo*.
    """
    return max(lo, min(hi, value))


def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def inverse_lerp(a: float, b: float, value: float) -> float:
    """Fraction of the way *value* sits between *a* and *b* (0 when a == b)."""
    if a == b:
        return 0.0
    return (value - a) / (b - a)


def round_half_away(x: float) -> float:
    """Round to the nearest integer, ties away from zero.

    Python's ``round`` and ``np.round`` both round ties to even, which would
    make a pointer exactly between two steps snap inconsistently.
    """
    return float(np.copysign(np.floor(np.abs(x) + 0.5), x))
