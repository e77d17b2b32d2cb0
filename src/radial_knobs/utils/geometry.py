"""Geometry helpers shared by the painter, the widgets and the rasteriser."""

import math
from typing import Tuple

Point = Tuple[float, float]


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp ``value`` to the inclusive range ``[lo, hi]``."""
    return max(lo, min(hi, value))


def almost_equal(a: float, b: float, epsilon: float) -> bool:
    """Return True if ``a`` and ``b`` agree to within relative ``epsilon``.

    Values whose magnitudes are both at most ``epsilon`` count as equal.
    """
    if a == b:
        return True
    abs_max = max(abs(a), abs(b))
    return abs_max <= epsilon or abs(a - b) / abs_max <= epsilon


def angled(angle: float) -> Point:
    """Unit vector pointing at ``angle`` radians (y axis points down)."""
    return math.cos(angle), math.sin(angle)


__all__ = ["Point", "clamp", "almost_equal", "angled"]
