"""Small helpers without a Qt dependency."""

from .geometry import Point, almost_equal, angled, clamp

__all__ = ["Point", "almost_equal", "angled", "clamp"]
