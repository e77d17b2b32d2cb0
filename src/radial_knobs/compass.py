"""Tick layout for the horizontal strip compass."""

from __future__ import annotations

import math
from typing import List, NamedTuple


class CompassTick(NamedTuple):
    x: float
    degree: int
    height: float  # fraction of the full tick length


def map_angle_to_screen(
    angle: float, value: float, center_x: float, width: float, spread: float
) -> float:
    """Screen x of ``angle`` when the compass is centered on ``value``."""
    return center_x - (value - angle) * (width / spread)


def tick_height(degree: int) -> float:
    if degree % 90 == 0:
        return 1.0
    if degree % 30 == 0:
        return 0.75
    return 0.5


def compass_ticks(
    value: float,
    spread: float,
    center_x: float,
    width: float,
    step_degrees: int = 10,
) -> List[CompassTick]:
    """Ticks covering the visible ``spread`` around ``value`` (radians)."""
    left = int(
        math.floor(math.degrees(value - spread / 2.0) / step_degrees) * step_degrees
    )
    right = int(
        math.ceil(math.degrees(value + spread / 2.0) / step_degrees) * step_degrees
    )
    return [
        CompassTick(
            map_angle_to_screen(
                math.radians(degree), value, center_x, width, spread
            ),
            degree,
            tick_height(degree),
        )
        for degree in range(left, right + 1, step_degrees)
    ]


__all__ = ["CompassTick", "map_angle_to_screen", "tick_height", "compass_ticks"]
