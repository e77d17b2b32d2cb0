"""Backend-agnostic drawing primitives emitted by :mod:`radial_knobs.painter`.

A painter call returns an ordered list of these; the caller hands it to a
rendering backend (:func:`radial_knobs.utils.qt.paint_primitives` for
QPainter, :func:`radial_knobs.render.rasterize` for numpy images).
"""

from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Iterable, NamedTuple, Tuple, Union

from .utils.geometry import Point


class Color(NamedTuple):
    """8-bit RGBA color."""

    r: int
    g: int
    b: int
    a: int = 255

    @property
    def is_transparent(self) -> bool:
        return self.a == 0


TRANSPARENT = Color(0, 0, 0, 0)


class Stroke(NamedTuple):
    width: float
    color: Color

    @property
    def is_visible(self) -> bool:
        return self.width > 0.0 and not self.color.is_transparent


NO_STROKE = Stroke(0.0, TRANSPARENT)


@dataclass(frozen=True)
class FilledTriangle:
    points: Tuple[Point, Point, Point]
    fill: Color
    stroke: Stroke = NO_STROKE


@dataclass(frozen=True)
class FilledQuad:
    points: Tuple[Point, Point, Point, Point]
    fill: Color
    stroke: Stroke = NO_STROKE


@dataclass(frozen=True)
class LineSegment:
    start: Point
    end: Point
    stroke: Stroke

    @property
    def points(self) -> Tuple[Point, Point]:
        return self.start, self.end


@dataclass(frozen=True)
class ClosedLine:
    """Polyline whose last point connects back to the first."""

    points: Tuple[Point, ...]
    stroke: Stroke


Primitive = Union[FilledTriangle, FilledQuad, LineSegment, ClosedLine]


def all_points_finite(primitives: Iterable[Primitive]) -> bool:
    """Return True if every coordinate of every primitive is finite."""
    return all(
        math.isfinite(x) and math.isfinite(y)
        for primitive in primitives
        for x, y in primitive.points
    )


__all__ = [
    "Color",
    "TRANSPARENT",
    "Stroke",
    "NO_STROKE",
    "FilledTriangle",
    "FilledQuad",
    "LineSegment",
    "ClosedLine",
    "Primitive",
    "all_points_finite",
]
