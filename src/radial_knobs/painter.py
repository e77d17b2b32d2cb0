"""Tessellate polar shapes into fill and outline primitives."""

from __future__ import annotations

import logging
from typing import List, Tuple

import numpy as np

from .angles import TAU
from .primitives import (
    ClosedLine,
    Color,
    FilledQuad,
    FilledTriangle,
    LineSegment,
    Primitive,
    Stroke,
)
from .shapes import KnobShape
from .utils.geometry import Point, almost_equal, angled

logger = logging.getLogger(__name__)

DEFAULT_RESOLUTION = 32
ARC_EPSILON = 0.001  # radians
MIN_INNER_RADIUS = 0.1


def _to_points(arr: np.ndarray) -> Tuple[Point, ...]:
    return tuple((float(x), float(y)) for x, y in arr)


class ShapePainter:
    """Turns a :class:`~radial_knobs.shapes.KnobShape` into drawing primitives.

    Filled regions are emitted as individual triangles or quads rather than
    one polygon: general polygon fills seam and smear on near-degenerate
    input, small convex pieces do not.  Each piece is stroked with its own
    fill color at width 1 to hide the hairline gaps between neighbours.

    ``resolution`` is the number of samples around a full turn (shapes) or
    across an arc (arcs).
    """

    def __init__(self, resolution: int = DEFAULT_RESOLUTION) -> None:
        if resolution < 3:
            raise ValueError(f"resolution must be at least 3, got {resolution}")
        self.resolution = int(resolution)

    def _polar_points(
        self,
        shape: KnobShape,
        center: Point,
        radius: float,
        angles: np.ndarray,
        rotation: float,
    ) -> np.ndarray:
        radii = radius * shape.sample(angles - rotation)
        xs = center[0] + np.cos(angles) * radii
        ys = center[1] + np.sin(angles) * radii
        return np.column_stack((xs, ys))

    def paint_shape(
        self,
        shape: KnobShape,
        center: Point,
        radius: float,
        fill: Color,
        stroke: Stroke,
        rotation: float = 0.0,
    ) -> List[Primitive]:
        """Fill the whole outline of ``shape`` as a triangle fan plus a border."""
        n = self.resolution
        angles = np.arange(n, dtype=np.float64) / n * TAU
        outline = _to_points(
            self._polar_points(shape, center, radius, angles, rotation)
        )

        seam = Stroke(1.0, fill)
        center = (float(center[0]), float(center[1]))
        primitives: List[Primitive] = [
            FilledTriangle((center, outline[i], outline[(i + 1) % n]), fill, seam)
            for i in range(n)
        ]
        primitives.append(ClosedLine(outline, stroke))
        return primitives

    def paint_arc(
        self,
        shape: KnobShape,
        center: Point,
        inner_radius: float,
        outer_radius: float,
        start_angle: float,
        end_angle: float,
        fill: Color,
        stroke: Stroke,
        rotation: float = 0.0,
    ) -> List[Primitive]:
        """Fill the annular strip between two radii over ``[start, end]``.

        The strip follows ``shape``, so a square knob gets a square-bent rim.
        A zero-length span degrades to a single radial line segment.
        """
        if almost_equal(start_angle, end_angle, ARC_EPSILON):
            logger.debug(
                "Degenerate arc at %.4f rad, drawing a line segment", start_angle
            )
            shape_radius = shape.eval(start_angle - rotation)
            dx, dy = angled(start_angle)
            cx, cy = float(center[0]), float(center[1])
            r_in = inner_radius * shape_radius
            r_out = outer_radius * shape_radius
            return [
                LineSegment(
                    (cx + dx * r_in, cy + dy * r_in),
                    (cx + dx * r_out, cy + dy * r_out),
                    stroke,
                )
            ]

        # Zero inner radius would collapse every quad onto the center.
        inner_radius = max(inner_radius, MIN_INNER_RADIUS)

        t = np.arange(self.resolution + 1, dtype=np.float64) / self.resolution
        angles = (1.0 - t) * start_angle + t * end_angle
        outer = _to_points(
            self._polar_points(shape, center, outer_radius, angles, rotation)
        )
        inner = _to_points(
            self._polar_points(shape, center, inner_radius, angles, rotation)
        )

        seam = Stroke(1.0, fill)
        primitives: List[Primitive] = [
            FilledQuad((outer[i], inner[i], inner[i + 1], outer[i + 1]), fill, seam)
            for i in range(self.resolution)
        ]
        primitives.append(ClosedLine(outer + inner[::-1], stroke))
        return primitives


_default_painter = ShapePainter()


def paint_shape(
    shape: KnobShape,
    center: Point,
    radius: float,
    fill: Color,
    stroke: Stroke,
    rotation: float = 0.0,
) -> List[Primitive]:
    """:meth:`ShapePainter.paint_shape` at :data:`DEFAULT_RESOLUTION`."""
    return _default_painter.paint_shape(shape, center, radius, fill, stroke, rotation)


def paint_arc(
    shape: KnobShape,
    center: Point,
    inner_radius: float,
    outer_radius: float,
    start_angle: float,
    end_angle: float,
    fill: Color,
    stroke: Stroke,
    rotation: float = 0.0,
) -> List[Primitive]:
    """:meth:`ShapePainter.paint_arc` at :data:`DEFAULT_RESOLUTION`."""
    return _default_painter.paint_arc(
        shape,
        center,
        inner_radius,
        outer_radius,
        start_angle,
        end_angle,
        fill,
        stroke,
        rotation,
    )


__all__ = [
    "DEFAULT_RESOLUTION",
    "ARC_EPSILON",
    "MIN_INNER_RADIUS",
    "ShapePainter",
    "paint_shape",
    "paint_arc",
]
