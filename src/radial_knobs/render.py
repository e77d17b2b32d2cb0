"""Headless rasteriser for primitive lists, backed by OpenCV."""

from __future__ import annotations

import logging
from typing import Iterable, Sequence, Tuple

import cv2  # opencv-python
import numpy as np

from .primitives import (
    TRANSPARENT,
    ClosedLine,
    Color,
    FilledQuad,
    FilledTriangle,
    LineSegment,
    Primitive,
    Stroke,
    all_points_finite,
)
from .utils.geometry import Point

logger = logging.getLogger(__name__)

SUBPIXEL_BITS = 4
_SCALE = 1 << SUBPIXEL_BITS
_SUPPORTED = (FilledTriangle, FilledQuad, LineSegment, ClosedLine)


def _fixed(points: Sequence[Point]) -> np.ndarray:
    arr = np.asarray(points, dtype=np.float64) * _SCALE
    return np.round(arr).astype(np.int32).reshape((-1, 1, 2))


def _thickness(stroke: Stroke) -> int:
    return max(1, int(round(stroke.width)))


def _rgba(color: Color) -> Tuple[int, int, int, int]:
    return int(color.r), int(color.g), int(color.b), int(color.a)


def _draw_outline(
    img: np.ndarray, points: Sequence[Point], stroke: Stroke, closed: bool
) -> None:
    if not stroke.is_visible:
        return
    cv2.polylines(
        img,
        [_fixed(points)],
        closed,
        _rgba(stroke.color),
        thickness=_thickness(stroke),
        lineType=cv2.LINE_8,
        shift=SUBPIXEL_BITS,
    )


def rasterize(
    primitives: Iterable[Primitive],
    width: int,
    height: int,
    background: Color = TRANSPARENT,
) -> np.ndarray:
    """Draw ``primitives`` in order into a new ``(height, width, 4)`` RGBA array.

    Later primitives overwrite earlier ones; alpha is stored, not blended.
    Primitives with non-finite coordinates are skipped.
    """
    img = np.empty((int(height), int(width), 4), dtype=np.uint8)
    img[...] = _rgba(background)

    for primitive in primitives:
        if not isinstance(primitive, _SUPPORTED):
            raise TypeError(f"unsupported primitive {primitive!r}")
        if not all_points_finite((primitive,)):
            logger.warning(
                "Skipping %s with non-finite points", type(primitive).__name__
            )
            continue
        if isinstance(primitive, (FilledTriangle, FilledQuad)):
            cv2.fillConvexPoly(
                img,
                _fixed(primitive.points),
                _rgba(primitive.fill),
                lineType=cv2.LINE_8,
                shift=SUBPIXEL_BITS,
            )
            _draw_outline(img, primitive.points, primitive.stroke, closed=True)
        elif isinstance(primitive, LineSegment):
            _draw_outline(img, primitive.points, primitive.stroke, closed=False)
        else:
            _draw_outline(img, primitive.points, primitive.stroke, closed=True)
    return img


def coverage_mask(img: np.ndarray, background: Color = TRANSPARENT) -> np.ndarray:
    """Boolean mask of pixels that differ from ``background``."""
    return np.any(img != np.asarray(_rgba(background), dtype=np.uint8), axis=-1)


__all__ = ["rasterize", "coverage_mask", "SUBPIXEL_BITS"]
