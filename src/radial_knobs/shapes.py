"""Polar shape functions used to outline knobs, dials and arc segments.

A shape maps an angle ``theta`` (radians, any real value) to a radius
multiplier.  The painter scales that multiplier by the nominal radius, so a
circle is the constant ``1.0`` and a square touches its inscribed unit circle
at the middle of each edge.

All built-in shapes evaluate with numpy and accept either a float or an
array of angles::

    >>> Squircle(4.0).eval(math.pi / 4)
    1.189...
    >>> Polygon(6).sample(np.linspace(0.0, math.tau, 7))
"""

from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Callable, Tuple

import numpy as np

KnobShapeFn = Callable[[float], float]


class KnobShapeError(ValueError):
    """Raised when a shape is constructed with out-of-range parameters."""


class KnobShape:
    """Base class for polar shapes; subclasses implement :meth:`sample`."""

    def sample(self, theta: np.ndarray) -> np.ndarray:
        raise NotImplementedError

    def eval(self, theta: float) -> float:
        return float(self.sample(np.asarray(theta, dtype=np.float64)))

    def __call__(self, theta: float) -> float:
        return self.eval(theta)


@dataclass(frozen=True)
class Circle(KnobShape):
    def sample(self, theta: np.ndarray) -> np.ndarray:
        return np.ones_like(theta, dtype=np.float64)


@dataclass(frozen=True)
class Square(KnobShape):
    def sample(self, theta: np.ndarray) -> np.ndarray:
        # At the edge midpoints one reciprocal is infinite; min() picks the other.
        with np.errstate(divide="ignore"):
            return np.minimum(
                1.0 / np.abs(np.cos(theta)), 1.0 / np.abs(np.sin(theta))
            )


@dataclass(frozen=True)
class Squircle(KnobShape):
    """Superellipse ``(|cos|^p + |sin|^p)^(-1/p)``; ``p = 2`` is a circle."""

    exponent: float

    def __post_init__(self) -> None:
        if not (math.isfinite(self.exponent) and self.exponent > 0.0):
            raise KnobShapeError(
                f"squircle exponent must be positive, got {self.exponent!r}"
            )

    def sample(self, theta: np.ndarray) -> np.ndarray:
        p = float(self.exponent)
        c = np.abs(np.cos(theta))
        s = np.abs(np.sin(theta))
        # Factor out the larger term so the power sum never underflows to 0.
        big = np.maximum(c, s)
        ratio = np.minimum(c, s) / big
        return (1.0 + ratio**p) ** (-1.0 / p) / big


def _check_sides(sides: int) -> None:
    if isinstance(sides, bool) or not isinstance(sides, (int, np.integer)):
        raise KnobShapeError(f"polygon sides must be an integer, got {sides!r}")
    if sides < 3:
        raise KnobShapeError(f"polygon must have at least 3 sides, got {sides}")


@dataclass(frozen=True)
class Polygon(KnobShape):
    """Regular polygon with ``sides`` vertices circumscribing the unit circle."""

    sides: int

    def __post_init__(self) -> None:
        _check_sides(self.sides)

    def sample(self, theta: np.ndarray) -> np.ndarray:
        n = float(self.sides)
        # cos() may overshoot [-1, 1] by an ulp near the corners.
        inner = np.clip(np.cos(n / 2.0 * theta), -1.0, 1.0)
        return 1.0 / np.cos(np.arcsin(inner) * 2.0 / n)


@dataclass(frozen=True)
class SuperPolygon(KnobShape):
    """Superformula blend between a rounded polygon and a star.

    ``exponent`` in ``[0, 2]``: 2 gives a circle, lower values pull the
    outline inwards between ``sides`` lobes.  Exponent 0 collapses the shape
    to the origin.
    """

    sides: int
    exponent: float

    def __post_init__(self) -> None:
        _check_sides(self.sides)
        if not 0.0 <= self.exponent <= 2.0:
            raise KnobShapeError(
                f"super-polygon exponent must be within [0, 2], got {self.exponent!r}"
            )

    def sample(self, theta: np.ndarray) -> np.ndarray:
        p = float(self.exponent)
        if p == 0.0:
            return np.zeros_like(theta, dtype=np.float64)
        phase = 0.25 * float(self.sides) * theta
        a = np.abs(np.cos(phase)) ** p
        b = np.abs(np.sin(phase)) ** p
        return (a + b) ** (-1.0 / p)


@dataclass(frozen=True)
class CustomShape(KnobShape):
    """Caller-supplied radius function, invoked as-is without validation."""

    function: KnobShapeFn

    def eval(self, theta: float) -> float:
        return float(self.function(float(theta)))

    def sample(self, theta: np.ndarray) -> np.ndarray:
        theta = np.asarray(theta, dtype=np.float64)
        values = np.fromiter(
            (self.function(float(t)) for t in theta.ravel()),
            dtype=np.float64,
            count=theta.size,
        )
        return values.reshape(theta.shape)


SHAPE_KINDS: Tuple[str, ...] = (
    "circle",
    "square",
    "squircle",
    "polygon",
    "superpolygon",
)


def make_shape(
    kind: str,
    *,
    sides: int = 6,
    exponent: float = 4.0,
) -> KnobShape:
    """Build a built-in shape from its name, as stored in the gallery config."""
    kind = kind.lower()
    if kind == "circle":
        return Circle()
    if kind == "square":
        return Square()
    if kind == "squircle":
        return Squircle(exponent)
    if kind == "polygon":
        return Polygon(sides)
    if kind == "superpolygon":
        return SuperPolygon(sides, exponent)
    raise KnobShapeError(f"unknown shape kind {kind!r}")


__all__ = [
    "KnobShapeFn",
    "KnobShapeError",
    "KnobShape",
    "Circle",
    "Square",
    "Squircle",
    "Polygon",
    "SuperPolygon",
    "CustomShape",
    "SHAPE_KINDS",
    "make_shape",
]
