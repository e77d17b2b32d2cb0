"""Angle normalisation under the wrap policies used by radial widgets.

All functions work in radians and accept any finite float.  Non-finite input
propagates NaN.
"""

from __future__ import annotations

import math

from .models import KnobMode

TAU = 2.0 * math.pi


def normalize_unsigned_exclusive(angle: float) -> float:
    """Wrap ``angle`` into ``[0, TAU)``."""
    # fmod keeps the sign of the dividend; the second modulo folds negatives
    # and the TAU produced by rounding tiny negative remainders back to 0.
    return (math.fmod(angle, TAU) + TAU) % TAU


def normalize_unsigned_inclusive(angle: float) -> float:
    """Wrap ``angle`` into ``[0, TAU]``, keeping a full turn distinct from 0."""
    if angle < 0.0:
        return normalize_unsigned_exclusive(angle)
    if angle > TAU:
        return math.fmod(angle, TAU)
    return angle


def normalize_signed(angle: float) -> float:
    """Wrap ``angle`` into ``(-pi, pi]``."""
    angle = math.fmod(angle, TAU)
    if angle > math.pi:
        angle -= TAU
    elif angle <= -math.pi:
        angle += TAU
    return angle


def wrap_angle(angle: float, mode: KnobMode) -> float:
    """Apply the wrap policy of ``mode``; ``SPIN_AROUND`` leaves it untouched."""
    if mode is KnobMode.SIGNED:
        return normalize_signed(angle)
    if mode is KnobMode.UNSIGNED:
        return normalize_unsigned_exclusive(angle)
    return angle


__all__ = [
    "TAU",
    "normalize_unsigned_exclusive",
    "normalize_unsigned_inclusive",
    "normalize_signed",
    "wrap_angle",
]
