"""Drag-to-angle interaction shared by every radial widget.

The live value is owned by the caller.  Each call takes the current value and
returns an :class:`InteractionResult` with the new value and whether it
changed; nothing is stored between frames except the Idle/Dragging state.

Typical host wiring::

    knob = KnobInteraction(InteractionConfig(snap_angle=math.radians(15)))
    knob.press()
    value, changed = knob.drag(value, dx=event_dx, width=rect_w, spread=math.pi)
    value, changed = knob.release(value, modifier=shift_held)
"""

from __future__ import annotations

from enum import Enum
import logging
import math
from typing import NamedTuple, Optional

from .angles import wrap_angle
from .models import InteractionConfig, InteractionConfigError

logger = logging.getLogger(__name__)


class KnobState(Enum):
    IDLE = "idle"
    DRAGGING = "dragging"


class InteractionResult(NamedTuple):
    value: float
    changed: bool


def _round_half_away(x: float) -> float:
    return math.copysign(math.floor(abs(x) + 0.5), x)


def snap(value: float, step: float) -> float:
    """Round ``value`` to the nearest multiple of ``step``."""
    if not step > 0.0:
        raise InteractionConfigError(f"snap step must be positive, got {step!r}")
    return _round_half_away(value / step) * step


class KnobInteraction:
    """Idle/Dragging state machine for one widget instance."""

    def __init__(self, config: Optional[InteractionConfig] = None) -> None:
        self.config = config if config is not None else InteractionConfig()
        self.state = KnobState.IDLE

    @property
    def dragging(self) -> bool:
        return self.state is KnobState.DRAGGING

    def constrain(self, value: float) -> float:
        """Wrap by mode, then clamp to ``maximum`` and finally ``minimum``."""
        cfg = self.config
        value = wrap_angle(value, cfg.mode)
        if cfg.maximum is not None and value > cfg.maximum:
            logger.debug("Clamped %.4f to maximum %.4f", value, cfg.maximum)
            value = cfg.maximum
        if cfg.minimum is not None and value < cfg.minimum:
            logger.debug("Clamped %.4f to minimum %.4f", value, cfg.minimum)
            value = cfg.minimum
        return value

    def drag_delta(self, dx: float, width: float, spread: float) -> float:
        """Angle change for a horizontal pointer move of ``dx`` pixels."""
        return -self.config.direction.sign * dx / width * spread

    def press(self) -> None:
        self.state = KnobState.DRAGGING

    def drag(
        self, value: float, dx: float, width: float, spread: float
    ) -> InteractionResult:
        """Apply one drag update; ignored unless the pointer is pressed."""
        if not self.dragging or width <= 0.0:
            return InteractionResult(value, False)
        new_value = self.constrain(value + self.drag_delta(dx, width, spread))
        return InteractionResult(new_value, new_value != value)

    def release(self, value: float, modifier: bool = False) -> InteractionResult:
        """End the drag and snap once to the configured step."""
        if not self.dragging:
            return InteractionResult(value, False)
        self.state = KnobState.IDLE

        cfg = self.config
        step = cfg.snap_angle
        if modifier and cfg.modified_snap_angle is not None:
            step = cfg.modified_snap_angle
        if step is None:
            return InteractionResult(value, False)

        new_value = self.constrain(snap(value, step))
        logger.debug("Snapped %.4f to %.4f (step %.4f)", value, new_value, step)
        return InteractionResult(new_value, new_value != value)


__all__ = [
    "KnobState",
    "InteractionResult",
    "KnobInteraction",
    "snap",
]
