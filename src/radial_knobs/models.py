"""Enums and dataclasses describing radial widget configuration."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
import json
import math
from typing import ClassVar, Dict, Optional


class InteractionConfigError(ValueError):
    """Raised when a knob interaction is configured with invalid values."""


class KnobMode(Enum):
    """Angle wrap policy of a widget, fixed for its lifetime."""

    SIGNED = "signed"  # (-pi, pi]
    UNSIGNED = "unsigned"  # [0, 2pi)
    SPIN_AROUND = "spin_around"  # no wraparound, accumulates turns


class KnobDirection(Enum):
    CLOCKWISE = "clockwise"
    COUNTERCLOCKWISE = "counterclockwise"

    @property
    def sign(self) -> float:
        return 1.0 if self is KnobDirection.CLOCKWISE else -1.0


@dataclass(frozen=True)
class KnobOrientation:
    """Rotation applied to the shape and to the angle origin of a widget.

    Use one of the cardinal constants (``RIGHT``, ``BOTTOM``, ``LEFT``,
    ``TOP``) or :meth:`custom` for an arbitrary angle in radians.
    """

    angle: float
    name: str = "custom"

    RIGHT: ClassVar["KnobOrientation"]
    BOTTOM: ClassVar["KnobOrientation"]
    LEFT: ClassVar["KnobOrientation"]
    TOP: ClassVar["KnobOrientation"]

    @classmethod
    def custom(cls, angle: float) -> "KnobOrientation":
        return cls(float(angle))

    @classmethod
    def from_name(cls, name: str) -> "KnobOrientation":
        try:
            return _CARDINALS[name.lower()]
        except KeyError:
            raise ValueError(f"unknown orientation {name!r}") from None

    @property
    def rotation(self) -> float:
        """Rotation angle folded into ``(-pi, pi]``."""
        return math.atan2(math.sin(self.angle), math.cos(self.angle))


_CARDINALS: Dict[str, KnobOrientation] = {
    "right": KnobOrientation(math.tau * 0.00, "right"),
    "bottom": KnobOrientation(math.tau * 0.25, "bottom"),
    "left": KnobOrientation(math.tau * 0.50, "left"),
    "top": KnobOrientation(math.tau * 0.75, "top"),
}

# Cardinal constants, e.g. ``KnobOrientation.TOP``.
for _name, _orientation in _CARDINALS.items():
    setattr(KnobOrientation, _name.upper(), _orientation)


@dataclass(frozen=True)
class InteractionConfig:
    """Drag and snapping behaviour of one radial widget.

    ``minimum`` and ``maximum`` live in the same wrapped domain as the value.
    Their ordering is not validated: ``maximum`` is applied before
    ``minimum``, so an inverted pair pins every value to ``minimum``.
    """

    mode: KnobMode = KnobMode.SIGNED
    direction: KnobDirection = KnobDirection.CLOCKWISE
    snap_angle: Optional[float] = None
    modified_snap_angle: Optional[float] = None
    minimum: Optional[float] = None
    maximum: Optional[float] = None

    def __post_init__(self) -> None:
        for label, angle in (
            ("snap_angle", self.snap_angle),
            ("modified_snap_angle", self.modified_snap_angle),
        ):
            if angle is not None and not angle > 0.0:
                raise InteractionConfigError(
                    f"{label} must be positive, got {angle!r}"
                )


# ------------------------------ Persisted state --------------------------------


@dataclass
class KnobSettings:
    """Interaction settings shared by every knob in the gallery."""

    mode: str = KnobMode.SIGNED.value
    direction: str = KnobDirection.CLOCKWISE.value
    orientation: str = "top"
    snap_degrees: float = 0.0  # 0 disables snapping
    shift_snap_degrees: float = 15.0
    min_degrees: Optional[float] = None
    max_degrees: Optional[float] = None
    resolution: int = 32

    def interaction_config(self) -> InteractionConfig:
        def _radians(deg: Optional[float]) -> Optional[float]:
            return None if deg is None else math.radians(deg)

        return InteractionConfig(
            mode=KnobMode(self.mode),
            direction=KnobDirection(self.direction),
            snap_angle=_radians(self.snap_degrees) if self.snap_degrees else None,
            modified_snap_angle=(
                _radians(self.shift_snap_degrees) if self.shift_snap_degrees else None
            ),
            minimum=_radians(self.min_degrees),
            maximum=_radians(self.max_degrees),
        )


@dataclass
class UIState:
    """Shape parameters and layout preferences for the gallery window."""

    knob_size_px: int = 96
    compass_spread_degrees: float = 180.0
    squircle_exponent: float = 4.0
    polygon_sides: int = 6
    superpolygon_sides: int = 5
    superpolygon_exponent: float = 1.5
    always_on_top: bool = False


@dataclass
class GalleryConfig:
    """Persisted configuration for the demo gallery."""

    knob: KnobSettings = field(default_factory=KnobSettings)
    ui: UIState = field(default_factory=UIState)

    def to_json(self) -> str:
        return json.dumps(asdict(self), indent=2)

    @staticmethod
    def from_json(text: str) -> "GalleryConfig":
        data: Dict = json.loads(text)
        k = data.get("knob", {})
        u = data.get("ui", {})

        def _opt_float(value) -> Optional[float]:
            return None if value is None else float(value)

        return GalleryConfig(
            knob=KnobSettings(
                mode=KnobMode(k.get("mode", KnobMode.SIGNED.value)).value,
                direction=KnobDirection(
                    k.get("direction", KnobDirection.CLOCKWISE.value)
                ).value,
                orientation=KnobOrientation.from_name(
                    str(k.get("orientation", "top"))
                ).name,
                snap_degrees=float(k.get("snap_degrees", 0.0)),
                shift_snap_degrees=float(k.get("shift_snap_degrees", 15.0)),
                min_degrees=_opt_float(k.get("min_degrees")),
                max_degrees=_opt_float(k.get("max_degrees")),
                resolution=max(3, int(k.get("resolution", 32))),
            ),
            ui=UIState(
                knob_size_px=int(u.get("knob_size_px", 96)),
                compass_spread_degrees=float(u.get("compass_spread_degrees", 180.0)),
                squircle_exponent=float(u.get("squircle_exponent", 4.0)),
                polygon_sides=int(u.get("polygon_sides", 6)),
                superpolygon_sides=int(u.get("superpolygon_sides", 5)),
                superpolygon_exponent=float(u.get("superpolygon_exponent", 1.5)),
                always_on_top=bool(u.get("always_on_top", False)),
            ),
        )


__all__ = [
    "InteractionConfigError",
    "KnobMode",
    "KnobDirection",
    "KnobOrientation",
    "InteractionConfig",
    "KnobSettings",
    "UIState",
    "GalleryConfig",
]
