"""radial_knobs: polar shapes and drag-to-angle interaction for radial widgets.

The Qt-free core (angles, shapes, painter, interaction) is importable without
PySide6; the widgets and the demo gallery load Qt lazily.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ._version import get_version
from .angles import (
    normalize_signed,
    normalize_unsigned_exclusive,
    normalize_unsigned_inclusive,
    wrap_angle,
)
from .interaction import InteractionResult, KnobInteraction, KnobState, snap
from .models import (
    InteractionConfig,
    InteractionConfigError,
    KnobDirection,
    KnobMode,
    KnobOrientation,
)
from .painter import DEFAULT_RESOLUTION, ShapePainter, paint_arc, paint_shape
from .shapes import (
    Circle,
    CustomShape,
    KnobShape,
    KnobShapeError,
    Polygon,
    Square,
    Squircle,
    SuperPolygon,
)

__version__ = get_version()

if TYPE_CHECKING:  # pragma: no cover - only for type checkers
    from .app import main as _main_type  # noqa: F401


def main() -> None:
    """Entry point for ``python -m radial_knobs`` and console scripts."""
    from .app import main as _main

    _main()


__all__ = [
    "main",
    "__version__",
    "get_version",
    "normalize_signed",
    "normalize_unsigned_exclusive",
    "normalize_unsigned_inclusive",
    "wrap_angle",
    "InteractionResult",
    "KnobInteraction",
    "KnobState",
    "snap",
    "InteractionConfig",
    "InteractionConfigError",
    "KnobDirection",
    "KnobMode",
    "KnobOrientation",
    "DEFAULT_RESOLUTION",
    "ShapePainter",
    "paint_arc",
    "paint_shape",
    "Circle",
    "CustomShape",
    "KnobShape",
    "KnobShapeError",
    "Polygon",
    "Square",
    "Squircle",
    "SuperPolygon",
]
