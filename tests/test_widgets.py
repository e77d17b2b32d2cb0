"""Qt host widgets driven through synthetic mouse events (offscreen)."""

from __future__ import annotations

import math

import pytest

pytest.importorskip("PySide6.QtWidgets")

from PySide6 import QtCore, QtGui  # noqa: E402
import numpy as np  # noqa: E402

from radial_knobs.models import (  # noqa: E402
    InteractionConfig,
    KnobDirection,
    KnobMode,
    KnobOrientation,
)
from radial_knobs.primitives import (  # noqa: E402
    ClosedLine,
    FilledQuad,
    FilledTriangle,
    LineSegment,
)
from radial_knobs.shapes import Polygon, Square  # noqa: E402
from radial_knobs.utils.qt import paint_primitives  # noqa: E402
from radial_knobs.widgets import AngleKnob, LinearCompass  # noqa: E402

NO_MODS = QtCore.Qt.KeyboardModifier.NoModifier
SHIFT = QtCore.Qt.KeyboardModifier.ShiftModifier
LEFT = QtCore.Qt.MouseButton.LeftButton


def _mouse(kind, x: float, button=LEFT, buttons=LEFT, mods=NO_MODS):
    pos = QtCore.QPointF(x, 10.0)
    return QtGui.QMouseEvent(kind, pos, pos, button, buttons, mods)


def _paint_rgba(primitives, width: int, height: int) -> np.ndarray:
    image = QtGui.QImage(width, height, QtGui.QImage.Format.Format_RGBA8888)
    image.fill(QtCore.Qt.GlobalColor.transparent)
    painter = QtGui.QPainter(image)
    try:
        paint_primitives(painter, primitives)
    finally:
        painter.end()
    rows = np.frombuffer(image.constBits(), np.uint8)
    rows = rows.reshape(height, image.bytesPerLine())
    return rows[:, : width * 4].reshape(height, width, 4).copy()


def _drag(widget, x0: float, x1: float, mods=NO_MODS) -> None:
    Type = QtCore.QEvent.Type
    widget.mousePressEvent(_mouse(Type.MouseButtonPress, x0))
    widget.mouseMoveEvent(
        _mouse(Type.MouseMove, x1, button=QtCore.Qt.MouseButton.NoButton)
    )
    widget.mouseReleaseEvent(
        _mouse(
            Type.MouseButtonRelease,
            x1,
            buttons=QtCore.Qt.MouseButton.NoButton,
            mods=mods,
        )
    )


def test_knob_drag_changes_value(qapp) -> None:
    knob = AngleKnob(
        config=InteractionConfig(mode=KnobMode.SPIN_AROUND), diameter=100
    )
    seen = []
    knob.valueChanged.connect(seen.append)

    _drag(knob, 10.0, 35.0)

    # A quarter of the width over a full-turn spread.
    assert knob.value() == pytest.approx(-math.pi / 2)
    assert seen and seen[-1] == knob.value()


def test_knob_shift_release_uses_modified_snap(qapp) -> None:
    knob = AngleKnob(
        config=InteractionConfig(
            mode=KnobMode.SPIN_AROUND,
            snap_angle=math.radians(90),
            modified_snap_angle=math.radians(10),
        ),
        diameter=100,
    )
    _drag(knob, 0.0, 7.0, mods=SHIFT)
    assert math.degrees(knob.value()) == pytest.approx(-30.0)

    _drag(knob, 0.0, 7.0)
    assert math.degrees(knob.value()) == pytest.approx(-90.0)


def test_knob_counterclockwise(qapp) -> None:
    knob = AngleKnob(
        config=InteractionConfig(
            mode=KnobMode.SPIN_AROUND, direction=KnobDirection.COUNTERCLOCKWISE
        ),
        diameter=100,
    )
    _drag(knob, 10.0, 35.0)
    assert knob.value() == pytest.approx(math.pi / 2)


def test_knob_set_value_is_constrained(qapp) -> None:
    knob = AngleKnob(config=InteractionConfig(mode=KnobMode.UNSIGNED, maximum=4.0))
    knob.set_value(-1.0)
    assert knob.value() == pytest.approx(4.0)
    knob.set_value(1.0)
    assert knob.value() == 1.0


def test_move_without_press_is_ignored(qapp) -> None:
    knob = AngleKnob(diameter=100)
    knob.mouseMoveEvent(
        _mouse(
            QtCore.QEvent.Type.MouseMove, 50.0, button=QtCore.Qt.MouseButton.NoButton
        )
    )
    assert knob.value() == 0.0


def test_knob_primitives(qapp) -> None:
    knob = AngleKnob(
        shape=Polygon(6),
        config=InteractionConfig(minimum=-1.0, maximum=1.0),
        orientation=KnobOrientation.RIGHT,
        diameter=120,
        resolution=16,
    )
    knob.set_value(0.5)
    prims = knob.primitives()
    assert sum(isinstance(p, FilledTriangle) for p in prims) == 16
    assert sum(isinstance(p, FilledQuad) for p in prims) == 16
    assert sum(isinstance(p, ClosedLine) for p in prims) == 2
    # Two stop markers and the pointer.
    assert sum(isinstance(p, LineSegment) for p in prims) == 3


def test_knob_at_zero_draws_degenerate_value_arc(qapp) -> None:
    knob = AngleKnob(shape=Square(), diameter=80, resolution=8)
    prims = knob.primitives()
    assert not any(isinstance(p, FilledQuad) for p in prims)
    assert sum(isinstance(p, LineSegment) for p in prims) == 2


def test_knob_renders(qapp) -> None:
    knob = AngleKnob(shape=Square(), diameter=64)
    knob.set_value(1.0)
    image = knob.grab().toImage()
    assert image.width() == 64
    assert image.height() == 64


def test_compass_drag_and_primitives(qapp) -> None:
    compass = LinearCompass(
        config=InteractionConfig(mode=KnobMode.UNSIGNED, minimum=0.5),
        spread=math.pi,
        width=180,
        height=40,
    )
    compass.resize(180, 40)
    _drag(compass, 90.0, 0.0)
    # The minimum stop pins the initial heading to 0.5.
    assert compass.value() == pytest.approx(0.5 + math.pi / 2)

    prims = compass.primitives()
    assert isinstance(prims[0], ClosedLine)
    assert isinstance(prims[1], FilledTriangle)
    # One stop line plus a tick every 10 degrees.
    assert sum(isinstance(p, LineSegment) for p in prims) >= 19 + 1
    compass.grab()


def test_paint_primitives_fills_knob_body(qapp) -> None:
    knob = AngleKnob(diameter=64)
    prims = [p for p in knob.primitives() if isinstance(p, FilledTriangle)]
    rgba = _paint_rgba(prims, 64, 64)
    assert rgba.shape == (64, 64, 4)
    assert rgba[32, 32, 3] == 255
    assert rgba[0, 0, 3] == 0
