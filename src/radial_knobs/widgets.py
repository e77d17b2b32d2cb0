"""PySide6 host widgets driving the radial core: a rotary knob and a compass."""

from __future__ import annotations

import logging
import math
from typing import List, Optional

from PySide6 import QtCore, QtGui, QtWidgets

from .angles import TAU
from .compass import compass_ticks, map_angle_to_screen
from .interaction import KnobInteraction
from .models import InteractionConfig, KnobOrientation
from .painter import DEFAULT_RESOLUTION, ShapePainter
from .primitives import (
    ClosedLine,
    FilledTriangle,
    LineSegment,
    Primitive,
    Stroke,
)
from .shapes import Circle, KnobShape
from .utils.geometry import angled, clamp
from .utils.qt import color_from_qcolor, paint_primitives

logger = logging.getLogger(__name__)


class _RadialWidget(QtWidgets.QWidget):
    """Routes mouse events through a :class:`KnobInteraction`."""

    valueChanged = QtCore.Signal(float)

    def __init__(
        self,
        config: Optional[InteractionConfig] = None,
        spread: float = TAU,
        parent: Optional[QtWidgets.QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self._interaction = KnobInteraction(config)
        self._value: float = self._interaction.constrain(0.0)
        self._spread = float(spread)
        self._last_x = 0.0
        self.setMouseTracking(False)

    # ----------------------------- Properties ---------------------------------

    @property
    def config(self) -> InteractionConfig:
        return self._interaction.config

    def set_config(self, config: InteractionConfig) -> None:
        logger.debug("%s reconfigured: %s", type(self).__name__, config)
        self._interaction = KnobInteraction(config)
        self.set_value(self._value)

    def value(self) -> float:
        return self._value

    def set_value(self, value: float) -> None:
        new_value = self._interaction.constrain(float(value))
        if new_value != self._value:
            self._value = new_value
            self.valueChanged.emit(new_value)
        self.update()

    def spread(self) -> float:
        return self._spread

    def set_spread(self, spread: float) -> None:
        if not spread > 0.0:
            raise ValueError(f"spread must be positive, got {spread!r}")
        self._spread = float(spread)
        self.update()

    def _palette_colors(self):
        pal = self.palette()
        base = color_from_qcolor(pal.color(QtGui.QPalette.ColorRole.Base))
        button = color_from_qcolor(pal.color(QtGui.QPalette.ColorRole.Button))
        text = color_from_qcolor(pal.color(QtGui.QPalette.ColorRole.WindowText))
        accent = color_from_qcolor(pal.color(QtGui.QPalette.ColorRole.Highlight))
        return base, button, text, accent

    # ----------------------------- Interaction --------------------------------

    def _apply(self, value: float, changed: bool) -> None:
        if changed:
            self._value = value
            self.valueChanged.emit(value)
            self.update()

    def mousePressEvent(self, e: QtGui.QMouseEvent) -> None:
        if e.button() != QtCore.Qt.MouseButton.LeftButton:
            e.ignore()
            return
        self._interaction.press()
        self._last_x = float(e.position().x())
        self.update()
        e.accept()

    def mouseMoveEvent(self, e: QtGui.QMouseEvent) -> None:
        if not self._interaction.dragging:
            e.ignore()
            return
        x = float(e.position().x())
        dx = x - self._last_x
        self._last_x = x
        result = self._interaction.drag(self._value, dx, self.width(), self._spread)
        self._apply(*result)
        e.accept()

    def mouseReleaseEvent(self, e: QtGui.QMouseEvent) -> None:
        if not self._interaction.dragging:
            e.ignore()
            return
        shift = bool(e.modifiers() & QtCore.Qt.KeyboardModifier.ShiftModifier)
        self._apply(*self._interaction.release(self._value, modifier=shift))
        self.update()
        e.accept()

    # ----------------------------- Painting -----------------------------------

    def primitives(self) -> List[Primitive]:
        raise NotImplementedError

    def paintEvent(self, e: QtGui.QPaintEvent) -> None:
        painter = QtGui.QPainter(self)
        painter.setRenderHint(QtGui.QPainter.RenderHint.Antialiasing, True)
        painter.setClipRect(self.rect())
        paint_primitives(painter, self.primitives())
        painter.end()


# --------------------------------- Knob ---------------------------------------


class AngleKnob(_RadialWidget):
    """Rotary knob whose body, value arc and stops follow a polar shape."""

    def __init__(
        self,
        shape: Optional[KnobShape] = None,
        config: Optional[InteractionConfig] = None,
        orientation: KnobOrientation = KnobOrientation.TOP,
        diameter: int = 96,
        resolution: int = DEFAULT_RESOLUTION,
        parent: Optional[QtWidgets.QWidget] = None,
    ) -> None:
        super().__init__(config, TAU, parent)
        self._shape = shape if shape is not None else Circle()
        self._orientation = orientation
        self._painter = ShapePainter(resolution)
        self.setFixedSize(diameter, diameter)

    def shape(self) -> KnobShape:
        return self._shape

    def set_shape(self, shape: KnobShape) -> None:
        self._shape = shape
        self.update()

    def set_orientation(self, orientation: KnobOrientation) -> None:
        self._orientation = orientation
        self.update()

    def set_resolution(self, resolution: int) -> None:
        self._painter = ShapePainter(resolution)
        self.update()

    def screen_angle(self, value: float) -> float:
        """Screen angle at which ``value`` is drawn."""
        return self._orientation.rotation + self.config.direction.sign * value

    def primitives(self) -> List[Primitive]:
        base, button, text, accent = self._palette_colors()
        w, h = float(self.width()), float(self.height())
        center = (w / 2.0, h / 2.0)
        # Leave room for the outline of corner-heavy shapes.
        radius = min(w, h) / 2.0 * 0.7
        rotation = self._orientation.rotation
        outline = Stroke(1.0, text)
        shape = self._shape
        painter = self._painter

        prims: List[Primitive] = []
        prims += painter.paint_shape(shape, center, radius, button, outline, rotation)

        origin = self.screen_angle(0.0)
        span = clamp(self.config.direction.sign * self._value, -TAU, TAU)
        prims += painter.paint_arc(
            shape,
            center,
            radius * 0.75,
            radius * 0.95,
            origin,
            origin + span,
            accent,
            Stroke(1.0, accent),
            rotation,
        )

        for stop in (self.config.minimum, self.config.maximum):
            if stop is None:
                continue
            angle = self.screen_angle(stop)
            prims += painter.paint_arc(
                shape,
                center,
                radius * 0.95,
                radius * 1.2,
                angle,
                angle,
                text,
                Stroke(2.0, text),
                rotation,
            )

        pointer_angle = self.screen_angle(self._value)
        tip = radius * shape.eval(pointer_angle - rotation)
        dx, dy = angled(pointer_angle)
        prims.append(
            LineSegment(
                center,
                (center[0] + dx * tip, center[1] + dy * tip),
                Stroke(3.0 if self._interaction.dragging else 2.0, text),
            )
        )
        return prims


# -------------------------------- Compass -------------------------------------


class LinearCompass(_RadialWidget):
    """Horizontal heading tape; dragging pans the heading under a fixed marker."""

    def __init__(
        self,
        config: Optional[InteractionConfig] = None,
        spread: float = math.pi,
        width: int = 320,
        height: int = 48,
        parent: Optional[QtWidgets.QWidget] = None,
    ) -> None:
        super().__init__(config, spread, parent)
        self.setMinimumSize(width, height)

    def primitives(self) -> List[Primitive]:
        base, button, text, accent = self._palette_colors()
        w, h = float(self.width()), float(self.height())
        cx, cy = w / 2.0, h / 2.0
        fg = Stroke(1.0, text)

        prims: List[Primitive] = [
            ClosedLine(
                ((0.0, 0.0), (w - 1.0, 0.0), (w - 1.0, h - 1.0), (0.0, h - 1.0)), fg
            ),
            FilledTriangle(
                ((cx, cy), (cx - h / 6.0, cy - h / 4.0), (cx + h / 6.0, cy - h / 4.0)),
                accent,
                fg,
            ),
        ]

        for tick in compass_ticks(self._value, self._spread, cx, w):
            prims.append(
                LineSegment(
                    (tick.x, h * 0.5),
                    (tick.x, h * 0.5 + h * 0.25 * tick.height),
                    fg,
                )
            )

        for stop in (self.config.minimum, self.config.maximum):
            if stop is None:
                continue
            x = map_angle_to_screen(stop, self._value, cx, w, self._spread)
            prims.append(LineSegment((x, 0.0), (x, h), Stroke(2.0, text)))
        return prims

    def paintEvent(self, e: QtGui.QPaintEvent) -> None:
        painter = QtGui.QPainter(self)
        base = self.palette().color(QtGui.QPalette.ColorRole.Base)
        painter.fillRect(self.rect(), base)
        painter.end()
        super().paintEvent(e)


__all__ = ["AngleKnob", "LinearCompass"]
