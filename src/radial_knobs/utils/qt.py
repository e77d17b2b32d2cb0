"""Qt helper utilities."""

from typing import Iterable

from PySide6 import QtCore, QtGui

from ..primitives import (
    ClosedLine,
    Color,
    FilledQuad,
    FilledTriangle,
    LineSegment,
    Primitive,
    Stroke,
)


def qcolor(color: Color) -> QtGui.QColor:
    return QtGui.QColor(color.r, color.g, color.b, color.a)


def color_from_qcolor(c: QtGui.QColor) -> Color:
    return Color(c.red(), c.green(), c.blue(), c.alpha())


def qpen(stroke: Stroke) -> QtGui.QPen:
    if not stroke.is_visible:
        return QtGui.QPen(QtCore.Qt.PenStyle.NoPen)
    pen = QtGui.QPen(qcolor(stroke.color))
    pen.setWidthF(float(stroke.width))
    return pen


def _polygon(points) -> QtGui.QPolygonF:
    return QtGui.QPolygonF([QtCore.QPointF(x, y) for x, y in points])


def paint_primitives(painter: QtGui.QPainter, primitives: Iterable[Primitive]) -> None:
    """Replay a primitive list on ``painter``, saving and restoring its state."""
    painter.save()
    try:
        for primitive in primitives:
            if isinstance(primitive, (FilledTriangle, FilledQuad)):
                painter.setPen(qpen(primitive.stroke))
                painter.setBrush(QtGui.QBrush(qcolor(primitive.fill)))
                painter.drawConvexPolygon(_polygon(primitive.points))
            elif isinstance(primitive, LineSegment):
                painter.setPen(qpen(primitive.stroke))
                painter.drawLine(
                    QtCore.QPointF(*primitive.start), QtCore.QPointF(*primitive.end)
                )
            elif isinstance(primitive, ClosedLine):
                painter.setPen(qpen(primitive.stroke))
                painter.setBrush(QtCore.Qt.BrushStyle.NoBrush)
                painter.drawPolygon(_polygon(primitive.points))
            else:
                raise TypeError(f"unsupported primitive {primitive!r}")
    finally:
        painter.restore()


__all__ = [
    "qcolor",
    "color_from_qcolor",
    "qpen",
    "paint_primitives",
]
