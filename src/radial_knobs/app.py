"""Qt application entry point for the radial_knobs demo gallery."""

from __future__ import annotations

import logging
import math
import os
from pathlib import Path
import sys
from typing import Dict, List

from PySide6 import QtCore, QtWidgets

from . import __version__ as APP_VERSION
from .models import GalleryConfig, KnobDirection, KnobMode, KnobOrientation
from .shapes import SHAPE_KINDS, KnobShape, KnobShapeError, make_shape
from .widgets import AngleKnob, LinearCompass

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV = "RADIAL_KNOBS_LOG_LEVEL"


def shape_for_kind(kind: str, cfg: GalleryConfig) -> KnobShape:
    """Build the gallery shape for ``kind`` from the persisted parameters."""
    ui = cfg.ui
    if kind == "polygon":
        return make_shape(kind, sides=ui.polygon_sides)
    if kind == "superpolygon":
        return make_shape(
            kind, sides=ui.superpolygon_sides, exponent=ui.superpolygon_exponent
        )
    return make_shape(kind, exponent=ui.squircle_exponent)


# ---------------------------- Settings Panel ----------------------------------


class SettingsPanel(QtWidgets.QWidget):
    """Form editing the shared :class:`~radial_knobs.models.KnobSettings`."""

    settingsChanged = QtCore.Signal()

    def __init__(self, cfg: GalleryConfig, parent=None) -> None:
        super().__init__(parent)
        k = cfg.knob

        self.mode_combo = QtWidgets.QComboBox()
        for mode in KnobMode:
            self.mode_combo.addItem(mode.value.replace("_", " "), userData=mode.value)
        self.mode_combo.setCurrentIndex(self.mode_combo.findData(k.mode))

        self.direction_combo = QtWidgets.QComboBox()
        for direction in KnobDirection:
            self.direction_combo.addItem(direction.value, userData=direction.value)
        self.direction_combo.setCurrentIndex(self.direction_combo.findData(k.direction))

        self.orientation_combo = QtWidgets.QComboBox()
        for name in ("top", "right", "bottom", "left"):
            self.orientation_combo.addItem(name, userData=name)
        self.orientation_combo.setCurrentIndex(
            self.orientation_combo.findData(k.orientation)
        )

        self.snap_spin = QtWidgets.QDoubleSpinBox()
        self.snap_spin.setRange(0.0, 180.0)
        self.snap_spin.setSuffix("°")
        self.snap_spin.setSpecialValueText("off")
        self.snap_spin.setValue(k.snap_degrees)

        self.shift_snap_spin = QtWidgets.QDoubleSpinBox()
        self.shift_snap_spin.setRange(0.0, 180.0)
        self.shift_snap_spin.setSuffix("°")
        self.shift_snap_spin.setSpecialValueText("off")
        self.shift_snap_spin.setValue(k.shift_snap_degrees)

        self.resolution_spin = QtWidgets.QSpinBox()
        self.resolution_spin.setRange(3, 256)
        self.resolution_spin.setValue(k.resolution)

        form = QtWidgets.QFormLayout(self)
        form.setFieldGrowthPolicy(
            QtWidgets.QFormLayout.FieldGrowthPolicy.AllNonFixedFieldsGrow
        )
        form.addRow("Wrap mode:", self.mode_combo)
        form.addRow("Direction:", self.direction_combo)
        form.addRow("Orientation:", self.orientation_combo)
        form.addRow("Snap angle:", self.snap_spin)
        form.addRow("Shift snap angle:", self.shift_snap_spin)
        form.addRow("Resolution:", self.resolution_spin)

        for combo in (self.mode_combo, self.direction_combo, self.orientation_combo):
            combo.currentIndexChanged.connect(self.settingsChanged)
        for spin in (self.snap_spin, self.shift_snap_spin, self.resolution_spin):
            spin.valueChanged.connect(self.settingsChanged)

    def store(self, cfg: GalleryConfig) -> None:
        k = cfg.knob
        k.mode = str(self.mode_combo.currentData())
        k.direction = str(self.direction_combo.currentData())
        k.orientation = str(self.orientation_combo.currentData())
        k.snap_degrees = float(self.snap_spin.value())
        k.shift_snap_degrees = float(self.shift_snap_spin.value())
        k.resolution = int(self.resolution_spin.value())


# ---------------------------- Gallery Window ----------------------------------


class GalleryWindow(QtWidgets.QWidget):
    def __init__(self, cfg: GalleryConfig, app_version: str) -> None:
        super().__init__(None)
        self.setWindowTitle(f"radial_knobs {app_version or 'unknown'} — gallery")
        self.setWindowFlag(
            QtCore.Qt.WindowType.WindowStaysOnTopHint, cfg.ui.always_on_top
        )

        self.knobs: Dict[str, AngleKnob] = {}
        self.value_labels: Dict[str, QtWidgets.QLabel] = {}
        knob_row = QtWidgets.QHBoxLayout()
        for kind in SHAPE_KINDS:
            column = QtWidgets.QVBoxLayout()
            knob = AngleKnob(diameter=cfg.ui.knob_size_px)
            label = QtWidgets.QLabel(kind)
            label.setAlignment(QtCore.Qt.AlignmentFlag.AlignHCenter)
            value_label = QtWidgets.QLabel("0°")
            value_label.setAlignment(QtCore.Qt.AlignmentFlag.AlignHCenter)
            knob.valueChanged.connect(
                lambda v, lbl=value_label: lbl.setText(f"{math.degrees(v):.0f}°")
            )
            column.addWidget(knob, alignment=QtCore.Qt.AlignmentFlag.AlignHCenter)
            column.addWidget(label)
            column.addWidget(value_label)
            knob_row.addLayout(column)
            self.knobs[kind] = knob
            self.value_labels[kind] = value_label

        self.compass = LinearCompass(
            spread=math.radians(cfg.ui.compass_spread_degrees)
        )
        self.settings = SettingsPanel(cfg, self)
        self.status_label = QtWidgets.QLabel(
            "Drag horizontally to turn. Hold Shift on release for the fine snap."
        )
        self.status_label.setWordWrap(True)

        v = QtWidgets.QVBoxLayout(self)
        v.addLayout(knob_row)
        v.addWidget(self.compass)
        v.addWidget(self.settings)
        v.addWidget(self.status_label)

    def set_status(self, text: str) -> None:
        self.status_label.setText(text)

    def all_widgets(self) -> List:
        return [*self.knobs.values(), self.compass]


# ---------------------------- Main Controller ---------------------------------


class MainController(QtCore.QObject):
    def __init__(self, app: QtWidgets.QApplication) -> None:
        super().__init__(None)
        self.app = app
        self.cfg = self._load_config()
        self._app_version = app.applicationVersion() or APP_VERSION

        self.window = GalleryWindow(self.cfg, self._app_version)
        self.window.settings.settingsChanged.connect(self._on_settings_changed)
        self.apply_config()
        self.window.show()

    # ---------------------------- Config I/O ----------------------------------

    def _config_path(self) -> Path:
        home = Path.home()
        return home / ".radial_knobs_config.json"

    def _load_config(self) -> GalleryConfig:
        p = self._config_path()
        if p.exists():
            try:
                return GalleryConfig.from_json(p.read_text(encoding="utf-8"))
            except (OSError, ValueError, TypeError, AttributeError) as exc:
                logger.warning("Ignoring unreadable config %s: %s", p, exc)
        return GalleryConfig()

    def _save_config(self) -> None:
        p = self._config_path()
        try:
            p.write_text(self.cfg.to_json(), encoding="utf-8")
        except OSError as exc:
            logger.warning("Could not save config to %s: %s", p, exc)

    # ---------------------------- Event Handlers ------------------------------

    def _on_settings_changed(self) -> None:
        self.window.settings.store(self.cfg)
        self.apply_config()
        self._save_config()

    def apply_config(self) -> None:
        """Push the current configuration into every widget of the gallery."""
        knob = self.cfg.knob
        try:
            interaction = knob.interaction_config()
        except ValueError as exc:
            self.window.set_status(f"Invalid settings: {exc}")
            return
        orientation = KnobOrientation.from_name(knob.orientation)

        for kind, widget in self.window.knobs.items():
            try:
                widget.set_shape(shape_for_kind(kind, self.cfg))
            except KnobShapeError as exc:
                logger.warning("Keeping previous %s shape: %s", kind, exc)
            widget.set_orientation(orientation)
            widget.set_resolution(knob.resolution)
            widget.set_config(interaction)
        self.window.compass.set_config(interaction)
        logger.debug("Applied gallery config %s", self.cfg)


# ---------------------------------- Main --------------------------------------


def configure_logging() -> None:
    level_name = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
    )


def main() -> None:
    configure_logging()
    app = QtWidgets.QApplication(sys.argv)
    app.setApplicationName("radial_knobs")
    app.setApplicationVersion(APP_VERSION)

    ctrl = MainController(app)
    ret = app.exec()
    ctrl._save_config()
    sys.exit(ret)


if __name__ == "__main__":
    main()
