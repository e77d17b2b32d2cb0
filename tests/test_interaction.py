"""Drag, snap and clamp behaviour of the knob interaction state machine."""

from __future__ import annotations

import math

from hypothesis import given
from hypothesis import strategies as st
import pytest

from radial_knobs.angles import TAU
from radial_knobs.interaction import KnobInteraction, KnobState, snap
from radial_knobs.models import (
    InteractionConfig,
    InteractionConfigError,
    KnobDirection,
    KnobMode,
)

WIDTH = 200.0


def _dragging(**kwargs) -> KnobInteraction:
    knob = KnobInteraction(InteractionConfig(**kwargs))
    knob.press()
    return knob


def test_starts_idle_and_press_starts_drag() -> None:
    knob = KnobInteraction()
    assert knob.state is KnobState.IDLE
    knob.press()
    assert knob.state is KnobState.DRAGGING
    assert knob.dragging


@pytest.mark.parametrize(
    ("direction", "expected"),
    ((KnobDirection.CLOCKWISE, -math.pi), (KnobDirection.COUNTERCLOCKWISE, math.pi)),
)
def test_full_width_drag_moves_by_spread(direction, expected) -> None:
    knob = KnobInteraction(InteractionConfig(direction=direction))
    assert knob.drag_delta(WIDTH, WIDTH, math.pi) == expected


def test_drag_updates_value_in_spin_around_mode() -> None:
    knob = _dragging(mode=KnobMode.SPIN_AROUND)
    value, changed = knob.drag(0.0, WIDTH, WIDTH, math.pi)
    assert value == -math.pi
    assert changed
    value, changed = knob.drag(value, 3 * WIDTH, WIDTH, math.pi)
    assert value == pytest.approx(-4 * math.pi)


def test_drag_is_continuous_without_snapping() -> None:
    knob = _dragging(snap_angle=0.5)
    value, changed = knob.drag(0.0, -WIDTH / 10.0, WIDTH, 1.0)
    assert value == pytest.approx(0.1)
    assert changed


def test_drag_wraps_signed() -> None:
    knob = _dragging(mode=KnobMode.SIGNED)
    value, _ = knob.drag(3.0, -WIDTH, WIDTH, 0.5)
    assert value == pytest.approx(3.5 - TAU)


def test_drag_wraps_unsigned() -> None:
    knob = _dragging(mode=KnobMode.UNSIGNED)
    value, _ = knob.drag(0.1, WIDTH, WIDTH, 0.5)
    assert value == pytest.approx(TAU - 0.4)


def test_drag_ignored_when_idle() -> None:
    knob = KnobInteraction()
    assert knob.drag(1.0, 50.0, WIDTH, math.pi) == (1.0, False)


def test_drag_ignored_for_zero_width() -> None:
    knob = _dragging()
    assert knob.drag(1.0, 50.0, 0.0, math.pi) == (1.0, False)


def test_drag_reports_no_change_when_pinned() -> None:
    knob = _dragging(maximum=1.0)
    value, changed = knob.drag(1.0, -50.0, WIDTH, math.pi)
    assert value == 1.0
    assert not changed


def test_zero_drag_is_not_a_change() -> None:
    knob = _dragging()
    assert knob.drag(0.7, 0.0, WIDTH, math.pi) == (0.7, False)


def test_release_snaps_to_nearest_multiple() -> None:
    knob = _dragging(snap_angle=0.1)
    value, changed = knob.release(0.37)
    assert value == pytest.approx(0.4)
    assert changed
    assert knob.state is KnobState.IDLE


def test_release_with_modifier_uses_modified_step() -> None:
    knob = _dragging(snap_angle=0.1, modified_snap_angle=0.5)
    value, _ = knob.release(0.37, modifier=True)
    assert value == pytest.approx(0.5)


def test_modifier_without_modified_step_falls_back() -> None:
    knob = _dragging(snap_angle=0.1)
    value, _ = knob.release(0.37, modifier=True)
    assert value == pytest.approx(0.4)


def test_release_without_snap_keeps_value() -> None:
    knob = _dragging()
    assert knob.release(0.37) == (0.37, False)
    assert knob.state is KnobState.IDLE


def test_release_only_snaps_once() -> None:
    knob = _dragging(snap_angle=0.1)
    knob.release(0.37)
    assert knob.release(0.37) == (0.37, False)


def test_snap_reruns_clamp_pipeline() -> None:
    knob = _dragging(snap_angle=1.0, maximum=2.5)
    value, _ = knob.release(2.6)
    assert value == 2.5


def test_snap_result_is_wrapped() -> None:
    knob = _dragging(mode=KnobMode.SIGNED, snap_angle=math.radians(90))
    value, _ = knob.release(math.radians(179))
    assert value == pytest.approx(math.pi)


def test_snap_rounds_half_away_from_zero() -> None:
    assert snap(0.25, 0.5) == 0.5
    assert snap(-0.25, 0.5) == -0.5
    assert snap(0.75, 0.5) == 1.0


def test_snap_rejects_non_positive_step() -> None:
    with pytest.raises(InteractionConfigError):
        snap(1.0, 0.0)


@pytest.mark.parametrize("field", ["snap_angle", "modified_snap_angle"])
@pytest.mark.parametrize("angle", [0.0, -0.1, float("nan")])
def test_non_positive_snap_angles_rejected_at_configuration(field, angle) -> None:
    with pytest.raises(InteractionConfigError):
        InteractionConfig(**{field: angle})


def test_clamp_to_min_and_max() -> None:
    knob = KnobInteraction(
        InteractionConfig(mode=KnobMode.SPIN_AROUND, minimum=-1.0, maximum=1.0)
    )
    assert knob.constrain(5.0) == 1.0
    assert knob.constrain(-5.0) == -1.0
    assert knob.constrain(0.5) == 0.5


def test_clamp_happens_after_wrap() -> None:
    knob = KnobInteraction(InteractionConfig(mode=KnobMode.UNSIGNED, maximum=1.0))
    assert knob.constrain(TAU + 0.5) == pytest.approx(0.5)


@given(st.floats(min_value=-1e6, max_value=1e6, allow_nan=False))
def test_inverted_limits_pin_to_minimum(value: float) -> None:
    for mode in KnobMode:
        knob = KnobInteraction(InteractionConfig(mode=mode, minimum=1.0, maximum=0.5))
        assert knob.constrain(value) == 1.0
