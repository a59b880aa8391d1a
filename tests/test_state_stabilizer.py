from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

import pytest

from core.state_stabilizer import ShapeStabilizer
from domain.enums import HandShape

S1, S2, NONE = HandShape.SHAPE_1, HandShape.SHAPE_2, HandShape.NONE


def _feed(
    stabilizer: ShapeStabilizer,
    frames: Sequence[Tuple[float, HandShape]],
) -> Tuple[List[HandShape], List[Optional[HandShape]]]:
    currents, emitted = [], []
    for now, shape in frames:
        emitted.append(stabilizer.update(shape, now))
        currents.append(stabilizer.current)
    return currents, emitted


def test_initial_state() -> None:
    state = ShapeStabilizer().state
    assert state.current_shape == NONE
    assert state.previous_confirmed_shape == NONE
    assert state.last_candidate_shape == NONE
    assert state.consecutive_count == 0
    assert state.last_emit_time is None
    assert state.last_shape_change_time is None


def test_confirmation_needs_threshold_frames() -> None:
    stabilizer = ShapeStabilizer(confirmation_threshold=2)
    currents, emitted = _feed(stabilizer, [(0.0, S1), (0.033, S1)])
    assert currents == [NONE, S1]
    assert emitted == [None, S1]


def test_threshold_three_confirms_on_third_frame() -> None:
    stabilizer = ShapeStabilizer(confirmation_threshold=3)
    currents, emitted = _feed(stabilizer, [(0.0, S1), (0.03, S1), (0.06, S1)])
    assert currents == [NONE, NONE, S1]
    assert emitted == [None, None, S1]


@pytest.mark.parametrize("threshold", [0, 1])
def test_threshold_below_one_confirms_immediately(threshold) -> None:
    stabilizer = ShapeStabilizer(confirmation_threshold=threshold)
    assert stabilizer.update(S1, 0.0) == S1
    assert stabilizer.current == S1


def test_interrupted_run_restarts_count() -> None:
    stabilizer = ShapeStabilizer(confirmation_threshold=2)
    currents, _ = _feed(stabilizer, [(0.0, S1), (0.03, S2), (0.06, S1)])
    assert currents == [NONE, NONE, NONE]
    assert stabilizer.state.consecutive_count == 1


def test_emission_resets_confirmation() -> None:
    stabilizer = ShapeStabilizer(confirmation_threshold=2)
    currents, _ = _feed(stabilizer, [(0.0, S1), (0.03, S1), (0.06, S1), (0.09, S1)])
    # The frame after emission starts a fresh run, so current flickers to NONE.
    assert currents == [NONE, S1, NONE, S1]
    state = stabilizer.state
    assert state.previous_confirmed_shape == S1
    assert state.last_emit_time == 0.03
    assert state.last_shape_change_time == 0.03


def test_held_shape_emits_once_within_reset_window() -> None:
    stabilizer = ShapeStabilizer(confirmation_threshold=2, detection_cooldown=0.5, shape_reset_time=5.0)
    frames = [(i / 30.0, S1) for i in range(60)]
    _, emitted = _feed(stabilizer, frames)
    assert [e for e in emitted if e is not None] == [S1]
    assert emitted[1] == S1


def test_held_shape_is_reannounced_after_reset_window() -> None:
    stabilizer = ShapeStabilizer(confirmation_threshold=2, detection_cooldown=0.45, shape_reset_time=0.45)
    frames = [(i / 10.0, S1) for i in range(20)]
    _, emitted = _feed(stabilizer, frames)
    fired_at = [frames[i][0] for i, e in enumerate(emitted) if e is not None]
    assert fired_at == [0.1, 0.6, 1.1, 1.6]


def test_same_shape_blocked_until_reset_window_elapses() -> None:
    stabilizer = ShapeStabilizer(confirmation_threshold=2, detection_cooldown=0.1, shape_reset_time=0.5)
    frames = [
        (-0.05, S1),
        (0.0, S1),     # emits
        (0.2, NONE),
        (0.3, S1),
        (0.35, S1),    # confirmed, cooldown passed, but still the previous shape
        (0.45, S1),
        (0.55, S1),    # reset window elapsed
    ]
    _, emitted = _feed(stabilizer, frames)
    assert emitted == [None, S1, None, None, None, None, S1]


def test_cooldown_defers_a_different_shape() -> None:
    stabilizer = ShapeStabilizer(confirmation_threshold=2, detection_cooldown=0.5, shape_reset_time=5.0)
    frames = [
        (0.0, S1),
        (0.05, S1),    # A emits
        (0.1, S2),
        (0.15, S2),    # B confirmed but inside cooldown
        (0.3, S2),
        (0.5, S2),
        (0.6, S2),     # cooldown elapsed
    ]
    currents, emitted = _feed(stabilizer, frames)
    assert emitted == [None, S1, None, None, None, None, S2]
    assert currents[3:6] == [S2, S2, S2]


def test_none_is_never_emitted() -> None:
    stabilizer = ShapeStabilizer(confirmation_threshold=1)
    _, emitted = _feed(stabilizer, [(t / 10.0, NONE) for t in range(20)])
    assert emitted == [None] * 20
    assert stabilizer.current == NONE


def test_reset_clears_state() -> None:
    stabilizer = ShapeStabilizer()
    _feed(stabilizer, [(0.0, S1), (0.1, S1)])
    stabilizer.reset()
    assert stabilizer.current == NONE
    assert stabilizer.state.last_emit_time is None


def test_state_is_a_snapshot() -> None:
    stabilizer = ShapeStabilizer()
    stabilizer.state.consecutive_count = 99
    assert stabilizer.state.consecutive_count == 0


@pytest.mark.parametrize(
    "kwargs",
    [
        {"confirmation_threshold": -1},
        {"detection_cooldown": -0.1},
        {"shape_reset_time": -0.1},
    ],
)
def test_rejects_negative_configuration(kwargs) -> None:
    with pytest.raises(ValueError):
        ShapeStabilizer(**kwargs)
