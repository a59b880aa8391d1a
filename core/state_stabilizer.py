"""
ShapeStabilizer: temporal filter that turns noisy per-frame shapes into
one emission per confirmed shape change.

Three rules, all driven by the caller's clock:
  - confirmation: a shape must be seen on N consecutive frames,
  - cooldown: at most one emission per ``detection_cooldown`` seconds,
  - reset window: the last emitted shape may fire again once
    ``shape_reset_time`` has passed since it was emitted.
"""
from __future__ import annotations
import logging
from dataclasses import replace
from typing import Optional

from domain.enums import HandShape
from domain.models import StabilizerState
from utils.constants import CONFIRMATION_THRESHOLD, DETECTION_COOLDOWN, SHAPE_RESET_TIME
from utils.geometry import elapsed

logger = logging.getLogger(__name__)


class ShapeStabilizer:
    """
    Parameters
    ----------
    confirmation_threshold : int
        Consecutive identical frames required to confirm a shape
        (values below 1 behave as 1).
    detection_cooldown : float
        Minimum seconds between two emissions.
    shape_reset_time : float
        Seconds after the last emission before the same shape may re-fire.
    """

    def __init__(
        self,
        confirmation_threshold: int = CONFIRMATION_THRESHOLD,
        detection_cooldown: float = DETECTION_COOLDOWN,
        shape_reset_time: float = SHAPE_RESET_TIME,
    ) -> None:
        if confirmation_threshold < 0:
            raise ValueError("confirmation_threshold must be >= 0")
        if detection_cooldown < 0 or shape_reset_time < 0:
            raise ValueError("detection_cooldown and shape_reset_time must be >= 0")
        self.confirmation_threshold = int(confirmation_threshold)
        self.detection_cooldown = detection_cooldown
        self.shape_reset_time = shape_reset_time
        self._state = StabilizerState()

    # ------------------------------------------------------------------
    def update(self, candidate: HandShape, now: float) -> Optional[HandShape]:
        """
        Feed this frame's candidate shape.

        Returns the shape to emit, or None when nothing fires this frame.
        The confirmed-or-NONE shape is cached in ``self.current`` either way.
        """
        s = self._state

        if candidate == s.last_candidate_shape:
            s.consecutive_count += 1
        else:
            s.last_candidate_shape = candidate
            s.consecutive_count = 1

        if s.consecutive_count >= max(1, self.confirmation_threshold):
            confirmed = candidate
        else:
            confirmed = HandShape.NONE

        if confirmed != s.current_shape:
            logger.debug("[STATE] %s → %s", s.current_shape.value, confirmed.value)
        s.current_shape = confirmed

        if elapsed(s.last_shape_change_time, now) > self.shape_reset_time:
            s.previous_confirmed_shape = HandShape.NONE

        if elapsed(s.last_emit_time, now) <= self.detection_cooldown:
            return None
        if confirmed == HandShape.NONE or confirmed == s.previous_confirmed_shape:
            return None

        s.previous_confirmed_shape = confirmed
        s.last_emit_time = now
        s.last_shape_change_time = now
        # A repeat of the same shape has to be confirmed from scratch.
        s.consecutive_count = 0
        s.last_candidate_shape = HandShape.NONE
        return confirmed

    @property
    def current(self) -> HandShape:
        """Confirmed shape from the last update, or NONE."""
        return self._state.current_shape

    @property
    def state(self) -> StabilizerState:
        """Snapshot of the internal state (a copy; mutating it has no effect)."""
        return replace(self._state)

    def reset(self) -> None:
        self._state = StabilizerState()
