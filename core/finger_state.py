"""
FingerStateExtractor: turns one hand's 21 landmarks into extension flags.
Stateless: nothing is kept between frames.
"""
from __future__ import annotations
import logging
from typing import Optional

from domain.enums import Finger, LandmarkIndex as L
from domain.models import FINGER_JOINTS, NUM_LANDMARKS, FingerStates, LandmarkList
from utils.constants import (
    FINGER_EXTENSION_RATIO,
    INDEX_SEPARATION_THRESHOLD,
    THUMB_EXTENSION_THRESHOLD,
)
from utils.geometry import dist

logger = logging.getLogger(__name__)


class FingerStateExtractor:
    """
    Parameters
    ----------
    finger_extension_ratio : float
        A non-thumb finger is extended when |MCP->TIP| exceeds this multiple
        of |MCP->PIP|.
    thumb_extension_threshold : float
        The thumb is extended when |THUMB_IP->INDEX_MCP| exceeds this value.
    index_separation_threshold : float
        Index and middle are separated when |INDEX_TIP->MIDDLE_TIP| exceeds
        this value.
    """

    def __init__(
        self,
        finger_extension_ratio: float = FINGER_EXTENSION_RATIO,
        thumb_extension_threshold: float = THUMB_EXTENSION_THRESHOLD,
        index_separation_threshold: float = INDEX_SEPARATION_THRESHOLD,
    ) -> None:
        if finger_extension_ratio <= 0:
            raise ValueError("finger_extension_ratio must be positive")
        if thumb_extension_threshold < 0 or index_separation_threshold < 0:
            raise ValueError("distance thresholds must be non-negative")
        self.finger_extension_ratio = finger_extension_ratio
        self.thumb_extension_threshold = thumb_extension_threshold
        self.index_separation_threshold = index_separation_threshold

    # ------------------------------------------------------------------
    def extract(self, landmarks: Optional[LandmarkList]) -> FingerStates:
        """
        Missing, short or malformed landmark lists (a point that is None or
        has fewer than three coordinates) yield all-False flags instead of
        raising; the classifier then falls through to ``HandShape.NONE``.
        """
        if landmarks is None or len(landmarks) < NUM_LANDMARKS:
            return FingerStates()

        try:
            return FingerStates(
                thumb=self.is_thumb_extended(landmarks),
                index=self.is_finger_extended(landmarks, Finger.INDEX),
                middle=self.is_finger_extended(landmarks, Finger.MIDDLE),
                ring=self.is_finger_extended(landmarks, Finger.RING),
                pinky=self.is_finger_extended(landmarks, Finger.PINKY),
                index_separated=self.is_index_separated(landmarks),
            )
        except (TypeError, IndexError):
            logger.debug("Malformed landmark list, treating as no hand")
            return FingerStates()

    def is_finger_extended(self, landmarks: LandmarkList, finger: Finger) -> bool:
        if finger is Finger.THUMB:
            return self.is_thumb_extended(landmarks)
        mcp, pip, _dip, tip = FINGER_JOINTS[finger]
        tip_dist = dist(landmarks[mcp], landmarks[tip])
        pip_dist = dist(landmarks[mcp], landmarks[pip])
        return tip_dist > pip_dist * self.finger_extension_ratio

    def is_thumb_extended(self, landmarks: LandmarkList) -> bool:
        # Splay away from the index knuckle; wrist-relative distance is
        # unreliable for the thumb.
        d = dist(landmarks[L.THUMB_IP], landmarks[L.INDEX_MCP])
        return d > self.thumb_extension_threshold

    def is_index_separated(self, landmarks: LandmarkList) -> bool:
        d = dist(landmarks[L.INDEX_TIP], landmarks[L.MIDDLE_TIP])
        return d > self.index_separation_threshold
