"""
HandTracker: encapsulates all MediaPipe logic.
The rest of the application never imports mediapipe directly.
"""
from __future__ import annotations
from typing import Any, List

import cv2
import mediapipe as mp

from domain.models import Landmark3D


class HandTracker:
    """
    Runs MediaPipe Hands on a BGR frame and returns one list of 21
    normalised ``(x, y, z)`` landmarks per detected hand, in detection order.

    Parameters
    ----------
    max_num_hands : int
    min_detection_confidence : float
    min_tracking_confidence : float
    """

    def __init__(
        self,
        max_num_hands: int = 1,
        min_detection_confidence: float = 0.5,
        min_tracking_confidence: float = 0.5,
    ) -> None:
        self._hands = mp.solutions.hands.Hands(
            static_image_mode=False,
            max_num_hands=max_num_hands,
            min_detection_confidence=min_detection_confidence,
            min_tracking_confidence=min_tracking_confidence,
        )

    # ------------------------------------------------------------------
    def process(self, frame: Any) -> List[List[Landmark3D]]:
        """
        Parameters
        ----------
        frame : np.ndarray
            BGR frame from OpenCV.

        Returns
        -------
        list of landmark lists
            Empty when no hand is visible.
        """
        rgb = cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)
        results = self._hands.process(rgb)

        if not results.multi_hand_landmarks:
            return []
        return [
            [(lm.x, lm.y, lm.z) for lm in hand_landmarks.landmark]
            for hand_landmarks in results.multi_hand_landmarks
        ]

    def release(self) -> None:
        self._hands.close()

    def __enter__(self) -> "HandTracker":
        return self

    def __exit__(self, *_) -> None:
        self.release()
