"""
Camera: thin wrapper around OpenCV VideoCapture with FPS limiting.
No landmarks, no classification.
"""
from __future__ import annotations
import time
from typing import Optional

import cv2
import numpy as np


class Camera:
    """
    Parameters
    ----------
    device : int
        Camera index (0 = default webcam).
    fps_limit : int
        Maximum frames per second handed to the pipeline.
    mirror : bool
        Flip frames horizontally (selfie view).
    """

    def __init__(self, device: int = 0, fps_limit: int = 30, mirror: bool = False) -> None:
        if fps_limit <= 0:
            raise ValueError("fps_limit must be positive")
        self._cap = cv2.VideoCapture(device)
        self._frame_time = 1.0 / fps_limit
        self._mirror = mirror
        self._next_due: float = 0.0

        if not self._cap.isOpened():
            raise RuntimeError(f"Cannot open camera device {device}")

    # ------------------------------------------------------------------
    def read(self) -> Optional[np.ndarray]:
        """
        Sleep until the next frame is due, then return it (BGR).
        Returns None on read failure.
        """
        delay = self._next_due - time.monotonic()
        if delay > 0:
            time.sleep(delay)
        self._next_due = time.monotonic() + self._frame_time

        ret, frame = self._cap.read()
        if not ret:
            return None
        return cv2.flip(frame, 1) if self._mirror else frame

    def release(self) -> None:
        self._cap.release()

    def __enter__(self) -> "Camera":
        return self

    def __exit__(self, *_) -> None:
        self.release()
