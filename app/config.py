from __future__ import annotations
from dataclasses import dataclass

from utils import constants as C


@dataclass
class AppConfig:
    """
    Central configuration injected into all components.
    Defaults live in utils.constants.
    """
    # ---- camera --------------------------------------------------------
    camera_device: int = 0
    fps_limit: int = C.FPS_LIMIT
    mirror: bool = True

    # ---- hand tracker --------------------------------------------------
    max_num_hands: int = 1
    min_detection_confidence: float = C.MIN_DETECTION_CONFIDENCE
    min_tracking_confidence: float = C.MIN_TRACKING_CONFIDENCE

    # ---- finger state extraction ---------------------------------------
    finger_extension_ratio: float = C.FINGER_EXTENSION_RATIO
    thumb_extension_threshold: float = C.THUMB_EXTENSION_THRESHOLD
    index_separation_threshold: float = C.INDEX_SEPARATION_THRESHOLD

    # ---- stabilizer (seconds) ------------------------------------------
    confirmation_threshold: int = C.CONFIRMATION_THRESHOLD
    detection_cooldown: float = C.DETECTION_COOLDOWN
    shape_reset_time: float = C.SHAPE_RESET_TIME

    # ---- logging -------------------------------------------------------
    log_level: str = "INFO"


# Default singleton: import and use directly, or override in tests.
default_config = AppConfig()
