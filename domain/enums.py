from enum import Enum, IntEnum


class HandShape(str, Enum):
    """Cued-speech hand shapes recognised by the classifier."""
    NONE    = "None"
    SHAPE_1 = "Shape1"
    SHAPE_2 = "Shape2"
    SHAPE_3 = "Shape3"
    SHAPE_4 = "Shape4"
    SHAPE_5 = "Shape5"
    SHAPE_6 = "Shape6"
    SHAPE_7 = "Shape7"
    SHAPE_8 = "Shape8"


class Finger(str, Enum):
    THUMB  = "THUMB"
    INDEX  = "INDEX"
    MIDDLE = "MIDDLE"
    RING   = "RING"
    PINKY  = "PINKY"


class LandmarkIndex(IntEnum):
    """MediaPipe hand landmark indices (21 points)."""
    WRIST      = 0

    THUMB_CMC  = 1
    THUMB_MCP  = 2
    THUMB_IP   = 3
    THUMB_TIP  = 4

    INDEX_MCP  = 5
    INDEX_PIP  = 6
    INDEX_DIP  = 7
    INDEX_TIP  = 8

    MIDDLE_MCP = 9
    MIDDLE_PIP = 10
    MIDDLE_DIP = 11
    MIDDLE_TIP = 12

    RING_MCP   = 13
    RING_PIP   = 14
    RING_DIP   = 15
    RING_TIP   = 16

    PINKY_MCP  = 17
    PINKY_PIP  = 18
    PINKY_DIP  = 19
    PINKY_TIP  = 20
