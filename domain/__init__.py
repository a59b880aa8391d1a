from domain.enums import Finger, HandShape, LandmarkIndex
from domain.models import FingerStates, ShapeEvent, StabilizerState

__all__ = [
    "Finger",
    "HandShape",
    "LandmarkIndex",
    "FingerStates",
    "ShapeEvent",
    "StabilizerState",
]
