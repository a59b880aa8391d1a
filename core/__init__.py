from core.finger_state import FingerStateExtractor
from core.shape_classifier import ShapeClassifier, classify
from core.state_stabilizer import ShapeStabilizer
from core.recognizer import HandShapeRecognizer

# Camera and HandTracker need OpenCV/MediaPipe; import them from their modules.
__all__ = [
    "FingerStateExtractor",
    "ShapeClassifier",
    "classify",
    "ShapeStabilizer",
    "HandShapeRecognizer",
]
