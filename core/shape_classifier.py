"""
ShapeClassifier: maps finger extension flags to a cued-speech hand shape.
No buffer, no timing: just a first-match rule table.
"""
from __future__ import annotations
from typing import List, Optional, Tuple

from core.finger_state import FingerStateExtractor
from domain.enums import HandShape
from domain.models import FingerStates, LandmarkList

# ---- rule table ----------------------------------------------------------
# (thumb, index, middle, ring, pinky, index_separated); None = don't care.
# Order matters: first match wins.
_T, _F, _ANY = True, False, None

Pattern = Tuple[Optional[bool], ...]

SHAPE_RULES: List[Tuple[Pattern, HandShape]] = [
    ((_F, _T, _F, _F, _F, _ANY), HandShape.SHAPE_1),
    ((_F, _T, _T, _F, _F, _F),   HandShape.SHAPE_2),
    ((_F, _F, _T, _T, _T, _ANY), HandShape.SHAPE_3),
    ((_F, _T, _T, _T, _T, _ANY), HandShape.SHAPE_4),
    ((_T, _T, _T, _T, _T, _ANY), HandShape.SHAPE_5),
    ((_T, _T, _F, _F, _F, _ANY), HandShape.SHAPE_6),
    ((_T, _T, _T, _F, _F, _ANY), HandShape.SHAPE_7),
    ((_F, _T, _T, _F, _F, _T),   HandShape.SHAPE_8),
]


def _matches(pattern: Pattern, flags: Tuple[bool, ...]) -> bool:
    return all(want is None or want == got for want, got in zip(pattern, flags))


def classify(states: FingerStates) -> HandShape:
    """Return the first matching shape, or ``HandShape.NONE``."""
    flags = states.as_tuple()
    for pattern, shape in SHAPE_RULES:
        if _matches(pattern, flags):
            return shape
    return HandShape.NONE


# ---- classifier -----------------------------------------------------------
class ShapeClassifier:
    """
    Runs the finger-state extractor and the rule table on one hand.

    Parameters
    ----------
    extractor : FingerStateExtractor, optional
        Defaults to an extractor with the stock thresholds.
    """

    def __init__(self, extractor: Optional[FingerStateExtractor] = None) -> None:
        self._extractor = extractor or FingerStateExtractor()

    def predict(self, landmarks: Optional[LandmarkList]) -> HandShape:
        return classify(self._extractor.extract(landmarks))
