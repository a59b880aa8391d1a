from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Optional, Sequence, Tuple

from domain.enums import Finger, HandShape, LandmarkIndex as L
from utils.constants import SYMBOL_SEPARATOR

# Type aliases
Landmark3D = Tuple[float, float, float]
LandmarkList = Sequence[Landmark3D]      # 21 points, or a (21, 3) ndarray
SymbolMapping = Dict[HandShape, Tuple[str, ...]]

NUM_LANDMARKS = 21

# Four joints per finger, base to tip
FINGER_JOINTS: Dict[Finger, Tuple[int, int, int, int]] = {
    Finger.THUMB:  (L.THUMB_CMC,  L.THUMB_MCP,  L.THUMB_IP,   L.THUMB_TIP),
    Finger.INDEX:  (L.INDEX_MCP,  L.INDEX_PIP,  L.INDEX_DIP,  L.INDEX_TIP),
    Finger.MIDDLE: (L.MIDDLE_MCP, L.MIDDLE_PIP, L.MIDDLE_DIP, L.MIDDLE_TIP),
    Finger.RING:   (L.RING_MCP,   L.RING_PIP,   L.RING_DIP,   L.RING_TIP),
    Finger.PINKY:  (L.PINKY_MCP,  L.PINKY_PIP,  L.PINKY_DIP,  L.PINKY_TIP),
}


def _check_layout() -> None:
    assert len(L) == NUM_LANDMARKS
    assert L.WRIST == 0
    assert FINGER_JOINTS[Finger.THUMB] == (1, 2, 3, 4)
    for offset, finger in enumerate((Finger.INDEX, Finger.MIDDLE, Finger.RING, Finger.PINKY)):
        start = 5 + 4 * offset
        assert FINGER_JOINTS[finger] == tuple(range(start, start + 4)), finger


_check_layout()


@dataclass(frozen=True)
class FingerStates:
    """Per-frame finger extension flags derived from one hand."""
    thumb: bool = False
    index: bool = False
    middle: bool = False
    ring: bool = False
    pinky: bool = False
    index_separated: bool = False

    def as_tuple(self) -> Tuple[bool, bool, bool, bool, bool, bool]:
        return (self.thumb, self.index, self.middle, self.ring, self.pinky, self.index_separated)


@dataclass(frozen=True)
class ShapeEvent:
    """Emitted once per confirmed shape change."""
    shape: HandShape
    symbols: Tuple[str, ...]
    timestamp: float

    @property
    def text(self) -> str:
        return SYMBOL_SEPARATOR.join(self.symbols)


@dataclass
class StabilizerState:
    """
    Cross-frame state of the temporal stabilizer.

    Timestamps are ``None`` until first set; an unset timestamp counts as
    infinitely long ago.
    """
    current_shape: HandShape = HandShape.NONE
    previous_confirmed_shape: HandShape = HandShape.NONE
    last_candidate_shape: HandShape = HandShape.NONE
    consecutive_count: int = 0
    last_emit_time: Optional[float] = None
    last_shape_change_time: Optional[float] = None
