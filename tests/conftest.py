from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable, List, Tuple

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

Point = Tuple[float, float, float]

# Finger columns (x) and joint heights (y). MCP->PIP is 0.05, so an extended
# tip (0.20 away) clears the 1.5 ratio and a folded tip (0.03 away) does not.
_FINGER_X = {"index": 0.40, "middle": 0.45, "ring": 0.50, "pinky": 0.55}
_FINGER_BASE = {"index": 5, "middle": 9, "ring": 13, "pinky": 17}
_MCP_Y, _PIP_Y = 0.60, 0.55
_EXTENDED_DIP_Y, _EXTENDED_TIP_Y = 0.47, 0.40
_FOLDED_DIP_Y, _FOLDED_TIP_Y = 0.53, 0.57


def build_hand(
    thumb: bool = False,
    index: bool = False,
    middle: bool = False,
    ring: bool = False,
    pinky: bool = False,
    separated: bool = False,
) -> List[Point]:
    """Synthetic 21-point hand whose finger flags match the arguments."""
    points: List[Point] = [(0.0, 0.0, 0.0)] * 21
    points[0] = (0.47, 0.80, 0.0)

    # Thumb IP is 0.18 from INDEX_MCP when splayed, 0.054 when tucked.
    ip_x = 0.22 if thumb else 0.35
    points[1] = (0.42, 0.75, 0.0)
    points[2] = (0.38, 0.70, 0.0)
    points[3] = (ip_x, 0.62, 0.0)
    points[4] = (ip_x - 0.03, 0.58, 0.0)

    flags = {"index": index, "middle": middle, "ring": ring, "pinky": pinky}
    for name, base in _FINGER_BASE.items():
        x = _FINGER_X[name]
        dip_y, tip_y = (_EXTENDED_DIP_Y, _EXTENDED_TIP_Y) if flags[name] else (_FOLDED_DIP_Y, _FOLDED_TIP_Y)
        tip_x = x
        if name == "index" and separated and index:
            # Spread the extended index tip 0.15 away from the middle tip.
            tip_x = x - 0.10
        points[base] = (x, _MCP_Y, 0.0)
        points[base + 1] = (x, _PIP_Y, 0.0)
        points[base + 2] = (x, dip_y, 0.0)
        points[base + 3] = (tip_x, tip_y, 0.0)
    return points


@pytest.fixture
def make_hand() -> Callable[..., List[Point]]:
    return build_hand
