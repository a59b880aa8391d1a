"""
Pure geometric utility functions.
No imports from the rest of the project, safe to use anywhere.
"""
from __future__ import annotations
import math
from typing import Sequence

Point3D = Sequence[float]


def dist(a: Point3D, b: Point3D) -> float:
    """Euclidean distance between two 3D points."""
    return math.hypot(a[0] - b[0], a[1] - b[1], a[2] - b[2])


def elapsed(since: float | None, now: float) -> float:
    """
    Seconds between ``since`` and ``now``.
    An unset timestamp counts as infinitely long ago.
    """
    if since is None:
        return math.inf
    return now - since
