"""
Utilities for the hand-shape pipeline
"""

from .constants import *
from .geometry import dist, elapsed

__all__ = [
    'dist',
    'elapsed',
    'FINGER_EXTENSION_RATIO',
    'THUMB_EXTENSION_THRESHOLD',
    'INDEX_SEPARATION_THRESHOLD',
    'CONFIRMATION_THRESHOLD',
    'DETECTION_COOLDOWN',
    'SHAPE_RESET_TIME',
    'DEFAULT_SYMBOLS',
    'SYMBOL_SEPARATOR',
]
