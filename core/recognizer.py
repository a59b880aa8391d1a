"""
HandShapeRecognizer: the single entry point for hand-shape recognition.

    landmarks → FingerStateExtractor → classify() → ShapeStabilizer
              → ShapeEvent → subscribers

One instance owns all cross-frame state; there is no module-level state, so
several recognizers can run side by side. Calls are expected from a single
thread, once per frame.
"""
from __future__ import annotations
import logging
import time
from typing import TYPE_CHECKING, Callable, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from core.finger_state import FingerStateExtractor
from core.shape_classifier import ShapeClassifier
from core.state_stabilizer import ShapeStabilizer
from domain.enums import HandShape
from domain.models import LandmarkList, ShapeEvent, StabilizerState, SymbolMapping
from utils.constants import (
    CONFIRMATION_THRESHOLD,
    DEFAULT_SYMBOLS,
    DETECTION_COOLDOWN,
    FINGER_EXTENSION_RATIO,
    INDEX_SEPARATION_THRESHOLD,
    SHAPE_RESET_TIME,
    SYMBOL_SEPARATOR,
    THUMB_EXTENSION_THRESHOLD,
)

if TYPE_CHECKING:
    from app.config import AppConfig

logger = logging.getLogger(__name__)

ShapeCallback = Callable[[ShapeEvent], None]


def default_symbol_mapping() -> SymbolMapping:
    return {HandShape(name): tuple(symbols) for name, symbols in DEFAULT_SYMBOLS.items()}


def _as_shape(shape: Union[HandShape, str]) -> Optional[HandShape]:
    try:
        return HandShape(shape)
    except ValueError:
        return None


class HandShapeRecognizer:
    """
    Classifies the first detected hand of each frame and emits a
    ``ShapeEvent`` once per confirmed shape change.

    Usage
    -----
    recognizer = HandShapeRecognizer()
    recognizer.subscribe(lambda event: print(event.shape, event.text))
    for hands in landmark_source:
        recognizer.process_hands(hands)

    Parameters
    ----------
    finger_extension_ratio, thumb_extension_threshold, index_separation_threshold
        Forwarded to ``FingerStateExtractor``.
    confirmation_threshold, detection_cooldown, shape_reset_time
        Forwarded to ``ShapeStabilizer``.
    symbols : mapping, optional
        Initial shape → symbols table. Defaults to the cued-speech syllables.
        Only keys present here can later be replaced with
        ``set_symbol_mapping``.
    clock : callable
        Time source used when ``process_frame`` gets no explicit ``now``.
    """

    def __init__(
        self,
        finger_extension_ratio: float = FINGER_EXTENSION_RATIO,
        thumb_extension_threshold: float = THUMB_EXTENSION_THRESHOLD,
        index_separation_threshold: float = INDEX_SEPARATION_THRESHOLD,
        confirmation_threshold: int = CONFIRMATION_THRESHOLD,
        detection_cooldown: float = DETECTION_COOLDOWN,
        shape_reset_time: float = SHAPE_RESET_TIME,
        symbols: Optional[Mapping[HandShape, Sequence[str]]] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._classifier = ShapeClassifier(
            FingerStateExtractor(
                finger_extension_ratio=finger_extension_ratio,
                thumb_extension_threshold=thumb_extension_threshold,
                index_separation_threshold=index_separation_threshold,
            )
        )
        self._stabilizer = ShapeStabilizer(
            confirmation_threshold=confirmation_threshold,
            detection_cooldown=detection_cooldown,
            shape_reset_time=shape_reset_time,
        )
        if symbols is None:
            self._symbols = default_symbol_mapping()
        else:
            self._symbols = {}
            for key, values in symbols.items():
                shape = _as_shape(key)
                if shape is None:
                    logger.debug("Ignoring symbol mapping for unknown shape %r", key)
                    continue
                self._symbols[shape] = tuple(values)
        self._clock = clock
        self._subscribers: List[ShapeCallback] = []

        self._hands_detected = False
        self._hand_count = 0

    @classmethod
    def from_config(cls, config: "AppConfig", **kwargs) -> "HandShapeRecognizer":
        return cls(
            finger_extension_ratio=config.finger_extension_ratio,
            thumb_extension_threshold=config.thumb_extension_threshold,
            index_separation_threshold=config.index_separation_threshold,
            confirmation_threshold=config.confirmation_threshold,
            detection_cooldown=config.detection_cooldown,
            shape_reset_time=config.shape_reset_time,
            **kwargs,
        )

    # ---- per-frame entry points ---------------------------------------
    def process_hands(
        self,
        hands: Optional[Sequence[LandmarkList]],
        now: Optional[float] = None,
    ) -> Optional[ShapeEvent]:
        """
        Feed every hand detected this frame. Only the first one is
        classified; the count is kept for ``hands_detected``/``hand_count``.
        ``None`` is treated as an empty frame.
        """
        if hands is None:
            hands = []
        self._hand_count = len(hands)
        self._hands_detected = self._hand_count > 0
        return self.process_frame(hands[0] if self._hands_detected else None, now)

    def process_frame(
        self,
        hand: Optional[LandmarkList],
        now: Optional[float] = None,
    ) -> Optional[ShapeEvent]:
        """
        Advance the recognizer by one frame.

        Returns the emitted event, or None when nothing fired. Missing or
        malformed landmarks are treated as "no shape" and never raise.
        """
        if now is None:
            now = self._clock()

        candidate = self._classifier.predict(hand)
        shape = self._stabilizer.update(candidate, now)
        if shape is None:
            return None

        event = ShapeEvent(shape=shape, symbols=self._symbols_for(shape), timestamp=now)
        logger.info("[SHAPE] Detected: %s -> %s", shape.value, event.text)
        self._emit(event)
        return event

    # ---- subscribers ----------------------------------------------------
    def subscribe(self, callback: ShapeCallback) -> None:
        if callback not in self._subscribers:
            self._subscribers.append(callback)

    def unsubscribe(self, callback: ShapeCallback) -> None:
        if callback in self._subscribers:
            self._subscribers.remove(callback)

    def _emit(self, event: ShapeEvent) -> None:
        for callback in list(self._subscribers):
            try:
                callback(event)
            except Exception:
                logger.exception("Shape subscriber %r failed", callback)

    # ---- queries ----------------------------------------------------------
    def current_shape(self) -> HandShape:
        return self._stabilizer.current

    def current_symbols(self) -> Tuple[str, ...]:
        return self._symbols_for(self._stabilizer.current)

    def current_symbols_text(self, separator: str = SYMBOL_SEPARATOR) -> str:
        return separator.join(self.current_symbols())

    def symbol_mapping(self) -> Dict[HandShape, Tuple[str, ...]]:
        return dict(self._symbols)

    def set_symbol_mapping(self, shape: Union[HandShape, str], symbols: Sequence[str]) -> None:
        """Replace the symbols of an existing shape; unknown keys are ignored."""
        key = _as_shape(shape)
        if key is None or key not in self._symbols:
            logger.debug("Ignoring symbol mapping for unknown shape %r", shape)
            return
        self._symbols[key] = tuple(symbols)

    def _symbols_for(self, shape: HandShape) -> Tuple[str, ...]:
        if shape == HandShape.NONE:
            return ()
        return self._symbols.get(shape, ())

    # ---- tracking status ----------------------------------------------
    @property
    def hands_detected(self) -> bool:
        return self._hands_detected

    @property
    def hand_count(self) -> int:
        return self._hand_count

    @property
    def state(self) -> StabilizerState:
        return self._stabilizer.state

    def reset(self) -> None:
        """Forget all cross-frame state (symbol table and subscribers are kept)."""
        self._stabilizer.reset()
        self._hands_detected = False
        self._hand_count = 0
