"""
main.py: Application entry point.

    Camera → HandTracker → HandShapeRecognizer → ShapeEvent → log

Usage:
    handshape                    # default webcam, default thresholds
    handshape --camera 1 --debug
    handshape --confirmation 3 --cooldown 0.8
"""
from __future__ import annotations
import argparse
import dataclasses
from typing import List, Optional

from app.config import AppConfig, default_config
from core.recognizer import HandShapeRecognizer
from domain.models import ShapeEvent
from utils.logging import get_logger, setup_logging

logger = get_logger(__name__)


def _log_event(event: ShapeEvent) -> None:
    logger.info("[EVENT] %s: %s", event.shape.value, event.text)


def run(config: AppConfig = default_config) -> None:
    # Imported here so the recognizer stays usable without OpenCV/MediaPipe.
    from core.camera import Camera
    from core.hand_tracker import HandTracker

    print("=" * 55)
    print("  HAND SHAPE RECOGNITION (cued speech)")
    print("=" * 55)
    print(f"  Camera  : {config.camera_device} @ {config.fps_limit} fps")
    print(f"  Confirm : {config.confirmation_threshold} frames")
    print(f"  Cooldown: {config.detection_cooldown:.2f}s  Reset: {config.shape_reset_time:.2f}s")
    print("  Press Ctrl+C to quit")
    print("=" * 55 + "\n")

    recognizer = HandShapeRecognizer.from_config(config)
    recognizer.subscribe(_log_event)

    tracker_kwargs = dict(
        max_num_hands=config.max_num_hands,
        min_detection_confidence=config.min_detection_confidence,
        min_tracking_confidence=config.min_tracking_confidence,
    )

    prev_detected = False
    with Camera(config.camera_device, config.fps_limit, mirror=config.mirror) as camera, \
            HandTracker(**tracker_kwargs) as tracker:
        try:
            while True:
                frame = camera.read()
                if frame is None:
                    logger.warning("Camera returned no frame, stopping")
                    break

                recognizer.process_hands(tracker.process(frame))

                if recognizer.hands_detected != prev_detected:
                    prev_detected = recognizer.hands_detected
                    logger.info("[TRACKING] hands detected: %s (%d)",
                                prev_detected, recognizer.hand_count)
        except KeyboardInterrupt:
            pass

    print("\n✓ Application closed cleanly")


def build_parser() -> argparse.ArgumentParser:
    d = default_config
    parser = argparse.ArgumentParser(prog="handshape", description="Real-time cued-speech hand-shape recognition")
    parser.add_argument("--camera", type=int, default=d.camera_device, help="camera device index")
    parser.add_argument("--fps", type=int, default=d.fps_limit, help="maximum frames per second")
    parser.add_argument("--no-mirror", action="store_true", help="do not flip frames horizontally")
    parser.add_argument("--finger-ratio", type=float, default=d.finger_extension_ratio)
    parser.add_argument("--thumb-threshold", type=float, default=d.thumb_extension_threshold)
    parser.add_argument("--separation-threshold", type=float, default=d.index_separation_threshold)
    parser.add_argument("--confirmation", type=int, default=d.confirmation_threshold,
                        help="consecutive frames needed to confirm a shape")
    parser.add_argument("--cooldown", type=float, default=d.detection_cooldown,
                        help="seconds between two emitted shapes")
    parser.add_argument("--reset", type=float, default=d.shape_reset_time,
                        help="seconds before the same shape may be emitted again")
    parser.add_argument("--debug", action="store_true", help="log every state change")
    return parser


def config_from_args(args: argparse.Namespace, base: AppConfig = default_config) -> AppConfig:
    return dataclasses.replace(
        base,
        camera_device=args.camera,
        fps_limit=args.fps,
        mirror=not args.no_mirror,
        finger_extension_ratio=args.finger_ratio,
        thumb_extension_threshold=args.thumb_threshold,
        index_separation_threshold=args.separation_threshold,
        confirmation_threshold=args.confirmation,
        detection_cooldown=args.cooldown,
        shape_reset_time=args.reset,
        log_level="DEBUG" if args.debug else base.log_level,
    )


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    config = config_from_args(args)
    setup_logging(config.log_level)
    run(config)


if __name__ == "__main__":
    main()
