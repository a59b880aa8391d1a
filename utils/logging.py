"""
Logging helpers shared by the app and the core pipeline.

Core modules call ``logging.getLogger(__name__)`` and the app uses
``get_logger(__name__)``; the host decides
where output goes by calling ``setup_logging`` once at start-up.
"""
from __future__ import annotations
import logging
from typing import Optional, Union

_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
_DATE_FORMAT = "%H:%M:%S"


def setup_logging(level: Union[str, int] = "INFO") -> logging.Logger:
    """Configure the root handler and return the application logger."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {level}")
    logging.basicConfig(level=level, format=_FORMAT, datefmt=_DATE_FORMAT, force=True)
    return logging.getLogger("handshape")


def get_logger(name: Optional[str] = None) -> logging.Logger:
    return logging.getLogger(name if name else "handshape")
