"""Severity levels — closed enumeration and mapping from stdlib logging levels."""

import logging
from enum import Enum


class Level(Enum):
    TRACE = "trace"
    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"
    FATAL = "fatal"


# Lower bound (inclusive) of each bucket, highest first.
_THRESHOLDS = [
    (logging.CRITICAL, Level.FATAL),
    (logging.ERROR, Level.ERROR),
    (logging.WARNING, Level.WARN),
    (logging.INFO, Level.INFO),
    (logging.DEBUG, Level.DEBUG),
]


def from_levelno(levelno: int) -> Level:
    """Bucket a stdlib level number (custom levels included) into a Level."""
    for threshold, level in _THRESHOLDS:
        if levelno >= threshold:
            return level
    return Level.TRACE


def level_name(levelno: int) -> str:
    """Lower-case wire name for a level number.

    TRACE never appears on the wire; anything below INFO reports as debug.
    """
    level = from_levelno(levelno)
    if level is Level.TRACE:
        return Level.DEBUG.value
    return level.value


def is_error(levelno: int) -> bool:
    return levelno >= logging.ERROR
