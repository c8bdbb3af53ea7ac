"""
Severity levels and output drivers.

Levels follow the seven-level scheme (panic … trace). A lower value is more
severe and filters more. Each level maps onto a stdlib logging number so
channels can be driven by plain logging.Logger machinery.
"""
from __future__ import annotations

import logging
from enum import IntEnum
from typing import Union

TRACE = 5
PANIC = 60

logging.addLevelName(TRACE, "TRACE")
logging.addLevelName(PANIC, "PANIC")


class Level(IntEnum):
    """Channel severity. PANIC is the most restrictive filter, TRACE the least."""
    PANIC = 0
    FATAL = 1
    ERROR = 2
    WARN = 3
    INFO = 4
    DEBUG = 5
    TRACE = 6

    @property
    def label(self) -> str:
        """Lowercase name written into records ("warning" for WARN)."""
        return "warning" if self is Level.WARN else self.name.lower()

    def to_logging(self) -> int:
        return _TO_LOGGING[self]

    @classmethod
    def from_logging(cls, levelno: int) -> "Level":
        """Nearest Level whose stdlib number is at or below levelno."""
        for level in sorted(cls, key=lambda lv: lv.to_logging(), reverse=True):
            if levelno >= level.to_logging():
                return level
        return cls.TRACE

    @classmethod
    def parse(cls, value: Union["Level", int, str]) -> "Level":
        if isinstance(value, cls):
            return value
        if isinstance(value, int):
            return cls(value)
        key = str(value).strip().upper()
        if key == "WARNING":
            key = "WARN"
        try:
            return cls[key]
        except KeyError:
            raise ValueError(
                f"Unknown level {value!r}; expected one of {[lv.label for lv in cls]}"
            ) from None


_TO_LOGGING = {
    Level.PANIC: PANIC,
    Level.FATAL: logging.CRITICAL,
    Level.ERROR: logging.ERROR,
    Level.WARN: logging.WARNING,
    Level.INFO: logging.INFO,
    Level.DEBUG: logging.DEBUG,
    Level.TRACE: TRACE,
}


class Driver(IntEnum):
    """Output strategy of a channel."""
    SINGLE = 0
    DAILY = 1

    @classmethod
    def parse(cls, value: Union["Driver", int, str]) -> "Driver":
        if isinstance(value, cls):
            return value
        if isinstance(value, int):
            return cls(value)
        try:
            return cls[str(value).strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown driver {value!r}; expected 'single' or 'daily'") from None
