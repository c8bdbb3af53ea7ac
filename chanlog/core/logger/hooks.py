"""
Hooks: handlers that observe every record a channel lets through.

Any logging.Handler can be passed in ChannelConfig.hooks. Hook is the small
base for observers that do not write to a stream (shipping, counting, alerting).
"""
from __future__ import annotations

import logging
import os
from abc import ABC, abstractmethod
from logging.handlers import TimedRotatingFileHandler
from typing import Callable, Iterable, Optional

from chanlog.core.exceptions import ChannelBuildError
from chanlog.core.logger.levels import Level


class Hook(logging.Handler, ABC):
    """Handler that calls fire() for records whose Level is in `levels` (all when None)."""

    def __init__(self, levels: Optional[Iterable[Level]] = None) -> None:
        super().__init__()
        self.levels = frozenset(Level.parse(lv) for lv in levels) if levels is not None else None

    def emit(self, record: logging.LogRecord) -> None:
        if self.levels is not None and Level.from_logging(record.levelno) not in self.levels:
            return
        try:
            self.fire(record)
        except Exception:
            self.handleError(record)

    @abstractmethod
    def fire(self, record: logging.LogRecord) -> None:
        """Side effect for one record."""


class CallbackHook(Hook):
    """Hook calling a plain function with each record."""

    def __init__(
        self,
        callback: Callable[[logging.LogRecord], None],
        levels: Optional[Iterable[Level]] = None,
    ) -> None:
        super().__init__(levels)
        self.callback = callback

    def fire(self, record: logging.LogRecord) -> None:
        self.callback(record)


def ensure_parent_dir(path: str) -> str:
    """Create the parent directory of path. Raises ChannelBuildError on failure."""
    directory = os.path.dirname(os.path.abspath(path))
    try:
        os.makedirs(directory, mode=0o777, exist_ok=True)
    except OSError as exc:
        raise ChannelBuildError(
            f"Create dir {directory} failed: {exc}",
            details={"path": directory},
            cause=exc,
        ) from exc
    return directory


class DailyRotationHook(TimedRotatingFileHandler):
    """
    Daily-rotated file output for DAILY channels.

    Rotates at midnight (local time) and keeps `retention_days` old files.
    The hook owns its file: closing the hook closes the file.
    """

    def __init__(self, path: str, retention_days: int, formatter: logging.Formatter) -> None:
        ensure_parent_dir(path)
        try:
            super().__init__(
                path,
                when="midnight",
                backupCount=retention_days,
                encoding="utf-8",
            )
        except OSError as exc:
            raise ChannelBuildError(
                f"Create file {path} failed: {exc}",
                details={"path": path},
                cause=exc,
            ) from exc
        self.setFormatter(formatter)
