"""
Channel factory: ChannelConfig → fully wired ChannelLogger.
"""
from __future__ import annotations

import logging
from typing import IO

from chanlog.core.exceptions import ChannelBuildError
from chanlog.core.logger.config import ChannelConfig
from chanlog.core.logger.hooks import DailyRotationHook, ensure_parent_dir
from chanlog.core.logger.levels import Driver
from chanlog.core.logger.loggers import ChannelLogger
from chanlog.core.logger.tracker import ResourceTracker

logger = logging.getLogger(__name__)


def open_log_file(path: str) -> IO[str]:
    """Open path for append + read/write, creating it and its directory (0o666 / 0o777 under umask)."""
    ensure_parent_dir(path)
    try:
        return open(path, "a+", encoding="utf-8")
    except OSError as exc:
        raise ChannelBuildError(
            f"Create file {path} failed: {exc}",
            details={"path": path},
            cause=exc,
        ) from exc


def build_channel(
    name: str,
    config: ChannelConfig,
    tracker: ResourceTracker,
    default_formatter: logging.Formatter,
) -> ChannelLogger:
    """
    Build the logger for one channel.

    Every file the channel writes to is registered with `tracker`. Raises
    ChannelBuildError when the output directory or file cannot be created.
    """
    formatter = config.formatter if config.formatter is not None else default_formatter

    channel = ChannelLogger(name)
    channel.setLevel(config.level.to_logging())
    channel.report_caller = config.report_caller
    for hook in config.hooks:
        channel.addHandler(hook)

    if config.driver is Driver.DAILY:
        handler: logging.Handler = tracker.track(
            DailyRotationHook(config.path, config.retention_days, formatter)
        )
    else:
        stream = tracker.track(open_log_file(config.path))
        handler = logging.StreamHandler(stream)
        handler.setFormatter(formatter)
        channel.output = stream
    channel.addHandler(handler)

    logger.debug(
        "build_channel: %s (driver=%s, level=%s, path=%s)",
        name, config.driver.name, config.level.label, config.path,
    )
    return channel
