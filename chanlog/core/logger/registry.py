"""
LoggingRegistry: named channels, built lazily from configuration and cached.

Usage::

    registry = LoggingRegistry({
        "default": ChannelConfig(path="logs/app.log", level=Level.DEBUG),
        "gin": ChannelConfig(path="logs/gin.log", driver=Driver.DAILY, retention_days=30),
    })
    registry.load_all()
    registry.resolve("gin").info("request served")
    registry.resolve("typo").info("goes to the default channel")

    registry.configs["default"] = ChannelConfig(path="logs/other.log")
    registry.reload()
"""
from __future__ import annotations

import logging
import threading
from typing import Mapping, Optional

from chanlog.core.logger.config import ChannelConfig
from chanlog.core.logger.factory import build_channel
from chanlog.core.logger.formatters import default_formatter
from chanlog.core.logger.loggers import ChannelLogger
from chanlog.core.logger.tracker import ResourceTracker

logger = logging.getLogger(__name__)

DEFAULT_CHANNEL = "default"

# Loggers of this package; their diagnostics never reach a bound channel.
_INTERNAL_LOGGERS = ("chanlog.core.", "chanlog.config.")


class AmbientBindingFilter(logging.Filter):
    """
    Handler filter installed while a channel handler is bound to the ambient
    logger. Drops records from chanlog's own modules and carries the default
    channel's caller flag onto records made by plain stdlib loggers.
    """

    def __init__(self, report_caller: bool = False) -> None:
        super().__init__()
        self.report_caller = report_caller

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith(_INTERNAL_LOGGERS):
            return False
        if self.report_caller:
            record.report_caller = True
        return True


class LoggingRegistry:
    """
    Process-wide channel cache.

    `configs` may be edited at any time; already built channels keep their
    old settings until reload(). The ambient logger (the stdlib root logger
    unless another one is given) takes over the default channel's level and
    handlers on every load_all(), so plain logging.info() calls land in the
    default channel's output.

    Cache, tracked handles and the ambient binding are guarded by one lock.
    Loggers handed out before a reload keep pointing at closed outputs.
    """

    def __init__(
        self,
        configs: Optional[Mapping[str, ChannelConfig]] = None,
        *,
        default_channel: str = DEFAULT_CHANNEL,
        formatter: Optional[logging.Formatter] = None,
        ambient: Optional[logging.Logger] = None,
    ) -> None:
        self.configs: dict[str, ChannelConfig] = dict(configs or {})
        self.default_channel = default_channel
        self.default_formatter = formatter if formatter is not None else default_formatter()
        self.ambient = ambient if ambient is not None else logging.getLogger()
        self._channels: dict[str, ChannelLogger] = {}
        self._tracker = ResourceTracker()
        self._bound_handlers: list[logging.Handler] = []
        self._binding_filter: Optional[AmbientBindingFilter] = None
        self._lock = threading.RLock()

    def resolve(self, name: str) -> logging.Logger:
        """
        Return the logger for `name`.

        Cached instance first, then a fresh build from `configs`, then the
        default channel, then the ambient logger. Never raises for unknown names.
        """
        with self._lock:
            cached = self._channels.get(name)
            if cached is not None:
                return cached
            config = self.configs.get(name)
            if config is not None:
                return self._build(name, config)
            if name != self.default_channel and self.default_channel in self.configs:
                return self.resolve(self.default_channel)
            return self.ambient

    def default(self) -> logging.Logger:
        return self.resolve(self.default_channel)

    def load_all(self) -> None:
        """Build the default channel and every configured channel not cached yet."""
        with self._lock:
            self.resolve_default()
            for name, config in self.configs.items():
                if name not in self._channels:
                    self._build(name, config)
            logger.debug("LoggingRegistry: %d channel(s) loaded", len(self._channels))

    def resolve_default(self) -> Optional[ChannelLogger]:
        """
        Bind the ambient logger to the default channel.

        Returns None and leaves the ambient logger alone when the default
        channel is not configured.
        """
        with self._lock:
            if self.default_channel not in self.configs:
                return None
            channel = self.resolve(self.default_channel)
            self._unbind_ambient()
            self.ambient.setLevel(channel.level)
            self._binding_filter = AmbientBindingFilter(channel.report_caller)
            for handler in channel.handlers:
                handler.addFilter(self._binding_filter)
                self.ambient.addHandler(handler)
                self._bound_handlers.append(handler)
            return channel

    def reload(self) -> None:
        """Drop every cached channel, close their outputs, and load again."""
        with self._lock:
            self._channels = {}
            self._unbind_ambient()
            closed = self._tracker.close_all()
            logger.debug("LoggingRegistry: reload closed %d handle(s)", closed)
            self.load_all()

    def shutdown(self) -> None:
        """Close every tracked output. Nothing is rebuilt."""
        with self._lock:
            self._unbind_ambient()
            self._tracker.close_all()

    @property
    def channels(self) -> dict[str, ChannelLogger]:
        with self._lock:
            return dict(self._channels)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._channels

    def _build(self, name: str, config: ChannelConfig) -> ChannelLogger:
        channel = build_channel(name, config, self._tracker, self.default_formatter)
        self._channels[name] = channel
        return channel

    def _unbind_ambient(self) -> None:
        for handler in self._bound_handlers:
            self.ambient.removeHandler(handler)
            if self._binding_filter is not None:
                handler.removeFilter(self._binding_filter)
        self._bound_handlers = []
        self._binding_filter = None
