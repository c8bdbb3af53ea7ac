"""
Named logging channels: one file (or daily file set), level and formatter each.

Usage:
    from chanlog.core.logger import ChannelConfig, Driver, Level, configure, channel

    # Configure once at startup (or configure() to read LOG_* from env)
    configure({
        "default": ChannelConfig(path="logs/app.log", level=Level.DEBUG),
        "gin": ChannelConfig(path="logs/gin.log", driver=Driver.DAILY, retention_days=30),
    })

    channel("gin").info("served %s", "/health")
    channel("default").with_fields(user="ana").warning("quota low")
    logging.info("plain stdlib calls land in the default channel too")

    # Isolated registries (tests, embedding)
    registry = LoggingRegistry({"default": ChannelConfig(path="/tmp/x.log")})
    registry.load_all()
"""
from chanlog.core.logger.config import ChannelConfig
from chanlog.core.logger.formatters import JsonFormatter, LocalTimeFormatter, default_formatter
from chanlog.core.logger.hooks import CallbackHook, DailyRotationHook, Hook
from chanlog.core.logger.levels import Driver, Level
from chanlog.core.logger.loggers import ChannelLogger, FieldsAdapter, log_fields
from chanlog.core.logger.registry import DEFAULT_CHANNEL, LoggingRegistry
from chanlog.core.logger.setup import (
    channel,
    close,
    configure,
    default,
    get_registry,
    reload,
)
from chanlog.core.logger.tracker import ResourceTracker

__all__ = [
    "ChannelConfig",
    "ChannelLogger",
    "FieldsAdapter",
    "log_fields",
    "Driver",
    "Level",
    "JsonFormatter",
    "LocalTimeFormatter",
    "default_formatter",
    "Hook",
    "CallbackHook",
    "DailyRotationHook",
    "ResourceTracker",
    "DEFAULT_CHANNEL",
    "LoggingRegistry",
    "configure",
    "get_registry",
    "channel",
    "default",
    "reload",
    "close",
]
