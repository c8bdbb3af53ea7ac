"""
Process-wide registry: configure once at startup, then look channels up by name.
"""
from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from chanlog.core.logger.config import ChannelConfig
from chanlog.core.logger.registry import LoggingRegistry

# Module-level registry; replaced by configure()
_registry: Optional[LoggingRegistry] = None


def configure(
    configs: Optional[Mapping[str, ChannelConfig]] = None,
    **registry_options: Any,
) -> LoggingRegistry:
    """
    Build the process registry and load every channel.
    If configs is None, uses load_channels_from_env().
    A previously configured registry is shut down first.
    """
    global _registry
    if configs is None:
        from chanlog.config.channels import load_channels_from_env

        configs = load_channels_from_env()
    if _registry is not None:
        _registry.shutdown()
    registry = LoggingRegistry(configs, **registry_options)
    registry.load_all()
    _registry = registry
    return registry


def get_registry() -> LoggingRegistry:
    """Return the process registry, configuring it from env on first use."""
    if _registry is None:
        return configure()
    return _registry


def channel(name: str) -> logging.Logger:
    return get_registry().resolve(name)


def default() -> logging.Logger:
    return get_registry().default()


def reload() -> None:
    get_registry().reload()


def close() -> None:
    """Close every output of the process registry (call at exit)."""
    if _registry is not None:
        _registry.shutdown()
