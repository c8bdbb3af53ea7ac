"""
Built-in exception types.
"""
from __future__ import annotations

from chanlog.core.exceptions.base import ChanlogError


class ConfigurationError(ChanlogError):
    """Invalid or missing channel configuration."""

    default_code = "CONFIGURATION_ERROR"


class ChannelBuildError(ConfigurationError):
    """A channel's output directory or file could not be created.

    Raised while building a channel and never caught inside chanlog:
    a process that cannot write its logs must not keep starting up.
    """

    default_code = "CHANNEL_BUILD_ERROR"


class PanicError(ChanlogError):
    """Raised by ChannelLogger.panic() after the record is written."""

    default_code = "PANIC"
