"""
chanlog exception system.

Usage:
    from chanlog.core.exceptions import ChannelBuildError, ConfigurationError

    try:
        registry.load_all()
    except ChannelBuildError as exc:
        sys.exit(f"cannot open logs: {exc} ({exc.details['path']})")
"""
from chanlog.core.exceptions.base import ChanlogError
from chanlog.core.exceptions.errors import (
    ChannelBuildError,
    ConfigurationError,
    PanicError,
)

__all__ = [
    "ChanlogError",
    "ConfigurationError",
    "ChannelBuildError",
    "PanicError",
]
