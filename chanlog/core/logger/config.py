"""
Channel configuration. Easy to configure via code or env.
"""
from __future__ import annotations

import dataclasses
import logging
import os
from dataclasses import dataclass, field
from typing import Optional, Sequence

from chanlog.core.logger.levels import Driver, Level

DEFAULT_RETENTION_DAYS = 7


@dataclass(frozen=True)
class ChannelConfig:
    """
    Configuration for one named channel.

    Build explicitly or with ChannelConfig.from_env(). Values are validated
    and coerced on construction; the record never changes afterwards.
    """

    # Filesystem path of the log file (directories are created on build)
    path: str
    # SINGLE: one append-mode file. DAILY: midnight-rotated file set
    driver: Driver = Driver.SINGLE
    # Minimum severity written by the channel
    level: Level = Level.INFO
    # Rotated files kept by the DAILY driver
    retention_days: int = DEFAULT_RETENTION_DAYS
    # Overrides the registry's default formatter when set
    formatter: Optional[logging.Formatter] = None
    # Adds func/file to emitted records
    report_caller: bool = False
    # Extra handlers receiving every record at or above level, in order
    hooks: Sequence[logging.Handler] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not isinstance(self.path, str) or not self.path.strip():
            raise ValueError("path must be a non-empty string")
        object.__setattr__(self, "driver", Driver.parse(self.driver))
        object.__setattr__(self, "level", Level.parse(self.level))
        if not isinstance(self.retention_days, int) or self.retention_days < 0:
            raise ValueError(
                f"retention_days must be a non-negative integer, got {self.retention_days!r}"
            )
        object.__setattr__(self, "hooks", tuple(self.hooks or ()))

    @classmethod
    def from_env(cls, prefix: str = "LOG", **overrides: object) -> "ChannelConfig":
        """
        Build a channel config from environment variables.

        Env (with the default prefix):
            LOG_PATH           – required
            LOG_DRIVER         – single | daily (default single)
            LOG_LEVEL          – panic … trace (default info)
            LOG_DAYS           – retention for daily (default 7)
            LOG_REPORT_CALLER  – "1" / "true" / "yes" → True

        Overrides (keyword args) take precedence over env.
        """
        def _env(name: str, default: str = "") -> str:
            return os.environ.get(f"{prefix}_{name}", default).strip()

        path = overrides.pop("path", None) or _env("PATH")
        if not path:
            raise ValueError(f"{prefix}_PATH is required and must be non-empty")
        values: dict[str, object] = {
            "driver": _env("DRIVER", "single"),
            "level": _env("LEVEL", "info"),
            "retention_days": int(_env("DAYS", str(DEFAULT_RETENTION_DAYS))),
            "report_caller": _env("REPORT_CALLER").lower() in ("1", "true", "yes"),
        }
        values.update(overrides)
        return cls(path=str(path), **values)

    def with_overrides(self, **changes: object) -> "ChannelConfig":
        """Return a new config with the given fields replaced."""
        return dataclasses.replace(self, **changes)
