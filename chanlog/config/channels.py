"""
chanlog.config.channels – channel tables from mappings or env.

A mapping is whatever the application already parsed (JSON, YAML, TOML,
settings objects): channel name → {driver, path, level, days, report_caller}.
"""
from __future__ import annotations

import os
from typing import Any, Mapping

from pydantic import BaseModel, Field, ValidationError, field_validator

from chanlog.core.exceptions import ConfigurationError
from chanlog.core.logger.config import DEFAULT_RETENTION_DAYS, ChannelConfig
from chanlog.core.logger.levels import Driver, Level
from chanlog.core.logger.registry import DEFAULT_CHANNEL


class ChannelSpec(BaseModel):
    """Plain-data form of a ChannelConfig (no formatter or hook objects)."""

    path: str = Field(..., min_length=1)
    driver: Driver = Driver.SINGLE
    level: Level = Level.INFO
    days: int = Field(DEFAULT_RETENTION_DAYS, ge=0)
    report_caller: bool = False

    @field_validator("driver", mode="before")
    @classmethod
    def _parse_driver(cls, value: Any) -> Driver:
        return Driver.parse(value)

    @field_validator("level", mode="before")
    @classmethod
    def _parse_level(cls, value: Any) -> Level:
        return Level.parse(value)

    def to_config(self, **extra: Any) -> ChannelConfig:
        """Build the ChannelConfig; `extra` supplies formatter/hooks."""
        return ChannelConfig(
            path=self.path,
            driver=self.driver,
            level=self.level,
            retention_days=self.days,
            report_caller=self.report_caller,
            **extra,
        )


def load_channel_configs(data: Mapping[str, Mapping[str, Any]]) -> dict[str, ChannelConfig]:
    """
    Validate a channel table.

    Raises:
        ConfigurationError naming the first invalid channel; the pydantic
        error list is in details["errors"].
    """
    configs: dict[str, ChannelConfig] = {}
    for name, raw in data.items():
        try:
            spec = ChannelSpec.model_validate(raw)
        except ValidationError as exc:
            raise ConfigurationError(
                f"Invalid channel {name!r}: {exc.error_count()} error(s)",
                details={"channel": name, "errors": exc.errors(include_url=False)},
                cause=exc,
            ) from exc
        configs[name] = spec.to_config()
    return configs


def load_channels_from_env(prefix: str = "LOG") -> dict[str, ChannelConfig]:
    """
    Default channel from env (see ChannelConfig.from_env).

    Returns an empty table when {prefix}_PATH is unset, which leaves the
    ambient logger unconfigured.
    """
    if not os.environ.get(f"{prefix}_PATH", "").strip():
        return {}
    try:
        return {DEFAULT_CHANNEL: ChannelConfig.from_env(prefix)}
    except ValueError as exc:
        raise ConfigurationError(
            f"Invalid {prefix}_* environment: {exc}",
            details={"prefix": prefix},
            cause=exc,
        ) from exc
