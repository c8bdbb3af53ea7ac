"""
Formatters: compact JSON per line, and a decorator that stamps local time.
"""
from __future__ import annotations

import json
import logging
import traceback
from datetime import datetime, timezone
from typing import Any

from chanlog.core.logger.levels import Level

# Attributes every LogRecord carries; anything else set through `extra` is a field.
_RECORD_ATTRS = frozenset(
    logging.makeLogRecord({}).__dict__.keys()
) | {"message", "asctime", "event_time", "fields", "report_caller", "taskName"}


class JsonFormatter(logging.Formatter):
    """
    Format log records as one JSON object per line (JSON Lines).

    Fields bound with ChannelLogger.with_fields() or passed through `extra`
    sit at the top level next to time/level/msg; a field named like one of
    those keys is written as "fields.<name>". Timestamps are UTC unless the
    record carries an `event_time` (see LocalTimeFormatter).
    """

    def __init__(
        self,
        *,
        include_fields: bool = True,
        timestamp_key: str = "time",
        level_key: str = "level",
        message_key: str = "msg",
    ) -> None:
        super().__init__()
        self.include_fields = include_fields
        self.timestamp_key = timestamp_key
        self.level_key = level_key
        self.message_key = message_key

    def format(self, record: logging.LogRecord) -> str:
        log_dict: dict[str, Any] = {}
        if self.include_fields:
            for key, value in _record_fields(record).items():
                if key in (self.timestamp_key, self.level_key, self.message_key,
                           "func", "file", "exception"):
                    key = f"fields.{key}"
                log_dict[key] = value
        log_dict[self.timestamp_key] = _record_time(record).isoformat()
        log_dict[self.level_key] = Level.from_logging(record.levelno).label
        log_dict[self.message_key] = record.getMessage()
        if getattr(record, "report_caller", False):
            log_dict["func"] = f"{record.module}.{record.funcName}"
            log_dict["file"] = f"{record.pathname}:{record.lineno}"
        if record.exc_info:
            log_dict["exception"] = "".join(
                traceback.format_exception(*record.exc_info)
            ).strip()
        return json.dumps(log_dict, default=str, ensure_ascii=False)


def _record_time(record: logging.LogRecord) -> datetime:
    stamped = getattr(record, "event_time", None)
    if isinstance(stamped, datetime):
        return stamped
    return datetime.fromtimestamp(record.created, tz=timezone.utc)


def _record_fields(record: logging.LogRecord) -> dict[str, Any]:
    fields = {
        key: value
        for key, value in record.__dict__.items()
        if key not in _RECORD_ATTRS and not key.startswith("_")
    }
    fields.update(getattr(record, "fields", None) or {})
    return fields


class LocalTimeFormatter(logging.Formatter):
    """Wraps another formatter and normalizes the record timestamp to local time."""

    def __init__(self, inner: logging.Formatter) -> None:
        super().__init__()
        self.inner = inner

    def format(self, record: logging.LogRecord) -> str:
        # copy: the same record may reach handlers with other formatters
        record = logging.makeLogRecord(record.__dict__)
        record.event_time = datetime.fromtimestamp(record.created).astimezone()
        return self.inner.format(record)


def default_formatter() -> logging.Formatter:
    """Baseline channel formatter: compact local-time JSON."""
    return LocalTimeFormatter(JsonFormatter())
