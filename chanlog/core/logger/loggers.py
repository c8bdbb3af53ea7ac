"""
ChannelLogger: the logger instance a channel hands out.
"""
from __future__ import annotations

import logging
from typing import IO, Any, Mapping, MutableMapping, Optional

from chanlog.core.exceptions import PanicError
from chanlog.core.logger.levels import PANIC, TRACE, Level


def log_fields(fields: Optional[Mapping[str, Any]]) -> dict[str, Any]:
    """Copy an optional mapping into a fresh fields dict."""
    return dict(fields) if fields else {}


def _render(msg: object, args: tuple[Any, ...]) -> str:
    # LogRecord unwraps a lone mapping argument before %-formatting.
    return logging.LogRecord("", PANIC, "", 0, msg, args, None).getMessage()


class ChannelLogger(logging.Logger):
    """
    logging.Logger with the panic … trace level set.

    Instances are created directly, outside logging.getLogger(), so each
    build yields a new object and nothing leaks into the stdlib logger tree.
    """

    def __init__(self, name: str, level: int = logging.NOTSET) -> None:
        super().__init__(name, level)
        self.propagate = False
        self.report_caller = False
        self.output: Optional[IO[str]] = None

    @property
    def channel_level(self) -> Level:
        return Level.from_logging(self.getEffectiveLevel())

    def makeRecord(self, *args: Any, **kwargs: Any) -> logging.LogRecord:
        record = super().makeRecord(*args, **kwargs)
        record.report_caller = self.report_caller
        return record

    def trace(self, msg: object, *args: Any, **kwargs: Any) -> None:
        if self.isEnabledFor(TRACE):
            kwargs.setdefault("stacklevel", 2)
            self._log(TRACE, msg, args, **kwargs)

    def panic(self, msg: object, *args: Any, **kwargs: Any) -> None:
        """Log at PANIC, then raise PanicError."""
        if self.isEnabledFor(PANIC):
            kwargs.setdefault("stacklevel", 2)
            self._log(PANIC, msg, args, **kwargs)
        raise PanicError(_render(msg, args))

    def fatal(self, msg: object, *args: Any, **kwargs: Any) -> None:
        """Log at FATAL, then exit with status 1."""
        if self.isEnabledFor(logging.CRITICAL):
            kwargs.setdefault("stacklevel", 2)
            self._log(logging.CRITICAL, msg, args, **kwargs)
        raise SystemExit(1)

    def with_fields(self, **fields: Any) -> "FieldsAdapter":
        return FieldsAdapter(self, fields)


class FieldsAdapter(logging.LoggerAdapter):
    """Adapter attaching a fixed set of fields to every record."""

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> tuple[Any, MutableMapping[str, Any]]:
        extra = dict(kwargs.get("extra") or {})
        extra["fields"] = {**self.extra, **log_fields(extra.get("fields"))}
        kwargs["extra"] = extra
        return msg, kwargs

    def with_fields(self, **fields: Any) -> "FieldsAdapter":
        return FieldsAdapter(self.logger, {**self.extra, **fields})

    def trace(self, msg: object, *args: Any, **kwargs: Any) -> None:
        kwargs.setdefault("stacklevel", 2)
        self.log(TRACE, msg, *args, **kwargs)
