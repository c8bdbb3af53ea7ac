"""
Base exception type for chanlog.

Every error raised by the package derives from ChanlogError and carries a
machine-readable code, optional details and the chained cause.
"""
from __future__ import annotations

import traceback
from typing import Any, Optional


class ChanlogError(Exception):
    """
    Base exception for all chanlog errors.

    Attributes:
        message: Human-readable error description.
        code: Machine-readable slug (defaults to the class default_code).
        details: Optional dict for extra context (e.g. the failing path).
        cause: Optional chained exception.
    """

    default_code: str = "ERROR"

    def __init__(
        self,
        message: str,
        *,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code if code is not None else getattr(
            self.__class__, "default_code", self.__class__.__name__
        )
        self.details: dict[str, Any] = details or {}
        self.cause = cause

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, code={self.code!r})"

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> dict[str, Any]:
        """Serialize for logging."""
        out: dict[str, Any] = {
            "message": self.message,
            "code": self.code,
        }
        if self.details:
            out["details"] = self.details
        if self.cause is not None:
            out["cause"] = str(self.cause)
            out["cause_traceback"] = traceback.format_exception(
                type(self.cause), self.cause, self.cause.__traceback__
            )
        return out
