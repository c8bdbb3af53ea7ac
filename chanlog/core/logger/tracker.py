"""Open output handles owned by a registry, closed together on reload or shutdown."""
from __future__ import annotations

import logging
from typing import Protocol, TypeVar

logger = logging.getLogger(__name__)


class Closeable(Protocol):
    def close(self) -> None: ...


C = TypeVar("C", bound=Closeable)


class ResourceTracker:
    """Remembers every handle a factory opened until close_all()."""

    def __init__(self) -> None:
        self._handles: list[Closeable] = []

    def track(self, handle: C) -> C:
        self._handles.append(handle)
        return handle

    def close_all(self) -> int:
        """Close and forget every tracked handle. Close failures are ignored."""
        handles, self._handles = self._handles, []
        for handle in handles:
            try:
                handle.close()
            except Exception as exc:
                logger.debug("ResourceTracker: ignoring close failure on %r: %s", handle, exc)
        return len(handles)

    def __len__(self) -> int:
        return len(self._handles)
