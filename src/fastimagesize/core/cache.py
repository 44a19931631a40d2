"""In-memory cache of detection outcomes."""
from __future__ import annotations

import threading
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from fastimagesize.models.result import ProbeResult

# Returned by lookup() on a miss; None is a valid cached outcome
MISSING = object()

CacheKey = tuple[str, str]


class ResultCache:
    """Cache detection outcomes per (source, raw type hint).

    Undetected outcomes are stored too so that invalid sources are not
    fetched again. There is no eviction: callers handling an unbounded
    stream of sources should call :meth:`clear` periodically.
    """

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled
        self._entries: dict[CacheKey, "ProbeResult | None"] = {}
        self._lock = threading.Lock()

    @staticmethod
    def key(source: str, type_hint: str = "") -> CacheKey:
        return (source, type_hint)

    def lookup(
        self,
        source: str,
        type_hint: str = "",
    ) -> Union["ProbeResult", None, object]:
        """Return the cached outcome, or MISSING if absent or disabled."""
        if not self.enabled:
            return MISSING
        with self._lock:
            return self._entries.get(self.key(source, type_hint), MISSING)

    def store(
        self,
        source: str,
        type_hint: str,
        result: "ProbeResult | None",
    ) -> None:
        """Store an outcome; a no-op while caching is disabled."""
        if not self.enabled:
            return
        with self._lock:
            self._entries[self.key(source, type_hint)] = result

    def clear(self) -> None:
        """Drop every entry, whether or not caching is enabled."""
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries
