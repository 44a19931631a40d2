"""Bounded reads over local files and remote URLs."""
from __future__ import annotations

from typing import TYPE_CHECKING

from fastimagesize.exceptions import (
    ImageSizeError,
    InsufficientDataError,
    TransportError,
)

if TYPE_CHECKING:
    from fastimagesize.transport.base import BaseTransport


def is_remote(source: str) -> bool:
    """Return True if ``source`` is an http(s) URL."""
    return source.startswith(("http://", "https://"))


class DataSource:
    """Read at most a header budget of bytes from an image source.

    One detection attempt works on a single session buffer: the first
    :meth:`fetch` of a session fills it with the leading ``header_budget``
    bytes of the source, and every later fetch in the same session is
    served from it. Only ranges beyond a full buffer trigger another read.
    """

    def __init__(
        self,
        header_budget: int,
        transport: "BaseTransport | None" = None,
    ) -> None:
        self.header_budget = header_budget
        self.transport = transport
        self._data = b""
        self._loaded = False

    def open_session(self, data: bytes | None = None) -> None:
        """Start a detection attempt, optionally with bytes already in hand."""
        self._data = data or b""
        self._loaded = data is not None

    def close_session(self) -> None:
        """Discard the session buffer."""
        self._data = b""
        self._loaded = False

    def fetch(
        self,
        source: str,
        offset: int,
        length: int,
        force_length: bool = True,
        clear_after: bool = False,
    ) -> bytes:
        """Return up to ``length`` bytes of ``source`` starting at ``offset``.

        Args:
            source: Local path or http(s) URL.
            offset: First byte to return.
            length: Number of bytes wanted.
            force_length: Fail unless exactly ``length`` bytes are available.
                When False any non-empty result is returned as-is.
            clear_after: Drop the session buffer once the bytes are returned.

        Raises:
            InsufficientDataError: Not enough data is available.
            TransportError: A remote read failed.
        """
        if not self._loaded:
            self._data = self._read(source, 0, self.header_budget)
            self._loaded = True

        end = offset + length
        if end <= len(self._data):
            data = self._data[offset:end]
        elif len(self._data) >= self.header_budget:
            # Range lies past a full window, the source may hold more
            data = self._read(source, offset, length)
        else:
            data = self._data[offset:end]

        if clear_after:
            self.close_session()

        if force_length and len(data) < length:
            raise InsufficientDataError(
                f"Wanted {length} bytes at offset {offset} of {source}, "
                f"got {len(data)}"
            )
        if not data:
            raise InsufficientDataError(f"No data available from {source}")

        return data

    def _read(self, source: str, offset: int, length: int) -> bytes:
        """Perform the actual I/O for one range."""
        if is_remote(source):
            return self._read_remote(source, offset, length)
        return self._read_local(source, offset, length)

    def _read_local(self, source: str, offset: int, length: int) -> bytes:
        try:
            with open(source, "rb") as fh:
                fh.seek(offset)
                return fh.read(length)
        except (OSError, ValueError) as e:
            raise InsufficientDataError(f"Cannot read {source}: {e}") from e

    def _read_remote(self, source: str, offset: int, length: int) -> bytes:
        if self.transport is None:
            raise TransportError(f"No HTTP transport configured for {source}")
        range_header = f"bytes={offset}-{offset + length - 1}"
        try:
            body = self.transport.send("GET", source, range_header)
        except ImageSizeError:
            raise
        except Exception as e:
            raise TransportError(f"GET {source} failed: {e}") from e
        if len(body) > length:
            # Range was ignored and the full body came back
            body = body[offset:offset + length]
        return body
