"""Transport interfaces used for remote reads."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterator


class BaseTransport(ABC):
    """Abstract single-request HTTP transport."""

    @abstractmethod
    def send(
        self,
        method: str,
        url: str,
        range_header: str | None = None,
    ) -> bytes:
        """Send one request and return the response body.

        Raises:
            TransportError: If the request failed.
        """
        ...

    def close(self) -> None:
        """Release any resources held by the transport."""

    def __enter__(self) -> "BaseTransport":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class BatchTransport(BaseTransport):
    """Transport able to keep several requests in flight at once."""

    @abstractmethod
    def send_batch(
        self,
        requests: list[tuple[str, str | None]],
    ) -> Iterator[tuple[int, bytes | Exception]]:
        """Issue GET requests for every ``(url, range_header)`` pair.

        All requests must be issued before the first one is awaited.
        Each outcome is yielded together with the index of its request;
        a failed request yields its exception rather than raising.
        """
        ...
