"""HTTP transport backed by httpx."""
from __future__ import annotations

from typing import TYPE_CHECKING, Iterator

import httpx

from fastimagesize.exceptions import TransportError
from fastimagesize.transport.base import BatchTransport
from fastimagesize.utils.logging import get_logger
from fastimagesize.utils.parallel import process_batch

if TYPE_CHECKING:
    from fastimagesize.models.config import ImageSizeConfig

logger = get_logger("transport")


class HttpxTransport(BatchTransport):
    """Ranged GET requests through an :class:`httpx.Client`.

    A client can be injected (for example one built on
    :class:`httpx.MockTransport`); otherwise one is created from the
    configuration and closed together with the transport.
    """

    def __init__(
        self,
        config: "ImageSizeConfig | None" = None,
        client: httpx.Client | None = None,
    ) -> None:
        from fastimagesize.models.config import ImageSizeConfig

        self.config = config or ImageSizeConfig()
        self._owns_client = client is None
        self._client = client or self._build_client()

    def _build_client(self) -> httpx.Client:
        headers = {}
        if self.config.user_agent:
            headers["User-Agent"] = self.config.user_agent
        return httpx.Client(
            timeout=self.config.timeout_seconds,
            follow_redirects=self.config.follow_redirects,
            headers=headers,
        )

    def send(
        self,
        method: str,
        url: str,
        range_header: str | None = None,
    ) -> bytes:
        """Send one request and return the response body."""
        headers = {"Range": range_header} if range_header else {}
        try:
            response = self._client.request(method, url, headers=headers)
            response.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise TransportError(f"{method} {url} failed: {e}") from e

        # Servers ignoring the Range header answer 200 with the full body
        if range_header and response.status_code != httpx.codes.PARTIAL_CONTENT:
            logger.debug("Range ignored by server for %s", url)

        return response.content

    def send_batch(
        self,
        requests: list[tuple[str, str | None]],
    ) -> Iterator[tuple[int, bytes | Exception]]:
        """Issue all GET requests concurrently on a bounded thread pool."""
        return process_batch(
            requests,
            lambda request: self.send("GET", request[0], request[1]),
            max_workers=self.config.max_workers,
        )

    def close(self) -> None:
        """Close the underlying client if this transport created it."""
        if self._owns_client:
            self._client.close()
