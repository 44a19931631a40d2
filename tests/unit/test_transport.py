"""Tests for transports in src/fastimagesize/transport/."""
from __future__ import annotations

import httpx
import pytest

from fastimagesize.exceptions import TransportError
from fastimagesize.models.config import ImageSizeConfig
from fastimagesize.transport.base import BaseTransport, BatchTransport
from fastimagesize.transport.httpx_transport import HttpxTransport


def _transport(handler) -> HttpxTransport:
    client = httpx.Client(transport=httpx.MockTransport(handler))
    return HttpxTransport(ImageSizeConfig(max_workers=4), client=client)


class TestInterfaces:
    """Tests for the transport base classes."""

    def test_httpx_transport_supports_batches(self):
        assert issubclass(HttpxTransport, BatchTransport)
        assert issubclass(BatchTransport, BaseTransport)

    def test_base_transport_is_abstract(self):
        with pytest.raises(TypeError):
            BaseTransport()


class TestHttpxTransport:
    """Tests for HttpxTransport."""

    def test_send_passes_range_header(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["range"] = request.headers.get("Range")
            return httpx.Response(206, content=b"abc")

        body = _transport(handler).send("GET", "https://example.com/a.png", "bytes=0-9")
        assert body == b"abc"
        assert seen["range"] == "bytes=0-9"

    def test_send_without_range(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert "Range" not in request.headers
            return httpx.Response(200, content=b"full")

        assert _transport(handler).send("GET", "https://example.com/a") == b"full"

    def test_http_error_status_raises_transport_error(self):
        transport = _transport(lambda request: httpx.Response(404))
        with pytest.raises(TransportError):
            transport.send("GET", "https://example.com/missing.png")

    def test_connection_error_raises_transport_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(TransportError):
            _transport(handler).send("GET", "https://example.com/a.png")

    def test_invalid_url_raises_transport_error(self):
        transport = _transport(lambda request: httpx.Response(206, content=b"x"))
        with pytest.raises(TransportError):
            transport.send("GET", "http://host:abc/a.png")

    def test_send_batch_isolates_failures(self):
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path == "/bad.png":
                return httpx.Response(500)
            return httpx.Response(206, content=request.url.path.encode())

        outcomes = dict(_transport(handler).send_batch([
            ("https://example.com/a.png", "bytes=0-9"),
            ("https://example.com/bad.png", "bytes=0-9"),
            ("https://example.com/b.png", "bytes=0-9"),
        ]))
        assert outcomes[0] == b"/a.png"
        assert isinstance(outcomes[1], TransportError)
        assert outcomes[2] == b"/b.png"

    def test_user_agent_on_default_client(self):
        transport = HttpxTransport(ImageSizeConfig(user_agent="gallery/1.0"))
        try:
            assert transport._client.headers["User-Agent"] == "gallery/1.0"
        finally:
            transport.close()

    def test_close_leaves_injected_client_open(self):
        client = httpx.Client(transport=httpx.MockTransport(lambda r: httpx.Response(200)))
        HttpxTransport(client=client).close()
        assert not client.is_closed
        client.close()
