"""Transports for reading remote images."""
from fastimagesize.transport.base import BaseTransport, BatchTransport
from fastimagesize.transport.httpx_transport import HttpxTransport

__all__ = ["BaseTransport", "BatchTransport", "HttpxTransport"]
