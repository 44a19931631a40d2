"""Main image size engine."""
from __future__ import annotations

import os
from typing import TYPE_CHECKING, Sequence, Union

from fastimagesize.core.batch import BatchResolver
from fastimagesize.core.cache import MISSING, ResultCache
from fastimagesize.core.detector import ImageDetector
from fastimagesize.core.registry import ProbeRegistry
from fastimagesize.core.source import DataSource
from fastimagesize.models.config import ImageSizeConfig
from fastimagesize.models.result import ProbeResult
from fastimagesize.probes import DEFAULT_PROBES

if TYPE_CHECKING:
    from fastimagesize.transport.base import BaseTransport

Source = Union[str, "os.PathLike[str]"]


class ImageSizeEngine:
    """Determine image dimensions from header bytes.

    Each engine owns its probe registry, data source and result cache;
    nothing is shared between engines.
    """

    def __init__(
        self,
        config: ImageSizeConfig | None = None,
        transport: "BaseTransport | None" = None,
    ) -> None:
        self.config = config or ImageSizeConfig()
        self.reader = DataSource(self.config.header_budget, transport)
        self.registry = ProbeRegistry(
            self.reader,
            DEFAULT_PROBES,
            disabled=self.config.disabled_probes,
        )
        self.detector = ImageDetector(self.registry, self.reader)
        self.cache = ResultCache(enabled=self.config.use_cache)
        self._batch = BatchResolver(self)

    @property
    def transport(self) -> "BaseTransport | None":
        return self.reader.transport

    def get_image_size(
        self,
        source: Source,
        type_hint: str = "",
    ) -> ProbeResult | None:
        """Get the dimensions of a single image.

        Args:
            source: Local path or http(s) URL.
            type_hint: File extension or MIME type; when empty the
                suffix of ``source`` is used, and failing that every
                supported format is tried.

        Returns:
            ProbeResult if the image was detected, None otherwise
        """
        source = os.fspath(source)

        cached = self.cache.lookup(source, type_hint)
        if cached is not MISSING:
            return cached  # type: ignore[return-value]

        result = self.detector.detect(source, type_hint)
        self.cache.store(source, type_hint, result)
        return result

    def get_image_sizes(
        self,
        sources: Sequence[Source],
        type_hints: Sequence[str] = (),
        parallel: bool = False,
    ) -> dict[str, ProbeResult | None]:
        """Get the dimensions of several images.

        Args:
            sources: Local paths and/or URLs.
            type_hints: Hints aligned with ``sources``; missing entries
                count as empty.
            parallel: Fetch remote sources concurrently when the
                transport supports it.

        Returns:
            Mapping of source to result (None when undetected)
        """
        return self._batch.resolve(
            [os.fspath(source) for source in sources],
            type_hints,
            parallel,
        )

    def set_use_cache(self, use_cache: bool) -> "ImageSizeEngine":
        """Enable or disable the result cache."""
        self.cache.enabled = bool(use_cache)
        return self

    def clear_cache(self) -> "ImageSizeEngine":
        """Drop all cached results."""
        self.cache.clear()
        return self

    def set_http_transport(self, transport: "BaseTransport | None") -> "ImageSizeEngine":
        """Set the transport used for remote sources."""
        self.reader.transport = transport
        return self

    def list_probes(self) -> list[dict]:
        return self.registry.list_probes()

    def supported_tokens(self) -> list[str]:
        return self.registry.get_supported_tokens()

    def close(self) -> None:
        """Close the transport."""
        if self.transport is not None:
            self.transport.close()

    def __enter__(self) -> "ImageSizeEngine":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def _default_engine(config: ImageSizeConfig | None) -> ImageSizeEngine:
    from fastimagesize.transport.httpx_transport import HttpxTransport

    config = config or ImageSizeConfig()
    return ImageSizeEngine(config, HttpxTransport(config))


# Convenience functions
def get_image_size(
    source: Source,
    type_hint: str = "",
    config: ImageSizeConfig | None = None,
) -> ProbeResult | None:
    """Get the pixel dimensions of an image.

    This is the main entry point for the library. Remote URLs are read
    with a default httpx transport.

    Args:
        source: Local path or http(s) URL
        type_hint: File extension or MIME type of the image
        config: Detection configuration

    Returns:
        ProbeResult with width, height and format, or None
    """
    with _default_engine(config) as engine:
        return engine.get_image_size(source, type_hint)


def get_image_sizes(
    sources: Sequence[Source],
    type_hints: Sequence[str] = (),
    parallel: bool = False,
    config: ImageSizeConfig | None = None,
) -> dict[str, ProbeResult | None]:
    """Get the pixel dimensions of several images."""
    with _default_engine(config) as engine:
        return engine.get_image_sizes(sources, type_hints, parallel)
