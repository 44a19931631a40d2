"""Resolution of many sources at once."""
from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from fastimagesize.core.cache import MISSING
from fastimagesize.core.source import is_remote
from fastimagesize.transport.base import BatchTransport
from fastimagesize.utils.logging import get_logger

if TYPE_CHECKING:
    from fastimagesize.core.engine import ImageSizeEngine
    from fastimagesize.models.result import ProbeResult

logger = get_logger("batch")


class BatchResolver:
    """Fan a list of sources out to individual detections.

    In parallel mode remote sources are fetched concurrently through a
    :class:`BatchTransport`, local sources are still read one by one.
    Duplicate sources collapse into one entry of the result mapping.
    """

    def __init__(self, engine: "ImageSizeEngine") -> None:
        self.engine = engine

    def resolve(
        self,
        sources: Sequence[str],
        type_hints: Sequence[str] = (),
        parallel: bool = False,
    ) -> dict[str, "ProbeResult | None"]:
        """Resolve every source, returning a source -> outcome mapping."""
        items = [
            (source, type_hints[index] if index < len(type_hints) else "")
            for index, source in enumerate(sources)
        ]

        transport = self.engine.transport
        if parallel and not isinstance(transport, BatchTransport):
            parallel = False

        if not parallel or not any(is_remote(source) for source, _ in items):
            return self._resolve_sequential(items)

        remote_items = [item for item in items if is_remote(item[0])]
        local_items = [item for item in items if not is_remote(item[0])]

        results = self._resolve_remote_concurrent(remote_items, transport)
        results.update(self._resolve_sequential(local_items))
        return results

    def _resolve_sequential(
        self,
        items: list[tuple[str, str]],
    ) -> dict[str, "ProbeResult | None"]:
        return {
            source: self.engine.get_image_size(source, type_hint)
            for source, type_hint in items
        }

    def _resolve_remote_concurrent(
        self,
        items: list[tuple[str, str]],
        transport: BatchTransport,
    ) -> dict[str, "ProbeResult | None"]:
        cache = self.engine.cache
        results: dict[str, "ProbeResult | None"] = {}

        pending: list[tuple[str, str]] = []
        for source, type_hint in items:
            cached = cache.lookup(source, type_hint)
            if cached is MISSING:
                pending.append((source, type_hint))
            else:
                results[source] = cached  # type: ignore[assignment]

        if not pending:
            return results

        range_header = self.engine.config.range_header
        requests = [(source, range_header) for source, _ in pending]

        outcomes: list["ProbeResult | None"] = [None] * len(pending)
        for index, body in transport.send_batch(requests):
            source, type_hint = pending[index]
            if isinstance(body, Exception):
                logger.warning("Request for %s failed: %s", source, body)
                size = None
            else:
                size = self.engine.detector.detect(source, type_hint, data=body)
            cache.store(source, type_hint, size)
            outcomes[index] = size

        for (source, _), size in zip(pending, outcomes):
            results[source] = size
        return results
