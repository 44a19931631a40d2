"""GIF probe."""
from __future__ import annotations

import struct
from typing import ClassVar

from fastimagesize.models.result import ImageType, ProbeResult
from fastimagesize.probes.base import BaseProbe


class GifProbe(BaseProbe):
    """Read the logical screen size of GIF87a/GIF89a images."""

    name: ClassVar[str] = "gif"
    format: ClassVar[ImageType] = ImageType.GIF
    supported_tokens: ClassVar[tuple[str, ...]] = ("gif",)

    def _probe(self, source: str) -> ProbeResult | None:
        data = self.read(source, 0, 10)

        if data[:6] not in (b"GIF87a", b"GIF89a"):
            return None

        width, height = struct.unpack("<HH", data[6:10])
        return self._result(width, height)
