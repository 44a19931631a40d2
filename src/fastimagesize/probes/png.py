"""PNG probe."""
from __future__ import annotations

import struct
from typing import ClassVar

from fastimagesize.models.result import ImageType, ProbeResult
from fastimagesize.probes.base import BaseProbe

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


class PngProbe(BaseProbe):
    """Read dimensions from the IHDR chunk."""

    name: ClassVar[str] = "png"
    format: ClassVar[ImageType] = ImageType.PNG
    supported_tokens: ClassVar[tuple[str, ...]] = ("png",)

    def _probe(self, source: str) -> ProbeResult | None:
        # signature (8), chunk length (4), chunk type (4), width (4), height (4)
        data = self.read(source, 0, 24)

        if data[:8] != PNG_SIGNATURE or data[12:16] != b"IHDR":
            return None

        width, height = struct.unpack(">II", data[16:24])
        return self._result(width, height)
