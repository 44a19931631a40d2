"""Windows icon probe."""
from __future__ import annotations

import struct
from typing import ClassVar

from fastimagesize.models.result import ImageType, ProbeResult
from fastimagesize.probes.base import BaseProbe

ICO_HEADER = b"\x00\x00\x01\x00"


class IcoProbe(BaseProbe):
    """Report the size of the first image in the icon directory."""

    name: ClassVar[str] = "ico"
    format: ClassVar[ImageType] = ImageType.ICO
    supported_tokens: ClassVar[tuple[str, ...]] = (
        "ico", "vnd.microsoft.icon", "x-icon", "icon",
    )

    def _probe(self, source: str) -> ProbeResult | None:
        # reserved + type (4), image count (2), first entry width/height (1 each)
        data = self.read(source, 0, 8)

        if data[:4] != ICO_HEADER:
            return None

        count = struct.unpack("<H", data[4:6])[0]
        if count < 1:
            return None

        # A stored size of 0 means 256 pixels
        width = data[6] or 256
        height = data[7] or 256
        return self._result(width, height)
