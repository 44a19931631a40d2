"""BMP probe."""
from __future__ import annotations

import struct
from typing import ClassVar

from fastimagesize.models.result import ImageType, ProbeResult
from fastimagesize.probes.base import BaseProbe

BITMAPCOREHEADER_SIZE = 12


class BmpProbe(BaseProbe):
    """Read dimensions from the DIB header following the file header."""

    name: ClassVar[str] = "bmp"
    format: ClassVar[ImageType] = ImageType.BMP
    supported_tokens: ClassVar[tuple[str, ...]] = ("bmp",)

    def _probe(self, source: str) -> ProbeResult | None:
        data = self.read(source, 0, 26)

        if data[:2] != b"BM":
            return None

        header_size = struct.unpack("<I", data[14:18])[0]
        if header_size == BITMAPCOREHEADER_SIZE:
            width, height = struct.unpack("<HH", data[18:22])
        else:
            width, height = struct.unpack("<ii", data[18:26])

        # Negative height marks a top-down bitmap
        return self._result(width, abs(height))
