"""WebP probe."""
from __future__ import annotations

import struct
from typing import ClassVar

from fastimagesize.models.result import ImageType, ProbeResult
from fastimagesize.probes.base import BaseProbe

VP8_START_CODE = b"\x9d\x01\x2a"
VP8L_SIGNATURE = 0x2F


class WebpProbe(BaseProbe):
    """Read dimensions of lossy, lossless and extended WebP images."""

    name: ClassVar[str] = "webp"
    format: ClassVar[ImageType] = ImageType.WEBP
    supported_tokens: ClassVar[tuple[str, ...]] = ("webp",)

    def _probe(self, source: str) -> ProbeResult | None:
        data = self.read(source, 0, 30, force_length=False)

        if data[:4] != b"RIFF" or data[8:12] != b"WEBP":
            return None

        chunk = data[12:16]
        if chunk == b"VP8 ":
            return self._lossy(data)
        if chunk == b"VP8L":
            return self._lossless(data)
        if chunk == b"VP8X":
            return self._extended(data)
        return None

    def _lossy(self, data: bytes) -> ProbeResult | None:
        # frame tag (3) precedes the start code
        if data[23:26] != VP8_START_CODE:
            return None
        width, height = struct.unpack("<HH", data[26:30])
        # upper two bits hold the scaling factor
        return self._result(width & 0x3FFF, height & 0x3FFF)

    def _lossless(self, data: bytes) -> ProbeResult | None:
        if data[20] != VP8L_SIGNATURE:
            return None
        bits = struct.unpack("<I", data[21:25])[0]
        width = (bits & 0x3FFF) + 1
        height = ((bits >> 14) & 0x3FFF) + 1
        return self._result(width, height)

    def _extended(self, data: bytes) -> ProbeResult | None:
        # flags (4), then canvas width and height minus one, 24 bits each
        if len(data) < 30:
            return None
        width = int.from_bytes(data[24:27], "little") + 1
        height = int.from_bytes(data[27:30], "little") + 1
        return self._result(width, height)
