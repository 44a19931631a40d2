"""JPEG probe."""
from __future__ import annotations

import struct
from typing import ClassVar

from fastimagesize.models.result import ImageType, ProbeResult
from fastimagesize.probes.base import BaseProbe

SOI_MARKER = b"\xff\xd8"
SOS_MARKER = 0xDA

# Start-of-frame markers carrying the frame size (DHT, JPG and DAC excluded)
SOF_MARKERS = frozenset(
    (0xC0, 0xC1, 0xC2, 0xC3, 0xC5, 0xC6, 0xC7,
     0xC9, 0xCA, 0xCB, 0xCD, 0xCE, 0xCF)
)

# Markers without a length field
STANDALONE_MARKERS = frozenset((0x01, *range(0xD0, 0xDA)))


class JpegProbe(BaseProbe):
    """Walk the marker segments up to the first start-of-frame."""

    name: ClassVar[str] = "jpeg"
    format: ClassVar[ImageType] = ImageType.JPEG
    supported_tokens: ClassVar[tuple[str, ...]] = (
        "jpeg", "jpg", "jpe", "jif", "jfif", "jfi",
    )

    def _probe(self, source: str) -> ProbeResult | None:
        data = self.read(
            source, 0, self.reader.header_budget, force_length=False
        )

        if data[:2] != SOI_MARKER:
            return None

        return self._scan_segments(data)

    def _scan_segments(self, data: bytes) -> ProbeResult | None:
        size = len(data)
        i = 2
        while i + 4 <= size:
            if data[i] != 0xFF:
                i += 1
                continue

            marker = data[i + 1]
            if marker == 0xFF:
                # fill byte
                i += 1
                continue
            if marker in STANDALONE_MARKERS:
                i += 2
                continue
            if marker == SOS_MARKER:
                # entropy-coded data follows, no frame header was seen
                return None

            segment_length = struct.unpack(">H", data[i + 2:i + 4])[0]
            if segment_length < 2 or i + 2 + segment_length > size:
                return None

            if marker in SOF_MARKERS:
                # length (2), precision (1), height (2), width (2)
                height, width = struct.unpack(">HH", data[i + 5:i + 9])
                return self._result(width, height)

            i += 2 + segment_length

        return None
