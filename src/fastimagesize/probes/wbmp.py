"""Wireless bitmap probe."""
from __future__ import annotations

from typing import ClassVar

from fastimagesize.models.result import ImageType, ProbeResult
from fastimagesize.probes.base import BaseProbe

# ICO and CUR headers also begin with two zero bytes
ICON_HEADERS = (b"\x00\x00\x01\x00", b"\x00\x00\x02\x00")


def read_multibyte_int(data: bytes, offset: int) -> tuple[int, int]:
    """Decode a WBMP multi-byte integer.

    Returns:
        Tuple of (value, offset after the integer).
    """
    value = 0
    while True:
        byte = data[offset]
        offset += 1
        value = (value << 7) | (byte & 0x7F)
        if not byte & 0x80:
            return value, offset


class WbmpProbe(BaseProbe):
    """Read dimensions of type 0 (monochrome) WBMP images."""

    name: ClassVar[str] = "wbmp"
    format: ClassVar[ImageType] = ImageType.WBMP
    supported_tokens: ClassVar[tuple[str, ...]] = ("wbm", "wbmp", "vnd.wap.wbmp")

    def _probe(self, source: str) -> ProbeResult | None:
        data = self.read(source, 0, 12, force_length=False)

        if len(data) < 4 or data[0] != 0 or data[1] != 0:
            return None
        if data.startswith(ICON_HEADERS):
            return None

        width, offset = read_multibyte_int(data, 2)
        height, _ = read_multibyte_int(data, offset)
        return self._result(width, height)
