"""JPEG 2000 probe."""
from __future__ import annotations

import struct
from typing import ClassVar

from fastimagesize.models.result import ImageType, ProbeResult
from fastimagesize.probes.base import BaseProbe

JP2_SIGNATURE = b"\x00\x00\x00\x0cjP  \r\n\x87\n"
SOC_MARKER = b"\xff\x4f"
SIZ_MARKER = b"\xff\x51"


class Jp2Probe(BaseProbe):
    """Read the reference grid size from the codestream SIZ segment.

    Accepts both the JP2 file format (signature box first) and a raw
    codestream starting with SOC.
    """

    name: ClassVar[str] = "jp2"
    format: ClassVar[ImageType] = ImageType.JPEG2000
    supported_tokens: ClassVar[tuple[str, ...]] = (
        "jp2", "j2k", "jpf", "jpg2", "jpx", "jpm",
    )

    def _probe(self, source: str) -> ProbeResult | None:
        data = self.read(
            source, 0, self.reader.header_budget, force_length=False
        )

        if not data.startswith((JP2_SIGNATURE, SOC_MARKER + SIZ_MARKER)):
            return None

        soc = data.find(SOC_MARKER + SIZ_MARKER)
        if soc < 0:
            return None

        # SIZ: marker (2), Lsiz (2), Rsiz (2), Xsiz, Ysiz, XOsiz, YOsiz
        start = soc + 8
        x_size, y_size, x_offset, y_offset = struct.unpack(
            ">IIII", data[start:start + 16]
        )
        return self._result(x_size - x_offset, y_size - y_offset)
