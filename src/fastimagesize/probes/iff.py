"""Interchange File Format probe."""
from __future__ import annotations

import struct
from typing import ClassVar

from fastimagesize.models.result import ImageType, ProbeResult
from fastimagesize.probes.base import BaseProbe

# container id -> (header chunk id, dimension format)
IFF_LAYOUTS = {
    b"FORM": (b"BMHD", ">HH"),  # Amiga ILBM/PBM
    b"FOR4": (b"TBHD", ">II"),  # Maya image
}


class IffProbe(BaseProbe):
    """Read dimensions from the bitmap header chunk of an IFF container."""

    name: ClassVar[str] = "iff"
    format: ClassVar[ImageType] = ImageType.IFF
    supported_tokens: ClassVar[tuple[str, ...]] = ("iff", "x-iff")

    def _probe(self, source: str) -> ProbeResult | None:
        data = self.read(
            source, 0, self.reader.header_budget, force_length=False
        )

        layout = IFF_LAYOUTS.get(data[:4])
        if layout is None:
            return None

        chunk_id, dimension_format = layout
        position = data.find(chunk_id, 12)
        if position < 0:
            return None

        # chunk id (4), chunk length (4), width, height
        start = position + 8
        end = start + struct.calcsize(dimension_format)
        width, height = struct.unpack(dimension_format, data[start:end])
        return self._result(width, height)
