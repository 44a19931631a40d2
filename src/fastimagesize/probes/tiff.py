"""TIFF probe."""
from __future__ import annotations

import struct
from typing import ClassVar

from fastimagesize.models.result import ImageType, ProbeResult
from fastimagesize.probes.base import BaseProbe

TAG_IMAGE_WIDTH = 256
TAG_IMAGE_LENGTH = 257

FIELD_SHORT = 3
FIELD_LONG = 4

IFD_ENTRY_SIZE = 12


class TiffProbe(BaseProbe):
    """Read ImageWidth/ImageLength from the first image file directory.

    The IFD may sit anywhere in the file; when it lies past the session
    window the data source performs a follow-up read for it.
    """

    name: ClassVar[str] = "tif"
    format: ClassVar[ImageType] = ImageType.TIFF_II
    supported_tokens: ClassVar[tuple[str, ...]] = ("tif", "tiff")

    def _probe(self, source: str) -> ProbeResult | None:
        header = self.read(source, 0, 8)

        if header[:4] == b"II*\x00":
            order, image_type = "<", ImageType.TIFF_II
        elif header[:4] == b"MM\x00*":
            order, image_type = ">", ImageType.TIFF_MM
        else:
            return None

        ifd_offset = struct.unpack(order + "I", header[4:8])[0]
        count = struct.unpack(order + "H", self.read(source, ifd_offset, 2))[0]
        entries = self.read(source, ifd_offset + 2, count * IFD_ENTRY_SIZE)

        dimensions: dict[int, int] = {}
        for start in range(0, len(entries), IFD_ENTRY_SIZE):
            entry = entries[start:start + IFD_ENTRY_SIZE]
            tag, field_type = struct.unpack(order + "HH", entry[:4])
            if tag not in (TAG_IMAGE_WIDTH, TAG_IMAGE_LENGTH):
                continue

            if field_type == FIELD_SHORT:
                value = struct.unpack(order + "H", entry[8:10])[0]
            elif field_type == FIELD_LONG:
                value = struct.unpack(order + "I", entry[8:12])[0]
            else:
                continue

            dimensions[tag] = value
            if len(dimensions) == 2:
                break

        if len(dimensions) < 2:
            return None

        return self._result(
            dimensions[TAG_IMAGE_WIDTH],
            dimensions[TAG_IMAGE_LENGTH],
            image_type,
        )
