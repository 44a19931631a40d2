"""Photoshop document probe."""
from __future__ import annotations

import struct
from typing import ClassVar

from fastimagesize.models.result import ImageType, ProbeResult
from fastimagesize.probes.base import BaseProbe


class PsdProbe(BaseProbe):
    """Read dimensions from the PSD/PSB file header."""

    name: ClassVar[str] = "psd"
    format: ClassVar[ImageType] = ImageType.PSD
    supported_tokens: ClassVar[tuple[str, ...]] = ("psd", "photoshop")

    def _probe(self, source: str) -> ProbeResult | None:
        # signature (4), version (2), reserved (6), channels (2), height, width
        data = self.read(source, 0, 22)

        if data[:4] != b"8BPS":
            return None

        version = struct.unpack(">H", data[4:6])[0]
        if version not in (1, 2):
            return None

        height, width = struct.unpack(">II", data[14:22])
        return self._result(width, height)
