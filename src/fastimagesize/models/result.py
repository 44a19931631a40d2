"""Detection result models."""
from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ImageType(str, Enum):
    """Image formats a probe can report."""
    PNG = "png"
    GIF = "gif"
    JPEG = "jpeg"
    JPEG2000 = "jp2"
    PSD = "psd"
    BMP = "bmp"
    TIFF_II = "tiff_ii"
    TIFF_MM = "tiff_mm"
    WBMP = "wbmp"
    IFF = "iff"
    ICO = "ico"
    WEBP = "webp"

    @property
    def mime_type(self) -> str:
        """Canonical MIME type for this format."""
        return _MIME_TYPES[self]


_MIME_TYPES: dict[ImageType, str] = {
    ImageType.PNG: "image/png",
    ImageType.GIF: "image/gif",
    ImageType.JPEG: "image/jpeg",
    ImageType.JPEG2000: "image/jp2",
    ImageType.PSD: "image/psd",
    ImageType.BMP: "image/bmp",
    ImageType.TIFF_II: "image/tiff",
    ImageType.TIFF_MM: "image/tiff",
    ImageType.WBMP: "image/vnd.wap.wbmp",
    ImageType.IFF: "image/iff",
    ImageType.ICO: "image/vnd.microsoft.icon",
    ImageType.WEBP: "image/webp",
}


class ProbeResult(BaseModel):
    """Pixel dimensions and format of a detected image.

    Instances are immutable so that cached results can be handed out
    to several callers.
    """

    model_config = ConfigDict(frozen=True)

    width: int = Field(gt=0)
    height: int = Field(gt=0)
    format: ImageType

    @property
    def mime_type(self) -> str:
        """Return the MIME type of the detected format."""
        return self.format.mime_type

    def to_dict(self) -> dict[str, int | str]:
        """Return the result as a plain dictionary."""
        return {
            "width": self.width,
            "height": self.height,
            "format": self.format.value,
        }
