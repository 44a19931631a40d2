"""fastimagesize data models."""
from fastimagesize.models.config import JPEG_MAX_HEADER_SIZE, ImageSizeConfig
from fastimagesize.models.result import ImageType, ProbeResult

__all__ = [
    "JPEG_MAX_HEADER_SIZE",
    "ImageSizeConfig",
    "ImageType",
    "ProbeResult",
]
