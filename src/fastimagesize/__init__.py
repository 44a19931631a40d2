"""fastimagesize - image dimensions from header bytes, local or remote."""
from fastimagesize.core.engine import ImageSizeEngine, get_image_size, get_image_sizes
from fastimagesize.exceptions import (
    ImageSizeError,
    InsufficientDataError,
    RegistryError,
    TransportError,
    UndetectedFormatError,
    UnsupportedFormatError,
)
from fastimagesize.models.config import ImageSizeConfig
from fastimagesize.models.result import ImageType, ProbeResult
from fastimagesize.transport import BaseTransport, BatchTransport, HttpxTransport

try:
    from fastimagesize._version import __version__
except ImportError:
    __version__ = "0.0.0-dev"

__all__ = [
    "__version__",
    "get_image_size",
    "get_image_sizes",
    "ImageSizeEngine",
    "ImageSizeConfig",
    "ImageType",
    "ProbeResult",
    "BaseTransport",
    "BatchTransport",
    "HttpxTransport",
    "ImageSizeError",
    "InsufficientDataError",
    "RegistryError",
    "TransportError",
    "UndetectedFormatError",
    "UnsupportedFormatError",
]
