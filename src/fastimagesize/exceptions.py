"""Exceptions raised inside the detection pipeline.

All of these except :class:`RegistryError` are collapsed into an
undetected (``None``) outcome before they reach a public API call.
"""
from __future__ import annotations


class ImageSizeError(Exception):
    """Base class for detection errors."""


class UndetectedFormatError(ImageSizeError):
    """The data did not match the probe(s) that were tried."""


class InsufficientDataError(ImageSizeError):
    """Fewer bytes were available than a probe required."""


class TransportError(ImageSizeError):
    """A remote source could not be fetched."""


class UnsupportedFormatError(ImageSizeError):
    """The type hint does not name any registered probe."""


class RegistryError(ImageSizeError):
    """A probe registration conflicts with an existing one."""
