"""Base probe interface."""
from __future__ import annotations

import struct
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar

from fastimagesize.exceptions import ImageSizeError
from fastimagesize.models.result import ImageType, ProbeResult
from fastimagesize.utils.logging import get_logger

if TYPE_CHECKING:
    from fastimagesize.core.source import DataSource

logger = get_logger("probes")


class BaseProbe(ABC):
    """Abstract base class for image format probes.

    A probe reads header bytes through the shared :class:`DataSource`
    and returns a :class:`ProbeResult`, or None when the data does not
    match its format. Malformed data never raises out of :meth:`detect`.
    """

    # Class attributes for registration
    name: ClassVar[str]
    format: ClassVar[ImageType]
    supported_tokens: ClassVar[tuple[str, ...]]

    def __init__(self, reader: "DataSource") -> None:
        self.reader = reader

    def detect(self, source: str) -> ProbeResult | None:
        """Return the dimensions of ``source`` if it matches this format."""
        try:
            return self._probe(source)
        except (ImageSizeError, struct.error, ValueError, IndexError) as e:
            logger.debug("%s probe rejected %s: %s", self.name, source, e)
            return None

    @abstractmethod
    def _probe(self, source: str) -> ProbeResult | None:
        """Parse the header of ``source``."""
        ...

    @classmethod
    def can_handle(cls, token: str) -> bool:
        """Check if this probe is registered for an extension/MIME token."""
        return token.lower() in cls.supported_tokens

    def read(
        self,
        source: str,
        offset: int,
        length: int,
        force_length: bool = True,
    ) -> bytes:
        """Request a bounded read from the session data source."""
        return self.reader.fetch(source, offset, length, force_length)

    def _result(
        self,
        width: int,
        height: int,
        image_type: ImageType | None = None,
    ) -> ProbeResult:
        """Build a result; non-positive dimensions raise ValueError."""
        return ProbeResult(
            width=width,
            height=height,
            format=image_type or self.format,
        )
