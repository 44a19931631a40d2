"""Image type resolution and probe dispatch."""
from __future__ import annotations

from pathlib import PurePosixPath
from typing import TYPE_CHECKING
from urllib.parse import urlsplit

from fastimagesize.core.source import is_remote
from fastimagesize.exceptions import (
    ImageSizeError,
    UndetectedFormatError,
    UnsupportedFormatError,
)
from fastimagesize.utils.logging import get_logger

if TYPE_CHECKING:
    from fastimagesize.core.registry import ProbeRegistry
    from fastimagesize.core.source import DataSource
    from fastimagesize.models.result import ProbeResult

logger = get_logger("detector")


def resolve_type_token(source: str, type_hint: str = "") -> str | None:
    """Derive the registry token for a source.

    A non-empty hint wins: the MIME subtype for ``type/subtype`` hints
    (parameters dropped), the raw string otherwise. Without a hint the
    file suffix of the source is used. Returns None when neither exists.
    """
    if type_hint:
        hint = type_hint.split(";", 1)[0].strip()
        return hint.rpartition("/")[2].lower()

    path = source
    if is_remote(source):
        try:
            path = urlsplit(source).path
        except ValueError:
            return None
    suffix = PurePosixPath(path.replace("\\", "/")).suffix
    if len(suffix) > 1 and suffix[1:].isalnum():
        return suffix[1:].lower()
    return None


class ImageDetector:
    """Resolve a source and type hint to a :class:`ProbeResult`.

    With a type hint (or file suffix) only the matching probe is tried;
    if it rejects the data the result is undetected, other formats are
    not guessed. Without either, every probe is tried in registration
    order against the same session buffer until one matches.
    """

    def __init__(self, registry: "ProbeRegistry", reader: "DataSource") -> None:
        self.registry = registry
        self.reader = reader

    def detect(
        self,
        source: str,
        type_hint: str = "",
        data: bytes | None = None,
    ) -> "ProbeResult | None":
        """Detect the dimensions of ``source``.

        Args:
            source: Local path or http(s) URL.
            type_hint: Extension or MIME type, may be empty.
            data: Leading bytes already fetched; skips the initial read.

        Returns:
            The probe result, or None if the image was not detected.
        """
        if data is not None:
            data = data[:self.reader.header_budget]

        self.reader.open_session(data)
        try:
            token = resolve_type_token(source, type_hint)
            if token is None:
                result = self._detect_unknown_type(source)
            else:
                result = self._detect_by_token(source, token)
        except ImageSizeError as e:
            logger.debug("Undetected %s (%s): %s", source, type(e).__name__, e)
            return None
        finally:
            self.reader.close_session()

        logger.debug(
            "Detected %s: %sx%s %s",
            source, result.width, result.height, result.format.value,
        )
        return result

    def _detect_by_token(self, source: str, token: str) -> "ProbeResult":
        probe = self.registry.resolve_token(token)
        if probe is None:
            raise UnsupportedFormatError(f"No probe registered for '{token}'")

        self._load_session(source)
        result = probe.detect(source)
        if result is None:
            raise UndetectedFormatError(f"Data does not match '{token}'")
        return result

    def _detect_unknown_type(self, source: str) -> "ProbeResult":
        probes = self.registry.load_all()

        self._load_session(source)
        for probe in probes:
            result = probe.detect(source)
            if result is not None:
                return result

        raise UndetectedFormatError("No probe matched")

    def _load_session(self, source: str) -> None:
        # Fill the shared buffer once; any non-empty prefix is acceptable
        self.reader.fetch(source, 0, self.reader.header_budget, force_length=False)
