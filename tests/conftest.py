"""Shared fixtures: synthesised image headers for every supported format."""
from __future__ import annotations

import struct
import zlib
from pathlib import Path
from typing import Callable

import pytest

from fastimagesize.models.result import ImageType


def _multibyte_int(value: int) -> bytes:
    """Encode a WBMP multi-byte integer."""
    out = [value & 0x7F]
    value >>= 7
    while value:
        out.append(0x80 | (value & 0x7F))
        value >>= 7
    return bytes(reversed(out))


class ImageFactory:
    """Build minimal, well-formed image headers."""

    @staticmethod
    def png(width: int = 1, height: int = 1) -> bytes:
        ihdr = struct.pack(">IIBBBBB", width, height, 8, 2, 0, 0, 0)
        crc = struct.pack(">I", zlib.crc32(b"IHDR" + ihdr))
        iend = struct.pack(">I", 0) + b"IEND" + struct.pack(">I", zlib.crc32(b"IEND"))
        return (
            b"\x89PNG\r\n\x1a\n"
            + struct.pack(">I", 13) + b"IHDR" + ihdr + crc
            + iend
        )

    @staticmethod
    def gif(width: int = 1, height: int = 1) -> bytes:
        return b"GIF89a" + struct.pack("<HH", width, height) + b"\x00\x00\x00;"

    @staticmethod
    def jpeg(width: int = 1, height: int = 1, exif_thumbnail: bool = False) -> bytes:
        jfif = b"\xff\xe0" + struct.pack(">H", 16) + b"JFIF\x00\x01\x01\x00\x00\x01\x00\x01\x00\x00"
        app1 = b""
        if exif_thumbnail:
            # embedded thumbnail with its own SOF that must be skipped
            thumb = (
                b"\xff\xd8\xff\xc0" + struct.pack(">HBHHB", 11, 8, 8, 8, 1)
                + b"\x01\x11\x00\xff\xd9"
            )
            payload = b"Exif\x00\x00" + thumb
            app1 = b"\xff\xe1" + struct.pack(">H", len(payload) + 2) + payload
        sof = b"\xff\xc0" + struct.pack(">HBHHB", 11, 8, height, width, 1) + b"\x01\x11\x00"
        sos = b"\xff\xda" + struct.pack(">H", 8) + b"\x01\x01\x00\x00\x3f\x00"
        return b"\xff\xd8" + jfif + app1 + sof + sos + b"\x00" * 16 + b"\xff\xd9"

    @staticmethod
    def jp2(width: int = 2, height: int = 1, origin: int = 0) -> bytes:
        signature = b"\x00\x00\x00\x0cjP  \r\n\x87\n"
        ftyp = struct.pack(">I", 20) + b"ftyp" + b"jp2 " + struct.pack(">I", 0) + b"jp2 "
        siz = (
            b"\xff\x51" + struct.pack(">HH", 41, 0)
            + struct.pack(">IIII", width + origin, height + origin, origin, origin)
            + struct.pack(">IIII", width + origin, height + origin, 0, 0)
            + struct.pack(">HBBB", 1, 7, 1, 1)
        )
        codestream = b"\xff\x4f" + siz + b"\xff\xd9"
        jp2c = struct.pack(">I", 8 + len(codestream)) + b"jp2c" + codestream
        return signature + ftyp + jp2c

    @staticmethod
    def psd(width: int = 2, height: int = 1) -> bytes:
        return (
            b"8BPS" + struct.pack(">H", 1) + b"\x00" * 6
            + struct.pack(">HIIHH", 3, height, width, 8, 3)
        )

    @staticmethod
    def bmp(width: int = 2, height: int = 1, top_down: bool = False) -> bytes:
        pixels = b"\x00" * 8
        dib = struct.pack(
            "<IiiHHIIiiII",
            40, width, -height if top_down else height, 1, 24, 0,
            len(pixels), 2835, 2835, 0, 0,
        )
        header = b"BM" + struct.pack("<IHHI", 14 + len(dib) + len(pixels), 0, 0, 14 + len(dib))
        return header + dib + pixels

    @staticmethod
    def bmp_core(width: int = 2, height: int = 1) -> bytes:
        dib = struct.pack("<IHHHH", 12, width, height, 1, 24)
        return b"BM" + struct.pack("<IHHI", 14 + len(dib), 0, 0, 14 + len(dib)) + dib

    @staticmethod
    def tiff(
        width: int = 1,
        height: int = 1,
        big_endian: bool = False,
        ifd_offset: int = 8,
        long_values: bool = False,
    ) -> bytes:
        order = ">" if big_endian else "<"
        header = (b"MM\x00*" if big_endian else b"II*\x00") + struct.pack(order + "I", ifd_offset)
        padding = b"\x00" * (ifd_offset - len(header))

        def entry(tag: int, value: int) -> bytes:
            if long_values:
                return struct.pack(order + "HHII", tag, 4, 1, value)
            return struct.pack(order + "HHIHH", tag, 3, 1, value, 0)

        entries = [
            entry(256, width),
            entry(257, height),
            struct.pack(order + "HHIHH", 258, 3, 1, 8, 0),
        ]
        ifd = struct.pack(order + "H", len(entries)) + b"".join(entries) + struct.pack(order + "I", 0)
        return header + padding + ifd

    @staticmethod
    def wbmp(width: int = 2, height: int = 1) -> bytes:
        return b"\x00\x00" + _multibyte_int(width) + _multibyte_int(height) + b"\x00" * 4

    @staticmethod
    def iff(width: int = 2, height: int = 1) -> bytes:
        bmhd = struct.pack(">HHhhBBBBHBBhh", width, height, 0, 0, 1, 0, 0, 0, 0, 1, 1, width, height)
        body = b"ILBM" + b"BMHD" + struct.pack(">I", len(bmhd)) + bmhd
        return b"FORM" + struct.pack(">I", len(body)) + body

    @staticmethod
    def iff_maya(width: int = 2, height: int = 1) -> bytes:
        tbhd = struct.pack(">II", width, height) + b"\x00" * 24
        body = b"CIMG" + b"TBHD" + struct.pack(">I", len(tbhd)) + tbhd
        return b"FOR4" + struct.pack(">I", len(body)) + body

    @staticmethod
    def ico(width: int = 2, height: int = 1) -> bytes:
        return (
            b"\x00\x00\x01\x00" + struct.pack("<H", 1)
            + bytes([width % 256, height % 256, 0, 0])
            + struct.pack("<HHII", 1, 32, 40, 22)
        )

    @staticmethod
    def webp_lossy(width: int = 550, height: int = 368) -> bytes:
        frame = b"\x50\x02\x00" + b"\x9d\x01\x2a" + struct.pack("<HH", width, height) + b"\x00" * 10
        chunk = b"VP8 " + struct.pack("<I", len(frame)) + frame
        return b"RIFF" + struct.pack("<I", 4 + len(chunk)) + b"WEBP" + chunk

    @staticmethod
    def webp_lossless(width: int = 386, height: int = 395) -> bytes:
        bits = (width - 1) | ((height - 1) << 14)
        frame = b"\x2f" + struct.pack("<I", bits) + b"\x00" * 10
        chunk = b"VP8L" + struct.pack("<I", len(frame)) + frame
        return b"RIFF" + struct.pack("<I", 4 + len(chunk)) + b"WEBP" + chunk

    @staticmethod
    def webp_extended(width: int = 386, height: int = 395) -> bytes:
        payload = (
            struct.pack("<I", 0x10)
            + (width - 1).to_bytes(3, "little")
            + (height - 1).to_bytes(3, "little")
        )
        chunk = b"VP8X" + struct.pack("<I", len(payload)) + payload
        return b"RIFF" + struct.pack("<I", 4 + len(chunk)) + b"WEBP" + chunk


# name -> (bytes, file extension, expected (width, height, format))
SAMPLE_IMAGES: dict[str, tuple[bytes, str, tuple[int, int, ImageType]]] = {
    "png": (ImageFactory.png(1, 1), "png", (1, 1, ImageType.PNG)),
    "gif": (ImageFactory.gif(1, 1), "gif", (1, 1, ImageType.GIF)),
    "jpeg": (ImageFactory.jpeg(1, 1), "jpg", (1, 1, ImageType.JPEG)),
    "jp2": (ImageFactory.jp2(2, 1), "jp2", (2, 1, ImageType.JPEG2000)),
    "psd": (ImageFactory.psd(2, 1), "psd", (2, 1, ImageType.PSD)),
    "bmp": (ImageFactory.bmp(2, 1), "bmp", (2, 1, ImageType.BMP)),
    "tif": (ImageFactory.tiff(1, 1), "tif", (1, 1, ImageType.TIFF_II)),
    "tif_msb": (ImageFactory.tiff(2, 1, big_endian=True), "tif", (2, 1, ImageType.TIFF_MM)),
    "wbmp": (ImageFactory.wbmp(2, 1), "wbmp", (2, 1, ImageType.WBMP)),
    "iff": (ImageFactory.iff(2, 1), "iff", (2, 1, ImageType.IFF)),
    "iff_maya": (ImageFactory.iff_maya(2, 1), "iff", (2, 1, ImageType.IFF)),
    "ico": (ImageFactory.ico(2, 1), "ico", (2, 1, ImageType.ICO)),
    "webp": (ImageFactory.webp_lossy(550, 368), "webp", (550, 368, ImageType.WEBP)),
    "webp_lossless": (ImageFactory.webp_lossless(386, 395), "webp", (386, 395, ImageType.WEBP)),
    "webp_extended": (ImageFactory.webp_extended(386, 395), "webp", (386, 395, ImageType.WEBP)),
}


@pytest.fixture
def images() -> type[ImageFactory]:
    """Factory for synthesised image headers."""
    return ImageFactory


@pytest.fixture
def sample_images() -> dict[str, tuple[bytes, str, tuple[int, int, ImageType]]]:
    """Named sample images with their extension and expected result."""
    return SAMPLE_IMAGES


@pytest.fixture
def write_image(tmp_path: Path) -> Callable[[str, bytes], str]:
    """Write bytes under ``tmp_path`` and return the path as a string."""

    def _write(name: str, data: bytes) -> str:
        path = tmp_path / name
        path.write_bytes(data)
        return str(path)

    return _write
