"""Image format probes.

``DEFAULT_PROBES`` is the static probe table. Its order is the order in
which probes are tried when the image type is unknown.
"""
from fastimagesize.probes.base import BaseProbe
from fastimagesize.probes.bmp import BmpProbe
from fastimagesize.probes.gif import GifProbe
from fastimagesize.probes.ico import IcoProbe
from fastimagesize.probes.iff import IffProbe
from fastimagesize.probes.jp2 import Jp2Probe
from fastimagesize.probes.jpeg import JpegProbe
from fastimagesize.probes.png import PngProbe
from fastimagesize.probes.psd import PsdProbe
from fastimagesize.probes.tiff import TiffProbe
from fastimagesize.probes.wbmp import WbmpProbe
from fastimagesize.probes.webp import WebpProbe

DEFAULT_PROBES: tuple[type[BaseProbe], ...] = (
    PngProbe,
    GifProbe,
    JpegProbe,
    Jp2Probe,
    PsdProbe,
    BmpProbe,
    TiffProbe,
    WbmpProbe,
    IffProbe,
    IcoProbe,
    WebpProbe,
)

__all__ = [
    "DEFAULT_PROBES",
    "BaseProbe",
    "BmpProbe",
    "GifProbe",
    "IcoProbe",
    "IffProbe",
    "Jp2Probe",
    "JpegProbe",
    "PngProbe",
    "PsdProbe",
    "TiffProbe",
    "WbmpProbe",
    "WebpProbe",
]
