from __future__ import annotations

from typing import List, Optional

from .base import MIN_SOURCE_SIZE, ImageInfo, SourceConverter, SourceImage, SourceImageError
from .raster import RasterConverter
from .resize import contain, resize_rgba, to_png
from .svg import SvgConverter, looks_like_svg


class SourceLoader:
    def __init__(self, converters: Optional[List[SourceConverter]] = None) -> None:
        if converters is None:
            converters = [SvgConverter(), RasterConverter()]
        self._converters = converters

    def load(self, data: bytes) -> SourceImage:
        if not data:
            raise SourceImageError("Input buffer is empty")
        for converter in self._converters:
            if converter.accepts(data):
                return converter.load(data)
        raise SourceImageError("Input buffer contains unsupported image format")


def load_source(data: bytes) -> SourceImage:
    return SourceLoader().load(data)


def probe(data: bytes) -> ImageInfo:
    return load_source(data).info


__all__ = [
    "ImageInfo",
    "MIN_SOURCE_SIZE",
    "SourceImage",
    "SourceImageError",
    "SourceLoader",
    "contain",
    "load_source",
    "looks_like_svg",
    "probe",
    "resize_rgba",
    "to_png",
]
