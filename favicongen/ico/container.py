from __future__ import annotations

from .encoding import DIRECTORY_ENTRY_SIZE, bitmap_info_header, directory_entry, file_header, pixel_payload
from .types import RasterSurface


def encode(surface: RasterSurface) -> bytes:
    """Encode a raster surface as a single-image ICO container."""
    surface.validate()
    header = file_header(1)
    payload = pixel_payload(surface)
    info = bitmap_info_header(surface.width, surface.height, len(payload))
    offset = len(header) + DIRECTORY_ENTRY_SIZE
    entry = directory_entry(surface.width, surface.height, len(info) + len(payload), offset)
    return b"".join([header, entry, info, payload])


def encode_rgba(data: bytes, width: int, height: int) -> bytes:
    """Encode raw RGBA bytes (row-major, top-to-bottom) as an ICO container."""
    return encode(RasterSurface(width=width, height=height, data=bytes(data)))
