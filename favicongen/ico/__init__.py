from .container import encode, encode_rgba
from .encoding import (
    BITMAP_INFO_SIZE,
    DIRECTORY_ENTRY_SIZE,
    HEADER_SIZE,
    bitmap_info_header,
    directory_entry,
    file_header,
    pixel_payload,
)
from .types import InvalidSurfaceError, RasterSurface
from .writer import BufferWriter

__all__ = [
    "BITMAP_INFO_SIZE",
    "BufferWriter",
    "DIRECTORY_ENTRY_SIZE",
    "HEADER_SIZE",
    "InvalidSurfaceError",
    "RasterSurface",
    "bitmap_info_header",
    "directory_entry",
    "encode",
    "encode_rgba",
    "file_header",
    "pixel_payload",
]
