from __future__ import annotations

from .types import BYTES_PER_PIXEL, RasterSurface
from .writer import BufferWriter

HEADER_SIZE = 6
DIRECTORY_ENTRY_SIZE = 16
BITMAP_INFO_SIZE = 40

ICON_TYPE = 1
COLOR_PLANES = 1
BITS_PER_PIXEL = 32
BI_RGB = 0

# Source channel index for each output byte: RGBA in, BGRA out.
BGRA_FROM_RGBA = (2, 1, 0, 3)


def file_header(image_count: int) -> bytes:
    """Build the ICONDIR header (reserved, type, image count)."""
    writer = BufferWriter(HEADER_SIZE)
    writer.u16(0).u16(ICON_TYPE).u16(image_count)
    return writer.getvalue()


def directory_entry(width: int, height: int, data_size: int, offset: int) -> bytes:
    """Build the ICONDIRENTRY describing one embedded bitmap.

    Width and height are single bytes in this structure; larger values are
    stored truncated to their low byte.
    """
    writer = BufferWriter(DIRECTORY_ENTRY_SIZE)
    writer.u8(width).u8(height)
    writer.u8(0)  # palette
    writer.u8(0)  # reserved
    writer.u16(COLOR_PLANES).u16(BITS_PER_PIXEL)
    writer.u32(data_size).u32(offset)
    return writer.getvalue()


def bitmap_info_header(width: int, height: int, image_size: int) -> bytes:
    """Build the BITMAPINFOHEADER for a 32bpp bitmap without an AND mask.

    The height is doubled: icon bitmaps always report XOR + AND mask rows,
    even when the mask is omitted and alpha comes from the fourth channel.
    """
    writer = BufferWriter(BITMAP_INFO_SIZE)
    writer.u32(BITMAP_INFO_SIZE)
    writer.i32(width).i32(height * 2)
    writer.u16(COLOR_PLANES).u16(BITS_PER_PIXEL)
    writer.u32(BI_RGB)
    writer.u32(image_size)
    writer.i32(0).i32(0)  # resolution
    writer.u32(0)  # palette colors
    writer.u32(0)  # important colors
    return writer.getvalue()


def pixel_payload(surface: RasterSurface) -> bytes:
    """Convert top-down RGBA rows into bottom-up BGRA rows.

    32bpp rows are already 4-byte aligned so no stride padding is added.
    """
    surface.validate()
    row_bytes = surface.row_bytes
    writer = BufferWriter(surface.expected_size)
    for row in reversed(range(surface.height)):
        src = surface.data[row * row_bytes : (row + 1) * row_bytes]
        line = bytearray(row_bytes)
        for channel, source_channel in enumerate(BGRA_FROM_RGBA):
            line[channel::BYTES_PER_PIXEL] = src[source_channel::BYTES_PER_PIXEL]
        writer.raw(line)
    return writer.getvalue()
