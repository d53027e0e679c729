import struct

import pytest

from favicongen.ico import (
    BITMAP_INFO_SIZE,
    DIRECTORY_ENTRY_SIZE,
    HEADER_SIZE,
    InvalidSurfaceError,
    RasterSurface,
    bitmap_info_header,
    directory_entry,
    encode,
    encode_rgba,
    file_header,
    pixel_payload,
)

PAYLOAD_OFFSET = HEADER_SIZE + DIRECTORY_ENTRY_SIZE + BITMAP_INFO_SIZE


def solid(width, height, rgba):
    return RasterSurface(width, height, bytes(rgba) * (width * height))


@pytest.mark.parametrize("width,height", [(1, 1), (2, 3), (16, 16), (32, 32), (255, 2)])
def test_container_length(width, height):
    out = encode(solid(width, height, (1, 2, 3, 4)))
    assert len(out) == 6 + 16 + 40 + width * height * 4


@pytest.mark.parametrize("width,height", [(1, 1), (5, 7), (32, 32)])
def test_directory_size_and_offset(width, height):
    out = encode(solid(width, height, (0, 0, 0, 0)))
    size, offset = struct.unpack_from("<II", out, HEADER_SIZE + 8)
    assert size == width * height * 4 + 40
    assert offset == 22


@pytest.mark.parametrize("width,height", [(1, 1), (4, 9), (32, 32)])
def test_bitmap_info_reports_doubled_height(width, height):
    out = encode(solid(width, height, (0, 0, 0, 0)))
    info = out[HEADER_SIZE + DIRECTORY_ENTRY_SIZE : PAYLOAD_OFFSET]
    fields = struct.unpack("<IiiHHIIiiII", info)
    assert fields == (40, width, height * 2, 1, 32, 0, width * height * 4, 0, 0, 0, 0)


def test_segments():
    assert file_header(1) == b"\x00\x00\x01\x00\x01\x00"
    assert directory_entry(32, 32, 4136, 22) == struct.pack("<BBBBHHII", 32, 32, 0, 0, 1, 32, 4136, 22)
    assert len(bitmap_info_header(32, 32, 4096)) == BITMAP_INFO_SIZE


def test_pixels_are_flipped_and_reordered():
    data = bytes(
        [10, 20, 30, 255, 1, 2, 3, 4]  # top row
        + [5, 6, 7, 8, 9, 11, 12, 13]  # bottom row
    )
    payload = pixel_payload(RasterSurface(2, 2, data))
    # stored rows are bottom-up
    assert payload[0:8] == bytes([7, 6, 5, 8, 12, 11, 9, 13])
    assert payload[8:12] == bytes([30, 20, 10, 255])
    assert payload[12:16] == bytes([3, 2, 1, 4])


def test_pixel_mapping_matches_row_formula():
    width, height = 3, 4
    data = bytes(range(width * height * 4))
    payload = pixel_payload(RasterSurface(width, height, data))
    row_bytes = width * 4
    for r in range(height):
        for c in range(width):
            src = r * row_bytes + c * 4
            dst = (height - 1 - r) * row_bytes + c * 4
            red, green, blue, alpha = data[src : src + 4]
            assert payload[dst : dst + 4] == bytes([blue, green, red, alpha])


def test_solid_surface_payload():
    out = encode(solid(32, 32, (0x11, 0x22, 0x33, 0x44)))
    payload = out[PAYLOAD_OFFSET:]
    assert len(payload) == 4096
    assert payload == bytes([0x33, 0x22, 0x11, 0x44]) * 1024


def test_opaque_red_icon():
    out = encode_rgba(bytes([255, 0, 0, 255]) * 1024, 32, 32)
    assert out[:6] == bytes.fromhex("00 00 01 00 01 00")
    assert out[6] == 0x20
    assert out[7] == 0x20
    payload = out[PAYLOAD_OFFSET:]
    assert all(payload[i : i + 4] == b"\x00\x00\xff\xff" for i in range(0, len(payload), 4))


def test_encode_is_deterministic():
    surface = RasterSurface(3, 2, bytes(range(24)))
    assert encode(surface) == encode(surface)


def test_malformed_surface_is_rejected():
    with pytest.raises(InvalidSurfaceError) as excinfo:
        encode(RasterSurface(4, 4, b"\x00\x00\x00"))
    assert excinfo.value.expected == 64
    assert excinfo.value.actual == 3
    assert "64" in str(excinfo.value)


def test_wide_surface_truncates_directory_dimensions():
    out = encode(solid(256, 1, (0, 0, 0, 0)))
    assert out[6] == 0
    assert out[7] == 1
    assert struct.unpack_from("<i", out, HEADER_SIZE + DIRECTORY_ENTRY_SIZE + 4)[0] == 256


def test_payload_is_written_in_full_bottom_row_first():
    surface = RasterSurface(1, 3, bytes([1, 0, 0, 9, 2, 0, 0, 9, 3, 0, 0, 9]))
    assert pixel_payload(surface) == bytes([0, 0, 3, 9, 0, 0, 2, 9, 0, 0, 1, 9])
