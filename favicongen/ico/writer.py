from __future__ import annotations

import struct


class BufferWriter:
    """Fixed-size little-endian buffer with a write cursor."""

    def __init__(self, size: int) -> None:
        self._buf = bytearray(size)
        self._pos = 0

    def _pack(self, fmt: str, value: int) -> "BufferWriter":
        struct.pack_into(fmt, self._buf, self._pos, value)
        self._pos += struct.calcsize(fmt)
        return self

    def u8(self, value: int) -> "BufferWriter":
        return self._pack("<B", value & 0xFF)

    def u16(self, value: int) -> "BufferWriter":
        return self._pack("<H", value)

    def u32(self, value: int) -> "BufferWriter":
        return self._pack("<I", value)

    def i32(self, value: int) -> "BufferWriter":
        return self._pack("<i", value)

    def raw(self, data: bytes) -> "BufferWriter":
        end = self._pos + len(data)
        if end > len(self._buf):
            raise ValueError("Write past end of buffer")
        self._buf[self._pos : end] = data
        self._pos = end
        return self

    def getvalue(self) -> bytes:
        """Return the buffer; every byte must have been written."""
        if self._pos != len(self._buf):
            raise ValueError(f"Buffer incomplete: wrote {self._pos} of {len(self._buf)} bytes")
        return bytes(self._buf)
