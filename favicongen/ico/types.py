from __future__ import annotations

from dataclasses import dataclass

BYTES_PER_PIXEL = 4


class InvalidSurfaceError(ValueError):
    """Raised when an RGBA buffer does not match its declared dimensions."""

    def __init__(self, width: int, height: int, expected: int, actual: int) -> None:
        super().__init__(
            f"Raster surface {width}x{height} needs {expected} bytes of RGBA data, got {actual}"
        )
        self.width = width
        self.height = height
        self.expected = expected
        self.actual = actual


@dataclass(frozen=True)
class RasterSurface:
    """Row-major RGBA pixel buffer, rows top-to-bottom."""

    width: int
    height: int
    data: bytes

    @property
    def row_bytes(self) -> int:
        return self.width * BYTES_PER_PIXEL

    @property
    def expected_size(self) -> int:
        return self.width * self.height * BYTES_PER_PIXEL

    def validate(self) -> None:
        """Validate the buffer length against width and height."""
        if len(self.data) != self.expected_size:
            raise InvalidSurfaceError(self.width, self.height, self.expected_size, len(self.data))
