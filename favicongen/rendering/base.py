from __future__ import annotations

from dataclasses import dataclass

from PIL import Image

MIN_SOURCE_SIZE = 512


class SourceImageError(ValueError):
    """Raised when source bytes cannot be used as a favicon source."""


@dataclass(frozen=True)
class ImageInfo:
    width: int
    height: int
    format: str

    @property
    def is_svg(self) -> bool:
        return self.format == "svg"

    @property
    def is_square(self) -> bool:
        return self.width == self.height


@dataclass(frozen=True)
class SourceImage:
    image: Image.Image
    info: ImageInfo


class SourceConverter:
    def accepts(self, data: bytes) -> bool:
        raise NotImplementedError

    def load(self, data: bytes) -> SourceImage:
        raise NotImplementedError

    @staticmethod
    def _ensure_alpha(img: Image.Image) -> Image.Image:
        if img.mode.startswith("I"):
            # 16-bit and 32-bit integer samples; scale to 8 bits instead of clipping
            img = img.convert("I").point(lambda v: v * (1 / 256)).convert("L")
        if img.mode != "RGBA":
            return img.convert("RGBA")
        return img
