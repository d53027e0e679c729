from __future__ import annotations

import io

from PIL import Image, ImageOps, UnidentifiedImageError

from .base import ImageInfo, SourceConverter, SourceImage, SourceImageError


class RasterConverter(SourceConverter):
    def accepts(self, data: bytes) -> bool:
        return True

    def load(self, data: bytes) -> SourceImage:
        try:
            with Image.open(io.BytesIO(data)) as img:
                fmt = (img.format or "").lower()
                img = ImageOps.exif_transpose(img)
                img.load()
                img = self._ensure_alpha(img).copy()
        except Image.DecompressionBombError as exc:
            raise SourceImageError(f"Source image is too large: {exc}") from exc
        except (UnidentifiedImageError, OSError) as exc:
            raise SourceImageError("Input buffer contains unsupported image format") from exc
        return SourceImage(img, ImageInfo(img.width, img.height, fmt))
