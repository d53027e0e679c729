from __future__ import annotations

import io
import re

from PIL import Image

from .base import MIN_SOURCE_SIZE, ImageInfo, SourceConverter, SourceImage, SourceImageError

_SNIFF_BYTES = 4096
_SVG_ROOT_RE = re.compile(
    rb"^\s*(<\?xml[^>]*>\s*)?(<!--.*?-->\s*|<!DOCTYPE[^>]*>\s*)*<svg[\s>]",
    re.DOTALL | re.IGNORECASE,
)


def looks_like_svg(data: bytes) -> bool:
    head = data[:_SNIFF_BYTES].lstrip(b"\xef\xbb\xbf")
    return bool(_SVG_ROOT_RE.match(head))


class SvgConverter(SourceConverter):
    """Rasterize SVG documents so the longer side is at least MIN_SOURCE_SIZE."""

    def accepts(self, data: bytes) -> bool:
        return looks_like_svg(data)

    def load(self, data: bytes) -> SourceImage:
        natural = self._render(data, 1.0)
        width, height = natural.size
        longest = max(width, height)
        img = natural
        if longest < MIN_SOURCE_SIZE:
            img = self._render(data, MIN_SOURCE_SIZE / float(longest))
        return SourceImage(self._ensure_alpha(img), ImageInfo(width, height, "svg"))

    @staticmethod
    def _render(data: bytes, scale: float) -> Image.Image:
        try:
            import cairosvg
        except (ImportError, OSError) as exc:  # pragma: no cover
            raise RuntimeError(
                "SVG sources require CairoSVG and the cairo library. Install with: pip install cairosvg"
            ) from exc
        try:
            png = cairosvg.svg2png(bytestring=data, scale=scale)
        except Exception as exc:
            raise SourceImageError("Input buffer contains unsupported image format") from exc
        with Image.open(io.BytesIO(png)) as img:
            img.load()
            return img.copy()
