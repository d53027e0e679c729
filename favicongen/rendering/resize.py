from __future__ import annotations

import io

from PIL import Image


def contain(img: Image.Image, size: int) -> Image.Image:
    """Fit an image into a transparent square canvas without cropping."""
    if img.width == size and img.height == size:
        return img
    ratio = min(size / float(img.width), size / float(img.height))
    width = max(1, int(round(img.width * ratio)))
    height = max(1, int(round(img.height * ratio)))
    fitted = img.resize((width, height), Image.LANCZOS)
    canvas = Image.new("RGBA", (size, size), (0, 0, 0, 0))
    canvas.paste(fitted, ((size - width) // 2, (size - height) // 2))
    return canvas


def resize_rgba(img: Image.Image, width: int, height: int) -> bytes:
    """Return raw RGBA bytes, row-major and top-to-bottom, at the given size."""
    img = img.convert("RGBA")
    if img.size != (width, height):
        img = img.resize((width, height), Image.BICUBIC)
    return img.tobytes("raw", "RGBA")


def to_png(img: Image.Image, size: int) -> bytes:
    img = img.convert("RGBA")
    if img.size != (size, size):
        img = img.resize((size, size), Image.LANCZOS)
    out = io.BytesIO()
    img.save(out, format="PNG")
    return out.getvalue()
