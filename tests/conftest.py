import io

import pytest
from PIL import Image


def png_bytes(width: int, height: int, color=(255, 0, 0, 255)) -> bytes:
    out = io.BytesIO()
    Image.new("RGBA", (width, height), color).save(out, format="PNG")
    return out.getvalue()


def _cairosvg_available() -> bool:
    try:
        import cairosvg  # noqa: F401
    except (ImportError, OSError):
        return False
    return True


requires_cairo = pytest.mark.skipif(not _cairosvg_available(), reason="CairoSVG/cairo not available")

SQUARE_SVG = (
    b'<?xml version="1.0" encoding="UTF-8"?>\n'
    b'<svg xmlns="http://www.w3.org/2000/svg" width="64" height="64" viewBox="0 0 64 64">'
    b'<rect width="64" height="64" fill="#f00"/></svg>'
)


@pytest.fixture
def square_png() -> bytes:
    return png_bytes(512, 512)


@pytest.fixture
def source_file(tmp_path, square_png):
    path = tmp_path / "source.png"
    path.write_bytes(square_png)
    return path
