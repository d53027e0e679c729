from __future__ import annotations

import json

from .markup import normalize_base_path

MANIFEST_ICON_SIZES = (192, 512)


def generate_web_manifest(base_path: str = "/") -> str:
    """Return a JSON web manifest listing the 192px and 512px icons."""
    base = normalize_base_path(base_path)
    icons = [
        {"src": f"{base}/icon-{size}.png", "type": "image/png", "sizes": f"{size}x{size}"}
        for size in MANIFEST_ICON_SIZES
    ]
    return json.dumps({"icons": icons}, indent=2)
