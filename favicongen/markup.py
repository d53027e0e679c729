from __future__ import annotations

from typing import List


def normalize_base_path(base_path: str = "/") -> str:
    """Strip trailing slashes so file names can be joined with a single '/'."""
    return base_path.rstrip("/")


def generate_html(base_path: str = "/", has_svg: bool = False, has_manifest: bool = True) -> str:
    """Return the <link> tags for the document <head>, one per line."""
    base = normalize_base_path(base_path)
    links: List[str] = [f'<link rel="icon" href="{base}/favicon.ico" sizes="any">']
    if has_svg:
        links.append(f'<link rel="icon" href="{base}/icon.svg" type="image/svg+xml">')
    links.append(f'<link rel="apple-touch-icon" href="{base}/apple-touch-icon.png">')
    if has_manifest:
        links.append(f'<link rel="manifest" href="{base}/manifest.webmanifest">')
    return "\n".join(links)
