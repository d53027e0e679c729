from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Union

import httpx
from PIL import Image

from .ico import encode_rgba
from .markup import generate_html
from .rendering import MIN_SOURCE_SIZE, SourceImage, SourceImageError, contain, load_source, resize_rgba, to_png
from .sources import Source, read_source
from .webmanifest import generate_web_manifest

logger = logging.getLogger(__name__)

Warner = Callable[[str], None]

ICO_SIZE = 32
ICO_NAME = "favicon.ico"
SVG_NAME = "icon.svg"
MANIFEST_NAME = "manifest.webmanifest"
PNG_VARIANTS = (
    ("icon-512.png", 512),
    ("icon-192.png", 192),
    ("apple-touch-icon.png", 180),
)


def console_warn(message: str) -> None:
    print(f"\x1b[93m[warn]\x1b[39m {message}", file=sys.stderr)


def default_output_dir() -> str:
    return os.path.join(os.getcwd(), "favicons")


@dataclass
class FaviconOptions:
    source: Source
    output_dir: str = field(default_factory=default_output_dir)
    base_path: str = "/"
    warn: Union[Warner, None, bool] = console_warn
    overwrite: bool = False
    manifest: bool = True


@dataclass(frozen=True)
class FaviconResult:
    html: str
    files: List[str]


class FaviconBuilder:
    def __init__(self, options: FaviconOptions, client: Optional[httpx.Client] = None) -> None:
        self.options = options
        self._client = client

    def build(self) -> FaviconResult:
        data = read_source(self.options.source, self._client)
        source = load_source(data)
        info = source.info
        logger.debug("Source image %dx%d (%s)", info.width, info.height, info.format or "unknown")
        self._validate_size(source)

        if not info.is_svg:
            self._warn("Source image is not an SVG - skipping SVG output")

        base = source.image
        if not info.is_square:
            self._warn("Source image is not square - it is HIGHLY recommended that input image is square")
            base = contain(base, max(base.width, base.height, MIN_SOURCE_SIZE))

        outputs = self._render_outputs(base)
        if info.is_svg:
            outputs[SVG_NAME] = data

        files = self._write_outputs(outputs)
        html = generate_html(self.options.base_path, has_svg=info.is_svg, has_manifest=self.options.manifest)
        return FaviconResult(html=html, files=files)

    def _render_outputs(self, base: Image.Image) -> Dict[str, bytes]:
        outputs: Dict[str, bytes] = {}
        for name, size in PNG_VARIANTS:
            outputs[name] = to_png(base, size)
        outputs[ICO_NAME] = encode_rgba(resize_rgba(base, ICO_SIZE, ICO_SIZE), ICO_SIZE, ICO_SIZE)
        if self.options.manifest:
            outputs[MANIFEST_NAME] = generate_web_manifest(self.options.base_path).encode("utf-8")
        return outputs

    def _write_outputs(self, outputs: Dict[str, bytes]) -> List[str]:
        output_dir = self.options.output_dir
        paths = {name: os.path.join(output_dir, name) for name in outputs}
        if not self.options.overwrite:
            existing = [path for path in paths.values() if os.path.exists(path)]
            if existing:
                raise FileExistsError(
                    "Refusing to overwrite existing files (use overwrite): " + ", ".join(sorted(existing))
                )
        os.makedirs(output_dir, exist_ok=True)
        for name, path in paths.items():
            with open(path, "wb") as handle:
                handle.write(outputs[name])
            logger.debug("Wrote %s (%d bytes)", path, len(outputs[name]))
        return list(paths.values())

    def _warn(self, message: str) -> None:
        warn = self.options.warn
        if warn is True:
            warn = console_warn
        if not warn:
            return
        warn(message)

    @staticmethod
    def _validate_size(source: SourceImage) -> None:
        info = source.info
        if info.is_svg:
            return
        if info.width < MIN_SOURCE_SIZE or info.height < MIN_SOURCE_SIZE:
            raise SourceImageError(
                f"Source image must be at least {MIN_SOURCE_SIZE}x{MIN_SOURCE_SIZE} pixels"
            )


def create_favicon(options: Optional[FaviconOptions], client: Optional[httpx.Client] = None) -> FaviconResult:
    """Generate favicon variations from a source image.

    Writes PNG variants, a 32x32 favicon.ico, an optional web manifest and,
    for SVG sources, an icon.svg copy into options.output_dir. Returns the
    <link> markup referencing them.
    """
    if not options:
        raise ValueError("No options specified")
    if options.source is None or options.source == "":
        raise ValueError("No source file specified")
    return FaviconBuilder(options, client).build()
