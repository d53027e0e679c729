from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .favicon import FaviconOptions, console_warn, create_favicon


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="create-favicon",
        description="Generate favicons from a source image",
        epilog=(
            "Examples:\n"
            "  create-favicon source.svg\n"
            "  create-favicon https://example.com/source.png --output-dir icons"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("source", nargs="?", help="Source image (file path or http(s) URL)")
    parser.add_argument("output", nargs="?", help="Output directory (default: ./favicons)")
    parser.add_argument("--output-dir", metavar="DIR", help="Output directory (overrides the positional argument)")
    parser.add_argument("--overwrite", action="store_true", help="Overwrite existing files")
    parser.add_argument("--base-path", metavar="PATH", default="/", help="Base path for printed HTML and web manifest")
    parser.add_argument("--no-manifest", action="store_true", help="Skip outputting a webmanifest")
    parser.add_argument("--no-warn", action="store_true", help="Disable warnings")
    parser.add_argument("--verbose", "-V", action="store_true", help="Log each generation step to stderr")
    parser.add_argument("--version", "-v", action="version", version=f"%(prog)s {__version__}")
    return parser


def _resolve_options(args: argparse.Namespace) -> FaviconOptions:
    options = FaviconOptions(
        source=args.source,
        base_path=args.base_path,
        warn=None if args.no_warn else console_warn,
        overwrite=args.overwrite,
        manifest=not args.no_manifest,
    )
    output_dir = args.output_dir or args.output
    if output_dir:
        options.output_dir = output_dir
    return options


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.source:
        parser.print_help()
        return 1
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    try:
        result = create_favicon(_resolve_options(args))
    except Exception as exc:
        print(str(exc), file=sys.stderr)
        return 1
    print(result.html)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
