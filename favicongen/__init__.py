__version__ = "2.1.0"

from .favicon import FaviconBuilder, FaviconOptions, FaviconResult, create_favicon
from .ico import InvalidSurfaceError, RasterSurface, encode
from .markup import generate_html
from .webmanifest import generate_web_manifest

__all__ = [
    "FaviconBuilder",
    "FaviconOptions",
    "FaviconResult",
    "InvalidSurfaceError",
    "RasterSurface",
    "create_favicon",
    "encode",
    "generate_html",
    "generate_web_manifest",
]
