from __future__ import annotations

import logging
import os
import re
from typing import Optional, Union

import httpx

logger = logging.getLogger(__name__)

Source = Union[str, bytes, bytearray, "os.PathLike[str]"]

_URL_RE = re.compile(r"^https?://", re.IGNORECASE)
FETCH_TIMEOUT = 30.0


class SourceError(RuntimeError):
    """Raised when the source image cannot be fetched or read."""


def is_url(value: str) -> bool:
    return bool(_URL_RE.match(value))


def read_source(source: Source, client: Optional[httpx.Client] = None) -> bytes:
    """Return the raw bytes behind a path, URL or in-memory buffer."""
    if isinstance(source, (bytes, bytearray)):
        return bytes(source)
    if isinstance(source, os.PathLike):
        source = os.fspath(source)
    if not isinstance(source, str):
        raise TypeError("Source file must be a string (file path or URL) or bytes")
    if is_url(source):
        return download_image(source, client)
    return read_image(os.path.abspath(source))


def download_image(url: str, client: Optional[httpx.Client] = None) -> bytes:
    logger.debug("Fetching source image from %s", url)
    try:
        if client is None:
            with httpx.Client(timeout=FETCH_TIMEOUT, follow_redirects=True) as owned:
                response = owned.get(url)
        else:
            response = client.get(url)
    except httpx.HTTPError as exc:
        raise SourceError(f'Failed fetching image from "{url}": {exc}') from exc
    if response.status_code != 200:
        raise SourceError(
            f'Failed fetching image from "{url}": Server returned HTTP {response.status_code}'
        )
    return response.content


def read_image(path: str) -> bytes:
    logger.debug("Reading source image from %s", path)
    try:
        with open(path, "rb") as handle:
            return handle.read()
    except OSError as exc:
        raise SourceError(f'Could not read file "{path}": {exc.strerror or exc}') from exc
