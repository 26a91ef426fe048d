"""
Canonical content - the string that is both embedded and stored.

Images become base64 of their raw bytes; text is used as-is.
"""

from __future__ import annotations

import base64
import logging
from pathlib import Path

import httpx

from semantic_search_pipeline.core.errors import SourceReadError
from semantic_search_pipeline.core.protocols import EmbeddingMode

logger = logging.getLogger(__name__)

FETCH_TIMEOUT = 30.0


def encode_bytes(data: bytes, mode: EmbeddingMode) -> str:
    """Convert raw source bytes to canonical content for ``mode``."""
    if mode == "image":
        return base64.b64encode(data).decode("ascii")
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise SourceReadError(f"Text source is not valid UTF-8: {e}") from e


def read_file(path: str | Path) -> bytes:
    try:
        return Path(path).read_bytes()
    except OSError as e:
        raise SourceReadError(f"Could not read {path}: {e}") from e


def fetch_url(url: str, client: httpx.Client | None = None) -> bytes:
    """Download ``url`` and return the response body."""
    try:
        if client is not None:
            response = client.get(url)
        else:
            response = httpx.get(url, follow_redirects=True, timeout=FETCH_TIMEOUT)
        response.raise_for_status()
    except httpx.HTTPError as e:
        raise SourceReadError(f"Could not fetch {url}: {e}") from e

    logger.debug(f"Fetched {len(response.content)} bytes from {url}")
    return response.content


def is_remote(source: str) -> bool:
    """True when the source is fetched over HTTP rather than read from disk."""
    return "http" in source


def load_query_content(
    source: str,
    mode: EmbeddingMode,
    http_client: httpx.Client | None = None,
) -> str:
    """
    Turn one line of user input into canonical content.

    Text mode returns the line verbatim. Image mode fetches the bytes
    over HTTP when the source looks like a URL, otherwise reads a local
    file, and base64-encodes them either way.
    """
    if mode == "text":
        return source

    data = fetch_url(source, http_client) if is_remote(source) else read_file(source)
    return encode_bytes(data, "image")
