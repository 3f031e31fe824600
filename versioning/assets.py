"""
Asset Output Helpers

Thin wrappers that turn cache values into output: writing the version
straight to a stream, or appending it to an asset URL as a query value.
"""

import sys
from typing import Any, Optional, TextIO
from urllib.parse import quote, urlsplit, urlunsplit

from .cache.store import VersionCache
from .config.settings import settings


def write_version(
    cache: VersionCache,
    label: Any = None,
    pin_static: bool = False,
    stream: Optional[TextIO] = None,
) -> None:
    """
    Write the emitted version to a stream.

    Args:
        cache: Cache for the current request
        label: Version label, or None for the default
        pin_static: Also pin the label as the static version
        stream: Destination (default sys.stdout); no newline is added
    """
    out = stream if stream is not None else sys.stdout
    out.write(cache.emit(label, pin_static=pin_static))


def versioned_url(
    path: str,
    cache: VersionCache,
    label: Any = None,
    param: Optional[str] = None,
) -> str:
    """
    Append the version to an asset URL as a query value.

    Args:
        path: Asset URL or path, with or without an existing query string
        cache: Cache for the current request
        label: Version label, or None for the default
        param: Query parameter name (default settings.QUERY_PARAM)

    Returns:
        e.g. "/static/style.css?v=1.0.0"

    Example:
        versioned_url("/app.js?lang=en", cache, "v2") -> "/app.js?lang=en&v=v2"
        versioned_url("/icons.svg#home", cache, "v2") -> "/icons.svg?v=v2#home"
    """
    name = param if param is not None else settings.QUERY_PARAM
    scheme, netloc, url_path, query, fragment = urlsplit(path)

    # Version belongs in the query, ahead of any fragment
    pair = f"{name}={quote(cache.emit(label), safe='')}"
    query = f"{query}&{pair}" if query else pair

    return urlunsplit((scheme, netloc, url_path, query, fragment))
