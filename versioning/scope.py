"""
Request Scope Helpers

The host framework decides where a request begins and ends. These
helpers create the fresh VersionCache for that scope and apply the
process-wide static version from settings, if one is configured.

Usage:
    with request_scope() as cache:
        href = versioned_url("/static/style.css", cache)
"""

import logging
from contextlib import contextmanager
from typing import Callable, Iterator, Optional

from .cache.store import VersionCache
from .config.settings import settings

logger = logging.getLogger(__name__)


def new_cache(
    static_version: Optional[str] = None,
    clock: Optional[Callable[[], float]] = None,
) -> VersionCache:
    """
    Create a fresh cache for one request.

    Args:
        static_version: Version to pin (default settings.STATIC_VERSION)
        clock: Time source passed through to the cache

    Returns:
        A new VersionCache, with the static version pinned when non-empty
    """
    cache = VersionCache(clock=clock)

    if static_version is None:
        static_version = settings.STATIC_VERSION
    if static_version:
        cache.set_static(static_version)

    return cache


@contextmanager
def request_scope(
    static_version: Optional[str] = None,
    clock: Optional[Callable[[], float]] = None,
) -> Iterator[VersionCache]:
    """Yield a new cache for the duration of one request."""
    cache = new_cache(static_version=static_version, clock=clock)
    try:
        yield cache
    finally:
        logger.debug(f"Request scope closed with {len(cache)} resolved label(s)")
