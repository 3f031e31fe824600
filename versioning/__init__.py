"""
Asset Versioning: Per-Request Static Asset Version Cache

Resolves version labels to stable cache-busting strings for the
lifetime of a single request, with a timestamp fallback and an
optional pinned static version.
"""

from .cache.store import VersionCache
from .scope import new_cache, request_scope

__version__ = "0.1.2"

__all__ = ["VersionCache", "new_cache", "request_scope"]
