"""Cache module for asset versioning."""

from .store import VersionCache

__all__ = ["VersionCache"]
