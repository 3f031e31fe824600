"""
Version Cache Module

This module implements the per-request version cache used to build
cache-busting query values for static assets.

A label resolves to its own textual form the first time it is used and
keeps that value for the rest of the scope. Lookups without a label get
either the pinned static version or a timestamp computed once per scope.
"""

import logging
import time
from typing import Any, Callable, Dict, Optional

logger = logging.getLogger(__name__)


class VersionCache:
    """
    Request-scoped cache of static asset versions.

    One instance is meant to live for one request. The host creates it
    at the start of the request and drops it at the end; nothing is
    shared between instances.

    There is no locking. If an instance is shared between threads or
    tasks, simultaneous first lookups of the same label (or of the
    fallback) may each compute a value and the last write wins. The
    values written are equivalent, so callers still converge.

    Usage:
        cache = VersionCache()
        cache.resolve("v2")      # "v2"
        cache.resolve()          # e.g. "1760875200", same for the whole scope
        cache.set_static("1.0.0")
        cache.resolve()          # "1.0.0"

    Attributes:
        clock: Callable returning the current wall-clock time in seconds
    """

    def __init__(self, clock: Optional[Callable[[], float]] = None):
        """
        Initialize an empty version cache.

        Args:
            clock: Time source for the fallback value (default time.time)
        """
        self.clock = clock if clock is not None else time.time

        self._versions: Dict[str, str] = {}
        self._fallback: Optional[str] = None
        self._static_version: Optional[str] = None

    def resolve(self, label: Any = None) -> str:
        """
        Resolve a label to its version string.

        Args:
            label: Any value with a textual form, or None for the default

        Returns:
            The label's cached value. Without a label, the static version
            if one is pinned, otherwise the fallback timestamp.
        """
        if label is None:
            if self._static_version is not None:
                return self._static_version
            return self.resolve_fallback()

        key = str(label)
        if key not in self._versions:
            self._versions[key] = key

        return self._versions[key]

    def resolve_fallback(self) -> str:
        """
        Return the no-cache timestamp for this scope.

        The first call stores the current time in whole seconds; every
        later call returns that stored value.
        """
        if self._fallback is None:
            self._fallback = str(int(self.clock()))
            logger.debug(f"Computed fallback version {self._fallback}")

        return self._fallback

    def set_static(self, version: Any) -> None:
        """
        Pin a static version for all label-less lookups.

        The version is also registered as a label of its own, so
        resolve(version) returns it too.

        Args:
            version: The static version to use
        """
        value = str(version)
        if value not in self._versions:
            self._versions[value] = value

        self._static_version = value
        logger.debug(f"Pinned static version {value}")

    def emit(self, label: Any = None, pin_static: bool = False) -> str:
        """
        Produce the version string to display for an asset.

        Args:
            label: Version label, or None for the default
            pin_static: Also pin the label as the static version

        Returns:
            The version string; writing it anywhere is up to the caller
        """
        if label is not None and pin_static:
            self.set_static(label)

        if label is None and self._static_version is not None:
            return self._static_version

        return self.resolve(label)

    @property
    def versions(self) -> Dict[str, str]:
        """Copy of the labels resolved so far."""
        return dict(self._versions)

    @property
    def static_version(self) -> Optional[str]:
        """The pinned static version, or None."""
        return self._static_version

    @property
    def fallback(self) -> Optional[str]:
        """The fallback value, or None if it hasn't been computed yet."""
        return self._fallback

    def __contains__(self, label: Any) -> bool:
        return label is not None and str(label) in self._versions

    def __len__(self) -> int:
        return len(self._versions)

    def get_stats(self) -> Dict[str, Any]:
        """
        Get a summary of the cache state.

        Returns:
            Dictionary containing:
            - labels: Number of resolved labels
            - static_version: Pinned static version or None
            - fallback: Computed fallback or None
        """
        return {
            "labels": len(self._versions),
            "static_version": self._static_version,
            "fallback": self._fallback,
        }
