"""Configuration module for asset versioning."""

from .settings import Settings, settings

__all__ = ["Settings", "settings"]
