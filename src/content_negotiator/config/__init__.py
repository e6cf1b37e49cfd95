"""Configuration for content negotiation."""

from .settings import Settings, settings

__all__ = ["Settings", "settings"]
