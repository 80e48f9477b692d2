"""Core app configuration, database and security primitives."""

from petconnect.core.config import get_settings, settings

__all__ = ["get_settings", "settings"]
