"""Core app configuration, security, and per-app state."""

from rolegate.core.config import Settings, get_settings
from rolegate.core.state import get_app_settings, get_user_store

__all__ = ["Settings", "get_app_settings", "get_settings", "get_user_store"]
