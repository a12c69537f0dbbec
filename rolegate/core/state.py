"""Per-application state (settings, user store) exposed as FastAPI dependencies."""

from fastapi import Request

from rolegate.core.config import Settings
from rolegate.services.user_store import UserStore


def get_app_settings(request: Request) -> Settings:
    """Dependency that returns the settings the running app was built with."""
    return request.app.state.settings


def get_user_store(request: Request) -> UserStore:
    """Dependency that returns the app's in-memory user store."""
    return request.app.state.user_store
