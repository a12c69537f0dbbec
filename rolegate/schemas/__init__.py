"""Pydantic request/response schemas."""

from rolegate.schemas.auth import (
    ADMIN_ROLE,
    DEFAULT_ROLE,
    CreateUserRequest,
    LoginRequest,
    TokenClaims,
    TokenResponse,
)
from rolegate.schemas.health import HealthResponse

__all__ = [
    "ADMIN_ROLE",
    "CreateUserRequest",
    "DEFAULT_ROLE",
    "HealthResponse",
    "LoginRequest",
    "TokenClaims",
    "TokenResponse",
]
