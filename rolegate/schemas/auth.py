"""Request/response schemas for auth endpoints."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_ROLE = "regular"
ADMIN_ROLE = "admin"

Role = Literal["regular", "admin"]


class CreateUserRequest(BaseModel):
    """Registration body. role defaults to 'regular'."""

    username: str = Field(..., description="Username (unique key, case-sensitive)")
    password: str = Field(..., description="Plain-text password; hashed before storage")
    role: Role = Field(default=DEFAULT_ROLE, description="Role embedded in issued tokens")


class LoginRequest(BaseModel):
    """Credentials for login."""

    username: str = Field(..., description="Username")
    password: str = Field(..., description="Password")


class TokenResponse(BaseModel):
    """JWT access token returned after successful login."""

    accessToken: str = Field(..., description="JWT access token")


class TokenClaims(BaseModel):
    """Identity carried inside an access token and attached to the request by the guard."""

    model_config = ConfigDict(frozen=True)

    username: str
    role: str
