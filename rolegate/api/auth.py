"""Registration, JWT login, and auth dependencies (get_current_user, require_role)."""

import logging
from collections.abc import Callable
from typing import Annotated

import jwt
from fastapi import APIRouter, Depends, Header, HTTPException, Request, status
from fastapi.responses import PlainTextResponse

from rolegate.core.config import Settings
from rolegate.core.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)
from rolegate.core.state import get_app_settings, get_user_store
from rolegate.schemas.auth import (
    CreateUserRequest,
    LoginRequest,
    TokenClaims,
    TokenResponse,
)
from rolegate.services.user_store import UserStore

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/createuser", status_code=status.HTTP_201_CREATED, response_class=PlainTextResponse)
def create_user(
    body: CreateUserRequest,
    store: Annotated[UserStore, Depends(get_user_store)],
) -> str:
    """
    Register a user. Usernames are not checked for uniqueness.

    Plain def: FastAPI runs it in the threadpool while bcrypt hashes.
    """
    try:
        password_hash = hash_password(body.password)
    except Exception:
        logger.exception("Password hashing failed during registration")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error",
        )
    store.create(body.username, password_hash, body.role)
    logger.info("User created", extra={"username": body.username, "role": body.role})
    return "User created successfully"


@router.post("/users/login", response_model=TokenResponse)
def login(
    body: LoginRequest,
    store: Annotated[UserStore, Depends(get_user_store)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> TokenResponse:
    """
    Authenticate with username and password; returns a JWT access token.
    Include the token in the Authorization header as: Bearer <accessToken>

    Plain def: FastAPI runs it in the threadpool while bcrypt verifies.
    """
    user = store.find_by_username(body.username)
    if user is None:
        logger.info("Login failed", extra={"username": body.username, "reason": "unknown_user"})
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Cannot find user",
        )
    if not verify_password(body.password, user.password_hash):
        logger.info("Login failed", extra={"username": body.username, "reason": "bad_password"})
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Passwords did not match",
        )
    try:
        token = create_access_token(
            TokenClaims(username=user.username, role=user.role), settings
        )
    except Exception:
        logger.exception("Token signing failed during login")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error",
        )
    logger.info("Login succeeded", extra={"username": user.username, "role": user.role})
    return TokenResponse(accessToken=token)


def _extract_token(authorization: str | None) -> str | None:
    """Second word of 'Authorization: <scheme> <token>'; None if absent or empty."""
    if not authorization:
        return None
    parts = authorization.split(" ")
    if len(parts) < 2 or not parts[1]:
        return None
    return parts[1]


def get_current_user(
    request: Request,
    settings: Annotated[Settings, Depends(get_app_settings)],
    authorization: Annotated[str | None, Header()] = None,
) -> TokenClaims:
    """
    Dependency: require a valid JWT in the Authorization header and return its claims.

    Raises 401 if the header or its token segment is missing. Any presented
    token that does not verify, whatever the scheme word, is a 403.
    """
    token = _extract_token(authorization)
    if token is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    try:
        claims = decode_access_token(token, settings)
    except jwt.PyJWTError as e:
        logger.debug("Rejected bearer token: %s", e)
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid token",
        )
    request.state.user = claims
    return claims


def require_role(role: str) -> Callable[..., TokenClaims]:
    """Build a dependency that admits only tokens whose role equals `role` exactly."""

    def _require_role(
        current_user: Annotated[TokenClaims, Depends(get_current_user)],
    ) -> TokenClaims:
        if current_user.role != role:
            logger.debug(
                "Role check failed",
                extra={"username": current_user.username, "role": current_user.role, "required": role},
            )
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Access denied",
            )
        return current_user

    return _require_role
