"""Password hashing and JWT creation/verification for authentication."""

from datetime import UTC, datetime
from typing import Any

import bcrypt
import jwt
from jwt.utils import base64url_decode, base64url_encode
from pydantic import ValidationError

from rolegate.core.config import Settings
from rolegate.schemas.auth import TokenClaims

# Bcrypt cost (rounds). Fixed here; never chosen per call.
BCRYPT_ROUNDS = 10

# bcrypt only looks at the first 72 bytes of the password.
BCRYPT_MAX_BYTES = 72


def hash_password(plain_password: str) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    pw_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=BCRYPT_ROUNDS)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash. Malformed hashes never match."""
    pw_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError, AttributeError):
        return False


def create_access_token(claims: TokenClaims, settings: Settings) -> str:
    """
    Create a JWT access token carrying username and role.

    No exp claim is set: the token stays valid until ACCESS_TOKEN_SECRET changes.
    """
    payload: dict[str, Any] = {
        "username": claims.username,
        "role": claims.role,
        "iat": datetime.now(UTC),
    }
    return jwt.encode(
        payload,
        settings.ACCESS_TOKEN_SECRET.get_secret_value(),
        algorithm=settings.JWT_ALGORITHM,
    )


def _require_canonical_signature(token: str) -> None:
    """
    Reject signatures whose base64url text is not the canonical encoding of its bytes.

    Base64 decoding ignores the unused low bits of the last character, so a
    signature edited there would otherwise still verify.
    """
    segments = token.split(".")
    if len(segments) != 3:
        # Structural problems are reported by jwt.decode.
        return
    signature = segments[2]
    try:
        canonical = base64url_encode(base64url_decode(signature)).decode("ascii")
    except (ValueError, TypeError) as e:
        raise jwt.InvalidTokenError("Invalid signature encoding") from e
    if canonical != signature:
        raise jwt.InvalidSignatureError("Signature is not canonically encoded")


def decode_access_token(token: str, settings: Settings) -> TokenClaims:
    """
    Decode and validate a JWT; return its claims.
    Raises jwt.InvalidTokenError on a bad signature, malformed token, or missing claims.
    """
    _require_canonical_signature(token)
    try:
        payload = jwt.decode(
            token,
            settings.ACCESS_TOKEN_SECRET.get_secret_value(),
            algorithms=[settings.JWT_ALGORITHM],
        )
    except jwt.InvalidTokenError:
        raise
    except (jwt.PyJWTError, ValueError, TypeError) as e:
        raise jwt.InvalidTokenError(str(e)) from e
    try:
        return TokenClaims.model_validate(
            {"username": payload.get("username"), "role": payload.get("role")}
        )
    except ValidationError as e:
        raise jwt.InvalidTokenError("Token payload is missing username or role") from e
