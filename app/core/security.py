"""Security utilities for authentication.

This module provides:
- Password hashing using Argon2 (PHC winner, OWASP recommended)
- JWT access token creation and verification
"""

from datetime import UTC, datetime, timedelta
from typing import Any
from uuid import UUID

import jwt
from argon2 import PasswordHasher
from argon2.exceptions import InvalidHash, VerificationError
from pydantic import BaseModel

from app.config import Settings, get_settings

# Argon2 configuration (OWASP recommended parameters)
_password_hasher = PasswordHasher(
    time_cost=3,
    memory_cost=65536,  # 64 MB
    parallelism=4,
    hash_len=32,
    salt_len=16,
)


class TokenPayload(BaseModel):
    """Decoded JWT token payload."""

    sub: str  # Subject (user_id as string)
    exp: datetime
    iat: datetime


def hash_password(password: str) -> str:
    """Hash a password using Argon2id.

    Args:
        password: Plain text password to hash.

    Returns:
        Argon2id hash string containing algorithm parameters and salt.

    Example:
        >>> hashed = hash_password("my_secure_password")
        >>> verify_password("my_secure_password", hashed)
        True
    """
    return _password_hasher.hash(password)


def verify_password(password: str, hashed_password: str) -> bool:
    """Verify a password against its hash.

    Uses constant-time comparison to prevent timing attacks.

    Args:
        password: Plain text password to verify.
        hashed_password: Argon2id hash to verify against.

    Returns:
        True if password matches, False otherwise.
    """
    try:
        _password_hasher.verify(hashed_password, password)
        return True
    except (VerificationError, InvalidHash):
        return False


def create_access_token(
    user_id: UUID,
    expires_delta: timedelta | None = None,
    settings: Settings | None = None,
) -> str:
    """Create a JWT access token.

    Args:
        user_id: User's UUID to encode in the token.
        expires_delta: Optional custom expiration time.
            Defaults to settings.access_token_expire_minutes.
        settings: Settings holding the signing key; the cached settings
            are used when omitted.

    Returns:
        Encoded JWT access token string.
    """
    settings = settings or get_settings()
    now = datetime.now(UTC)
    expire = now + (
        expires_delta if expires_delta else timedelta(minutes=settings.access_token_expire_minutes)
    )

    payload: dict[str, Any] = {
        "sub": str(user_id),
        "exp": expire,
        "iat": now,
    }

    return jwt.encode(
        payload,
        settings.secret_key,
        algorithm=settings.jwt_algorithm,
    )


def decode_token(token: str, settings: Settings | None = None) -> TokenPayload | None:
    """Decode and validate a JWT token.

    Args:
        token: JWT token string to decode.
        settings: Settings holding the signing key.

    Returns:
        TokenPayload if valid, None if invalid or expired.
    """
    settings = settings or get_settings()
    try:
        payload = jwt.decode(
            token,
            settings.secret_key,
            algorithms=[settings.jwt_algorithm],
        )
        return TokenPayload(
            sub=payload["sub"],
            exp=datetime.fromtimestamp(payload["exp"], tz=UTC),
            iat=datetime.fromtimestamp(payload["iat"], tz=UTC),
        )
    except jwt.InvalidTokenError:  # Includes ExpiredSignatureError
        return None
    except KeyError:
        return None


def verify_access_token(token: str, settings: Settings | None = None) -> UUID | None:
    """Verify an access token and extract the user ID.

    Args:
        token: JWT access token string.
        settings: Settings holding the signing key.

    Returns:
        User UUID if token is valid, None otherwise.
    """
    payload = decode_token(token, settings)
    if payload is None:
        return None
    try:
        return UUID(payload.sub)
    except ValueError:
        return None
