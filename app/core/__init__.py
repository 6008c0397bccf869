"""Core module exports."""

from app.core.exceptions import (
    AppException,
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from app.core.security import (
    TokenPayload,
    create_access_token,
    decode_token,
    hash_password,
    verify_access_token,
    verify_password,
)

__all__ = [
    "AppException",
    "AuthenticationError",
    "AuthorizationError",
    "ConflictError",
    "NotFoundError",
    "TokenPayload",
    "ValidationError",
    "create_access_token",
    "decode_token",
    "hash_password",
    "verify_access_token",
    "verify_password",
]
