"""Request DTOs.

Carriers for incoming payloads, one per API operation. Each knows how to
validate a raw payload and how to turn itself into a persistence call payload.
"""

from app.dtos.request.base import (
    RequestDto,
    RequestSchema,
    ValidationFailure,
    ValidationResult,
)
from app.dtos.request.create_book import CreateBookDto, CreateBookSchema
from app.dtos.request.user_login import UserLoginDto, UserLoginSchema
from app.dtos.request.user_signup import UserSignupDto, UserSignupSchema

__all__ = [
    "CreateBookDto",
    "CreateBookSchema",
    "RequestDto",
    "RequestSchema",
    "UserLoginDto",
    "UserLoginSchema",
    "UserSignupDto",
    "UserSignupSchema",
    "ValidationFailure",
    "ValidationResult",
]
