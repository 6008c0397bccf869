"""Request DTO for user signup."""

import re

from pydantic import EmailStr, Field, field_validator

from app.dtos.request.base import RequestDto, RequestSchema

_USERNAME_PATTERN = re.compile(r"^[A-Za-z0-9_]+$")


class UserSignupSchema(RequestSchema):
    """Rules for a signup payload.

    Password requirements:
    - Minimum 8 characters
    - Maximum 128 characters
    - At least one letter and one number
    """

    username: str = Field(
        ...,
        min_length=3,
        max_length=30,
        examples=["bookworm"],
    )
    email: EmailStr = Field(..., examples=["reader@example.com"])
    password: str = Field(
        ...,
        min_length=8,
        max_length=128,
        examples=["SecureP@ssw0rd!"],
    )

    @field_validator("username")
    @classmethod
    def validate_username(cls, v: str) -> str:
        if not _USERNAME_PATTERN.match(v):
            msg = "username may only contain letters, numbers and underscores"
            raise ValueError(msg)
        return v

    @field_validator("password")
    @classmethod
    def validate_password_strength(cls, v: str) -> str:
        """Validate password meets minimum security requirements."""
        has_letter = any(c.isalpha() for c in v)
        has_digit = any(c.isdigit() for c in v)
        if not (has_letter and has_digit):
            msg = "password must contain at least one letter and one number"
            raise ValueError(msg)
        return v


class UserSignupDto(RequestDto):
    """Signup credentials. Never persisted as-is."""

    schema = UserSignupSchema
    secret_fields = frozenset({"password"})

    username: str
    email: str
    password: str
