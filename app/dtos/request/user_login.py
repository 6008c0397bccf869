"""Request DTO for user login."""

from pydantic import EmailStr, Field

from app.dtos.request.base import RequestDto, RequestSchema


class UserLoginSchema(RequestSchema):
    """Rules for a login payload."""

    email: EmailStr = Field(..., examples=["reader@example.com"])
    password: str = Field(..., min_length=1, max_length=128)


class UserLoginDto(RequestDto):
    """Login credentials."""

    schema = UserLoginSchema
    secret_fields = frozenset({"password"})

    email: str
    password: str
