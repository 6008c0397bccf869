"""User response DTO."""

from uuid import UUID

from app.dtos.response.base import ResponseDto


class UserDto(ResponseDto):
    """Public user projection; never carries the password hash."""

    id: UUID | str
    username: str
    email: str
