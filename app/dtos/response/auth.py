"""Authentication response DTO."""

from typing import Any

from pydantic import BaseModel, Field

from app.dtos.response.user import UserDto


class AuthResponseDto(BaseModel):
    """Response for successful signup or login."""

    message: str = Field(examples=["Login successful"])
    token: str = Field(description="JWT access token for the Authorization header")
    user: UserDto

    @classmethod
    def success(cls, message: str, token: str, user: Any) -> "AuthResponseDto":
        """Build the response, projecting ``user`` through :class:`UserDto`."""
        if not isinstance(user, UserDto):
            user = UserDto.from_model(user)
        return cls(message=message, token=token, user=user)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)
