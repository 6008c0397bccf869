"""Error envelope returned for every client-facing failure."""

from typing import Any

from fastapi import status
from pydantic import BaseModel, ConfigDict, Field


class ErrorDetail(BaseModel):
    """Detail for a single field violation."""

    model_config = ConfigDict(frozen=True)

    field: str
    message: str


class ErrorResponseDto(BaseModel):
    """Structured error response: ``{statusCode, message, details?}``."""

    model_config = ConfigDict(populate_by_name=True)

    status_code: int = Field(
        default=status.HTTP_500_INTERNAL_SERVER_ERROR,
        alias="statusCode",
        description="HTTP status code",
    )
    message: str = Field(description="Human-readable error message")
    details: list[ErrorDetail] | None = Field(
        default=None,
        description="Field-level violations (validation errors only)",
    )

    @classmethod
    def validation_error(
        cls,
        details: list[ErrorDetail] | list[dict[str, str]],
    ) -> "ErrorResponseDto":
        return cls(
            status_code=status.HTTP_400_BAD_REQUEST,
            message="Validation error",
            details=[ErrorDetail.model_validate(d) for d in details],
        )

    @classmethod
    def not_found(cls, resource: str = "Resource") -> "ErrorResponseDto":
        return cls(
            status_code=status.HTTP_404_NOT_FOUND,
            message=f"{resource} not found",
        )

    @classmethod
    def auth_error(cls, message: str = "Authentication failed") -> "ErrorResponseDto":
        return cls(
            status_code=status.HTTP_401_UNAUTHORIZED,
            message=message,
        )

    @classmethod
    def server_error(cls, error: BaseException | None = None) -> "ErrorResponseDto":
        """Generic 500 envelope.

        The error is accepted for symmetry with the other constructors but its
        text is never copied into the response.
        """
        return cls(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            message="Internal server error",
        )

    def to_dict(self) -> dict[str, Any]:
        """Wire representation; ``details`` is omitted when there are none."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")
