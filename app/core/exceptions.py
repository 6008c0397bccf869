"""Custom exceptions and exception handlers.

This module defines the application's exception hierarchy and registers
global exception handlers for FastAPI. Every handler answers with the same
``{statusCode, message, details?}`` envelope built by the DTO factory.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.dtos.factory import DtoFactory
from app.dtos.request.base import describe_error
from app.dtos.response import ErrorDetail, ErrorResponseDto

logger = logging.getLogger(__name__)


class AppException(Exception):
    """Base exception for all application errors.

    Attributes:
        message: Human-readable error message.
        status_code: HTTP status code.
        details: Field-level details, if any.
    """

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        *,
        details: list[ErrorDetail] | list[dict[str, str]] | None = None,
    ) -> None:
        self.message = message
        self.details = details
        super().__init__(message)

    def to_error_dto(self) -> ErrorResponseDto:
        """Convert exception to the error envelope."""
        return DtoFactory.create_response(
            "error",
            options={
                "status_code": self.status_code,
                "message": self.message,
                "details": self.details,
            },
        )


class NotFoundError(AppException):
    """Resource not found error."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, resource: str = "Resource", resource_id: Any = None) -> None:
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(f"{resource} not found")

    def to_error_dto(self) -> ErrorResponseDto:
        return DtoFactory.not_found(self.resource)


class ValidationError(AppException):
    """Validation error for invalid input."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, details: list[ErrorDetail] | list[dict[str, str]]) -> None:
        super().__init__("Validation error", details=details)

    def to_error_dto(self) -> ErrorResponseDto:
        return DtoFactory.validation_error(self.details or [])


class ConflictError(AppException):
    """Conflict error for duplicate resources."""

    status_code = status.HTTP_409_CONFLICT

    def __init__(self, resource: str = "Resource", field: str | None = None) -> None:
        # The conflicting value is never echoed back
        if field:
            message = f"{resource} with this {field} already exists"
        else:
            message = f"{resource} already exists"
        super().__init__(message)


class AuthenticationError(AppException):
    """Authentication error for invalid credentials or tokens."""

    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message)

    def to_error_dto(self) -> ErrorResponseDto:
        return DtoFactory.auth_error(self.message)


class AuthorizationError(AppException):
    """Authorization error for forbidden access."""

    status_code = status.HTTP_403_FORBIDDEN


def error_response(error: ErrorResponseDto, headers: dict[str, str] | None = None) -> JSONResponse:
    """Render an error envelope as a JSON response."""
    return JSONResponse(
        status_code=error.status_code,
        content=error.to_dict(),
        headers=headers,
    )


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Handle application-specific exceptions."""
    headers = None
    if isinstance(exc, AuthenticationError):
        headers = {"WWW-Authenticate": "Bearer"}
    return error_response(exc.to_error_dto(), headers=headers)


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle FastAPI's own parameter validation errors (path and query)."""
    details: list[ErrorDetail] = []
    for error in exc.errors():
        # Drop the "path"/"query" prefix from the location
        loc = tuple(error.get("loc", ()))
        detail = describe_error({**error, "loc": loc[1:] or loc})  # type: ignore[typeddict-item]
        if detail not in details:
            details.append(detail)

    return error_response(DtoFactory.validation_error(details))


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Handle routing errors such as unknown paths or methods."""
    error = DtoFactory.create_response(
        "error",
        options={"status_code": exc.status_code, "message": str(exc.detail)},
    )
    return error_response(error, headers=getattr(exc, "headers", None))


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions.

    Full detail goes to the log; the client only gets the generic envelope.
    """
    logger.error(
        "Unhandled %s on %s %s (request_id=%s)",
        type(exc).__name__,
        request.method,
        request.url.path,
        getattr(request.state, "request_id", None),
        exc_info=exc,
    )
    return error_response(DtoFactory.server_error(exc))


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI app."""
    app.add_exception_handler(AppException, app_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, validation_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, generic_exception_handler)
