"""DTO factory: one dispatch point for building and validating DTOs.

Route handlers and middleware name an operation instead of importing
concrete DTO classes:

    result = DtoFactory.validate(RequestType.CREATE_BOOK, payload)
    dto = DtoFactory.create_request("createBook", result.value)
    body = DtoFactory.create_response(ResponseType.BOOK, book)
"""

from collections.abc import Mapping
from enum import StrEnum
from typing import Any

from app.dtos.request import (
    CreateBookDto,
    RequestDto,
    UserLoginDto,
    UserSignupDto,
    ValidationResult,
)
from app.dtos.response import (
    AuthResponseDto,
    BookDto,
    ErrorDetail,
    ErrorResponseDto,
)


class RequestType(StrEnum):
    """Operations that accept a request body."""

    CREATE_BOOK = "createBook"
    USER_SIGNUP = "userSignup"
    USER_LOGIN = "userLogin"


class ResponseType(StrEnum):
    """Shapes the API responds with."""

    BOOK = "book"
    BOOK_LIST = "bookList"
    AUTH = "auth"
    ERROR = "error"


class UnknownDtoTypeError(LookupError):
    """Raised when the factory is asked for an operation it does not know.

    This is a wiring mistake in the calling code, not bad client input.
    """


_REQUEST_DTOS: dict[RequestType, type[RequestDto]] = {
    RequestType.CREATE_BOOK: CreateBookDto,
    RequestType.USER_SIGNUP: UserSignupDto,
    RequestType.USER_LOGIN: UserLoginDto,
}


def _request_dto_class(request_type: RequestType | str, kind: str) -> type[RequestDto]:
    try:
        return _REQUEST_DTOS[RequestType(request_type)]
    except (ValueError, KeyError):
        raise UnknownDtoTypeError(f"Unknown {kind} type: {request_type}") from None


class DtoFactory:
    """Creates request/response DTOs by operation name."""

    @staticmethod
    def create_request(request_type: RequestType | str, data: Any) -> RequestDto:
        """Wrap a payload in the request DTO for ``request_type``.

        Raises:
            UnknownDtoTypeError: If ``request_type`` is not a known operation.
        """
        dto_class = _request_dto_class(request_type, "request DTO")
        return dto_class(data)

    @staticmethod
    def validate(request_type: RequestType | str, data: Any) -> ValidationResult:
        """Validate a raw payload with the DTO for ``request_type``.

        Raises:
            UnknownDtoTypeError: If ``request_type`` is not a known operation.
        """
        dto_class = _request_dto_class(request_type, "validation")
        return dto_class.validate(data)

    @staticmethod
    def create_response(
        response_type: ResponseType | str,
        model: Any = None,
        options: Mapping[str, Any] | None = None,
    ) -> Any:
        """Build the response DTO for ``response_type``.

        Args:
            response_type: Shape to build.
            model: Entity (``book``), entities (``bookList``) or user (``auth``).
            options: Values a model cannot supply: ``message``, ``token`` and
                ``user`` for ``auth``; ``status_code``, ``message`` and
                ``details`` for ``error``.

        Raises:
            UnknownDtoTypeError: If ``response_type`` is not a known shape.
        """
        try:
            kind = ResponseType(response_type)
        except ValueError:
            raise UnknownDtoTypeError(f"Unknown response DTO type: {response_type}") from None

        options = options or {}
        if kind is ResponseType.BOOK:
            return BookDto.from_model(model)
        if kind is ResponseType.BOOK_LIST:
            return BookDto.from_model_array(model)
        if kind is ResponseType.AUTH:
            return AuthResponseDto.success(
                options.get("message", ""),
                options.get("token", ""),
                options.get("user", model),
            )
        return ErrorResponseDto(
            status_code=options.get("status_code") or 500,
            message=options.get("message") or "Internal server error",
            details=options.get("details"),
        )

    # Predefined error envelopes

    @staticmethod
    def validation_error(
        details: list[ErrorDetail] | list[dict[str, str]],
    ) -> ErrorResponseDto:
        return ErrorResponseDto.validation_error(details)

    @staticmethod
    def not_found(resource: str = "Resource") -> ErrorResponseDto:
        return ErrorResponseDto.not_found(resource)

    @staticmethod
    def auth_error(message: str = "Authentication failed") -> ErrorResponseDto:
        return ErrorResponseDto.auth_error(message)

    @staticmethod
    def server_error(error: BaseException | None = None) -> ErrorResponseDto:
        return ErrorResponseDto.server_error(error)
