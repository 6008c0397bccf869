"""Request body validation.

``validate_request`` builds a FastAPI dependency that runs before the route
handler. It parses the JSON body, validates it through the DTO factory and
either hands the handler a request DTO or stops the request with the
validation error envelope. Handlers that depend on it never see invalid
input.

Example:
    @router.post("")
    async def create_book(data: ValidBook, service: BookServiceDep) -> ...:
        ...
"""

import json
import logging
from collections.abc import Awaitable, Callable
from typing import Annotated, Any

from fastapi import Depends, Request

from app.core.exceptions import ValidationError
from app.dtos.factory import DtoFactory, RequestType
from app.dtos.request import CreateBookDto, RequestDto, UserLoginDto, UserSignupDto

logger = logging.getLogger(__name__)


async def _read_json(request: Request) -> Any:
    body = await request.body()
    if not body.strip():
        return {}
    try:
        return json.loads(body)
    except ValueError:
        raise ValidationError(
            details=[{"field": "body", "message": "body must be valid JSON"}],
        ) from None


def validate_request(request_type: RequestType | str) -> Callable[[Request], Awaitable[RequestDto]]:
    """Create a dependency validating the body for ``request_type``.

    Args:
        request_type: Operation whose DTO validates the body.

    Returns:
        Dependency returning the request DTO built from validated values.

    Raises:
        UnknownDtoTypeError: At wiring time, if ``request_type`` is unknown.
    """
    # Fail when the route is declared rather than on the first request
    DtoFactory.create_request(request_type, {})
    request_type = RequestType(request_type)

    async def dependency(request: Request) -> RequestDto:
        payload = await _read_json(request)
        result = DtoFactory.validate(request_type, payload)
        if result.error is not None:
            logger.info(
                "Rejected %s payload on %s: invalid fields %s",
                request_type.value,
                request.url.path,
                result.error.fields,
            )
            raise ValidationError(details=result.error.details)
        return DtoFactory.create_request(request_type, result.value)

    dependency.__name__ = f"validate_{request_type.value}"
    return dependency


ValidBook = Annotated[CreateBookDto, Depends(validate_request(RequestType.CREATE_BOOK))]
ValidSignup = Annotated[UserSignupDto, Depends(validate_request(RequestType.USER_SIGNUP))]
ValidLogin = Annotated[UserLoginDto, Depends(validate_request(RequestType.USER_LOGIN))]
