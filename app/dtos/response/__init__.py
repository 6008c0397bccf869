"""Response DTOs.

Allow-list projections of persisted entities and outcome envelopes sent back
to clients.
"""

from app.dtos.response.auth import AuthResponseDto
from app.dtos.response.base import ResponseDto
from app.dtos.response.book import BookDto
from app.dtos.response.error import ErrorDetail, ErrorResponseDto
from app.dtos.response.user import UserDto

__all__ = [
    "AuthResponseDto",
    "BookDto",
    "ErrorDetail",
    "ErrorResponseDto",
    "ResponseDto",
    "UserDto",
]
