"""Book response DTO."""

from datetime import date, datetime
from uuid import UUID

from pydantic import Field

from app.dtos.response.base import ResponseDto


class BookDto(ResponseDto):
    """Book as exposed to clients.

    Audit columns (``created_at``/``updated_at``) are not exposed.
    """

    id: UUID | str = Field(description="Book ID")
    title: str
    author: str
    category: str
    price: float = Field(description="Price")
    rating: float = Field(description="Average rating, 0 to 5")
    published_date: datetime | date = Field(alias="publishedDate")
