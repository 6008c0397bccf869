"""Request DTO for creating or replacing a book."""

from datetime import date, datetime
from typing import Any

from pydantic import Field, ValidationInfo, field_validator

from app.dtos.request.base import RequestDto, RequestSchema


class CreateBookSchema(RequestSchema):
    """Rules for a book payload."""

    title: str = Field(
        ...,
        min_length=1,
        max_length=255,
        examples=["The Pragmatic Programmer"],
    )
    author: str = Field(
        ...,
        min_length=1,
        max_length=255,
        examples=["Andrew Hunt"],
    )
    category: str = Field(
        ...,
        min_length=1,
        max_length=100,
        examples=["Programming"],
    )
    # Upper bound matches the NUMERIC(10, 2) column
    price: float = Field(..., ge=0, lt=10**8, allow_inf_nan=False, examples=[39.99])
    rating: float = Field(..., ge=0, le=5, allow_inf_nan=False, examples=[4.5])
    published_date: date = Field(
        ...,
        alias="publishedDate",
        description="ISO-8601 date (a full timestamp is accepted)",
        examples=["1999-10-20"],
    )

    @field_validator("price", "rating", mode="before")
    @classmethod
    def reject_booleans(cls, v: Any, info: ValidationInfo) -> Any:
        if isinstance(v, bool):
            msg = f"{info.field_name} must be a number"
            raise ValueError(msg)
        return v

    @field_validator("published_date", mode="before")
    @classmethod
    def parse_timestamp(cls, v: Any) -> Any:
        """Accept ISO-8601 timestamps as well as plain dates."""
        if isinstance(v, str) and len(v.strip()) > 10:
            try:
                return datetime.fromisoformat(v.strip()).date()
            except ValueError:
                msg = "publishedDate must be a valid date"
                raise ValueError(msg) from None
        if isinstance(v, datetime):
            return v.date()
        return v


class CreateBookDto(RequestDto):
    """Book payload for create and update calls."""

    schema = CreateBookSchema

    title: str
    author: str
    category: str
    price: float
    rating: float
    published_date: date
