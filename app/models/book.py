"""Book model for the catalogue."""

from datetime import date
from uuid import UUID, uuid4

from sqlalchemy import CheckConstraint, Date, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import Base, TimestampMixin


class Book(Base, TimestampMixin):
    """Book model.

    Attributes:
        id: Unique identifier (UUID).
        title: Book title.
        author: Author name.
        category: Category or genre.
        price: Price with two decimal places.
        rating: Average rating between 0 and 5.
        published_date: Publication date.
    """

    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_book_price_non_negative"),
        CheckConstraint("rating >= 0 AND rating <= 5", name="ck_book_rating_range"),
    )

    id: Mapped[UUID] = mapped_column(
        primary_key=True,
        default=uuid4,
    )

    title: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        index=True,
    )

    author: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        index=True,
    )

    category: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        index=True,
    )

    price: Mapped[float] = mapped_column(
        Numeric(10, 2, asdecimal=False),
        nullable=False,
    )

    rating: Mapped[float] = mapped_column(
        Numeric(3, 1, asdecimal=False),
        nullable=False,
    )

    published_date: Mapped[date] = mapped_column(
        Date,
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<Book {self.title!r} by {self.author!r}>"
