"""SQLAlchemy models package."""

from app.models.base import Base
from app.models.book import Book
from app.models.user import User

__all__ = [
    "Base",
    "Book",
    "User",
]
