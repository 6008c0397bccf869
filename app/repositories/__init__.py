"""Repository package for data access layer."""

from app.repositories.base import BaseRepository
from app.repositories.book import BookRepository
from app.repositories.user import UserRepository

__all__ = [
    "BaseRepository",
    "BookRepository",
    "UserRepository",
]
