"""Services package for business logic."""

from app.services.auth import AuthService
from app.services.book import BookService

__all__ = [
    "AuthService",
    "BookService",
]
