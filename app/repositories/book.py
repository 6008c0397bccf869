"""Book repository for database operations."""

from sqlalchemy import ColumnElement, func
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.book import Book
from app.repositories.base import BaseRepository


def _filters(category: str | None, author: str | None) -> list[ColumnElement[bool]]:
    criteria: list[ColumnElement[bool]] = []
    if category:
        criteria.append(func.lower(Book.category) == category.lower())
    if author:
        criteria.append(func.lower(Book.author) == author.lower())
    return criteria


class BookRepository(BaseRepository[Book]):
    """Repository for Book entity operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Book, session)

    async def search(
        self,
        *,
        category: str | None = None,
        author: str | None = None,
        offset: int = 0,
        limit: int = 20,
    ) -> list[Book]:
        """Get books matching optional filters, newest first.

        Args:
            category: Exact category (case-insensitive).
            author: Exact author name (case-insensitive).
            offset: Number of records to skip.
            limit: Maximum number of records to return.

        Returns:
            List of books.
        """
        return await self.find(
            *_filters(category, author),
            offset=offset,
            limit=limit,
            order_by=(Book.created_at.desc(), Book.title),
        )

    async def count_matching(
        self,
        *,
        category: str | None = None,
        author: str | None = None,
    ) -> int:
        """Count books matching the same filters as :meth:`search`."""
        return await self.count(*_filters(category, author))
