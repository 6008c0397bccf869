"""Book service for business logic."""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import NotFoundError
from app.dtos.request import CreateBookDto
from app.models.book import Book
from app.repositories.book import BookRepository

logger = logging.getLogger(__name__)


class BookService:
    """Service for book operations.

    Methods return ORM entities; projecting them for clients is the
    caller's job.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize service with database session.

        Args:
            session: Async database session.
        """
        self.session = session
        self.repository = BookRepository(session)

    async def create(self, data: CreateBookDto) -> Book:
        """Create a new book from a validated DTO."""
        book = await self.repository.create(**data.to_attributes())
        logger.info("Created book %s", book.id)
        return book

    async def get(self, book_id: UUID) -> Book:
        """Get a book by ID.

        Raises:
            NotFoundError: If the book does not exist.
        """
        book = await self.repository.get_by_id(book_id)
        if book is None:
            raise NotFoundError(resource="Book", resource_id=book_id)
        return book

    async def list(
        self,
        *,
        page: int = 1,
        limit: int = 20,
        category: str | None = None,
        author: str | None = None,
    ) -> tuple[list[Book], int]:
        """List books with optional filters.

        Args:
            page: Page number (1-indexed).
            limit: Items per page.
            category: Filter by category.
            author: Filter by author.

        Returns:
            The page of books and the total number of matches.
        """
        offset = (page - 1) * limit
        books = await self.repository.search(
            category=category,
            author=author,
            offset=offset,
            limit=limit,
        )
        total = await self.repository.count_matching(category=category, author=author)
        return books, total

    async def update(self, book_id: UUID, data: CreateBookDto) -> Book:
        """Replace a book's fields.

        Raises:
            NotFoundError: If the book does not exist.
        """
        book = await self.get(book_id)
        book = await self.repository.update(book, **data.to_attributes())
        logger.info("Updated book %s", book.id)
        return book

    async def delete(self, book_id: UUID) -> None:
        """Delete a book.

        Raises:
            NotFoundError: If the book does not exist.
        """
        book = await self.get(book_id)
        await self.repository.delete(book)
        logger.info("Deleted book %s", book_id)
