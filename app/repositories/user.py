"""User repository for database operations."""

from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.user import User
from app.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for User entity operations.

    Emails and usernames are compared case-insensitively.
    """

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(User, session)

    async def get_by_email(self, email: str) -> User | None:
        return await self.find_one(func.lower(User.email) == email.lower())

    async def email_exists(self, email: str) -> bool:
        """Check if an email is already registered."""
        return await self.exists(func.lower(User.email) == email.lower())

    async def username_exists(self, username: str) -> bool:
        """Check if a username is already taken."""
        return await self.exists(func.lower(User.username) == username.lower())

    async def create_user(
        self,
        username: str,
        email: str,
        hashed_password: str,
    ) -> User:
        """Create a new active user.

        Args:
            username: Public handle.
            email: User's email address, stored lowercased.
            hashed_password: Pre-hashed password (Argon2).

        Returns:
            Created user entity.
        """
        return await self.create(
            username=username,
            email=email.lower(),
            hashed_password=hashed_password,
            is_active=True,
        )
