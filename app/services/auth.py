"""Authentication service for signup and login."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.config import Settings, get_settings
from app.core.exceptions import AuthenticationError, ConflictError
from app.core.security import create_access_token, hash_password, verify_password
from app.dtos.request import UserLoginDto, UserSignupDto
from app.models.user import User
from app.repositories.user import UserRepository

logger = logging.getLogger(__name__)

# Verified against when the email is unknown so both failure paths cost a hash check
_DUMMY_HASH = hash_password("not-a-real-password-0")


class AuthService:
    """Service for authentication operations.

    Handles user signup and login. Both return the user together with a
    freshly issued access token.
    """

    def __init__(self, session: AsyncSession, settings: Settings | None = None) -> None:
        """Initialize auth service.

        Args:
            session: Async database session.
            settings: Settings used to sign tokens.
        """
        self.session = session
        self.settings = settings or get_settings()
        self.user_repository = UserRepository(session)

    async def signup(self, data: UserSignupDto) -> tuple[User, str]:
        """Register a new user.

        Args:
            data: Validated signup credentials.

        Returns:
            The created user and an access token.

        Raises:
            ConflictError: If email or username is already registered.
        """
        if await self.user_repository.email_exists(data.email):
            raise ConflictError(resource="User", field="email")
        if await self.user_repository.username_exists(data.username):
            raise ConflictError(resource="User", field="username")

        user = await self.user_repository.create_user(
            username=data.username,
            email=data.email,
            hashed_password=hash_password(data.password),
        )
        logger.info("Registered user %s", user.id)

        return user, create_access_token(user.id, settings=self.settings)

    async def login(self, data: UserLoginDto) -> tuple[User, str]:
        """Authenticate a user.

        Args:
            data: Validated login credentials.

        Returns:
            The user and an access token.

        Raises:
            AuthenticationError: If credentials are invalid or the account
                is deactivated.
        """
        user = await self.user_repository.get_by_email(data.email)
        if user is None:
            verify_password(data.password, _DUMMY_HASH)
            raise AuthenticationError(message="Invalid email or password")

        if not verify_password(data.password, user.hashed_password):
            raise AuthenticationError(message="Invalid email or password")

        if not user.is_active:
            raise AuthenticationError(message="Account is deactivated")

        return user, create_access_token(user.id, settings=self.settings)
