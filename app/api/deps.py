"""API dependencies for dependency injection."""

from collections.abc import AsyncGenerator
from typing import Annotated
from uuid import UUID

from fastapi import Depends, Query, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import Settings, get_settings
from app.core.exceptions import AuthenticationError
from app.core.security import verify_access_token
from app.database import get_db
from app.repositories.user import UserRepository
from app.services.auth import AuthService
from app.services.book import BookService

# Type alias for database session dependency
DBSession = Annotated[AsyncSession, Depends(get_db)]


def get_app_settings(request: Request) -> Settings:
    """Settings the running app was created with."""
    return getattr(request.app.state, "settings", None) or get_settings()


SettingsDep = Annotated[Settings, Depends(get_app_settings)]

# HTTP Bearer security scheme
# auto_error=False allows us to answer with our own error envelope
bearer_scheme = HTTPBearer(auto_error=False)


class PaginationParams(BaseModel):
    """Parameters for paginated requests, checked by ``get_pagination``."""

    page: int = 1
    limit: int = 20


async def get_book_service(
    session: DBSession,
) -> AsyncGenerator[BookService, None]:
    """Get book service instance.

    Args:
        session: Database session.

    Yields:
        BookService instance.
    """
    yield BookService(session)


async def get_auth_service(
    session: DBSession,
    settings: SettingsDep,
) -> AsyncGenerator[AuthService, None]:
    """Get auth service instance.

    Args:
        session: Database session.
        settings: Application settings.

    Yields:
        AuthService instance.
    """
    yield AuthService(session, settings)


def get_pagination(
    page: int = Query(default=1, ge=1, description="Page number"),
    limit: int = Query(default=20, ge=1, le=100, description="Items per page"),
) -> PaginationParams:
    """Get pagination parameters from query."""
    return PaginationParams(page=page, limit=limit)


async def get_current_user_id(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
    settings: SettingsDep,
    session: DBSession,
) -> UUID:
    """Extract and verify user ID from JWT token.

    This dependency extracts the Bearer token from the Authorization header
    and verifies it. The token only counts while its user exists and is active.

    Args:
        credentials: HTTP Bearer credentials from Authorization header.
        settings: Application settings holding the signing key.
        session: Database session used to look the user up.

    Returns:
        User's UUID from the verified token.

    Raises:
        AuthenticationError: If token is missing, invalid, or expired, or its
            user is gone or deactivated.
    """
    if credentials is None:
        raise AuthenticationError(message="Authentication required")

    user_id = verify_access_token(credentials.credentials, settings)
    if user_id is None:
        raise AuthenticationError(message="Invalid or expired token")

    user = await UserRepository(session).get_by_id(user_id)
    if user is None:
        raise AuthenticationError(message="Invalid or expired token")
    if not user.is_active:
        raise AuthenticationError(message="Account is deactivated")

    return user_id


# Type aliases for dependency injection
BookServiceDep = Annotated[BookService, Depends(get_book_service)]
AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
PaginationDep = Annotated[PaginationParams, Depends(get_pagination)]
