"""Pytest configuration and fixtures."""

from collections.abc import AsyncGenerator
from typing import Any
from uuid import UUID

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.api.deps import get_current_user_id, get_db
from app.core.security import create_access_token, hash_password
from app.main import app
from app.models import Base, User

# Test database URL (use SQLite for tests)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

# Test user constants
TEST_USER_ID = UUID("00000000-0000-0000-0000-000000000001")
TEST_USER_USERNAME = "testuser"
TEST_USER_EMAIL = "testuser@example.com"
TEST_USER_PASSWORD = "TestPassword123!"

# Shared hash so each test does not pay for a fresh Argon2 run
TEST_USER_HASH = hash_password(TEST_USER_PASSWORD)


@pytest.fixture(scope="function")
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Create a fresh in-memory database and session for each test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )
    async with session_factory() as session:
        yield session

    await engine.dispose()


@pytest.fixture(scope="function")
async def test_user(db_session: AsyncSession) -> User:
    """Create a test user in the database."""
    user = User(
        id=TEST_USER_ID,
        username=TEST_USER_USERNAME,
        email=TEST_USER_EMAIL,
        hashed_password=TEST_USER_HASH,
        is_active=True,
    )
    db_session.add(user)
    await db_session.commit()
    await db_session.refresh(user)
    return user


@pytest.fixture
def auth_token(test_user: User) -> str:
    """Create an authentication token for the test user."""
    return create_access_token(user_id=test_user.id)


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    """Create authentication headers for API requests."""
    return {"Authorization": f"Bearer {auth_token}"}


@pytest.fixture(scope="function")
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create a test client with the database and auth dependencies overridden."""

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db_session

    async def override_get_current_user_id() -> UUID:
        return TEST_USER_ID

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_current_user_id] = override_get_current_user_id

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
async def anon_client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create a test client that uses real JWT authentication and sends no token."""

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
async def authenticated_client(
    anon_client: AsyncClient,
    auth_headers: dict[str, str],
) -> AsyncClient:
    """Create a test client that sends a real bearer token.

    The auth dependency is NOT overridden, so the actual token
    verification runs on every request.
    """
    anon_client.headers.update(auth_headers)
    return anon_client


@pytest.fixture
def book_payload() -> dict[str, Any]:
    """A valid wire payload for creating a book."""
    return {
        "title": "The Pragmatic Programmer",
        "author": "Andrew Hunt",
        "category": "Programming",
        "price": 39.99,
        "rating": 4.5,
        "publishedDate": "1999-10-20",
    }


@pytest.fixture
def test_user_email() -> str:
    """Get the test user email."""
    return TEST_USER_EMAIL


@pytest.fixture
def test_user_password() -> str:
    """Get the test user password."""
    return TEST_USER_PASSWORD
