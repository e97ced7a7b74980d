"""Global pytest fixtures for testing."""

import contextlib
import os
from collections.abc import AsyncGenerator

import dotenv
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from worklog_api.main import app
from worklog_database import Base
from worklog_database.models.user import User
from worklog_database.session import get_session

with contextlib.suppress(OSError):
    dotenv.load_dotenv()

# Test database URL - in-memory SQLite unless TEST_DATABASE_URL says otherwise
TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite+aiosqlite:///:memory:")

# Safety check: ensure tests only run on a test database
if (
    ":memory:" not in TEST_DATABASE_URL
    and "_test" not in TEST_DATABASE_URL
    and "/test" not in TEST_DATABASE_URL
):
    raise RuntimeError(
        f"Safety check failed: TEST_DATABASE_URL must point to a test database "
        f"(name should contain 'test'). Current: {TEST_DATABASE_URL}"
    )


@pytest_asyncio.fixture
async def test_engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create a test database engine with a fresh schema."""
    engine_kwargs = {}
    if TEST_DATABASE_URL.startswith("sqlite"):
        # Share the single in-memory database across connections
        engine_kwargs = {
            "poolclass": StaticPool,
            "connect_args": {"check_same_thread": False},
        }
    engine = create_async_engine(TEST_DATABASE_URL, echo=False, **engine_kwargs)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(test_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Create a fresh database session for each test."""
    async_session = async_sessionmaker(
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session


@pytest_asyncio.fixture
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create test HTTP client with database override."""

    async def override_get_session():
        yield db_session

    app.dependency_overrides[get_session] = override_get_session

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


async def _create_user(session: AsyncSession, username: str, first: str, last: str) -> User:
    from worklog_core.schemas import UserCreate
    from worklog_core.services import UserService

    service = UserService(session)
    user = await service.create_user(UserCreate(username=username, first=first, last=last))
    await session.commit()
    await session.refresh(user)
    return user


def _auth_headers(user: User) -> dict[str, str]:
    from worklog_api.dependencies import get_jwt_config
    from worklog_core.auth import create_access_token

    access_token = create_access_token(str(user.id), get_jwt_config())
    return {"Authorization": f"Bearer {access_token}"}


@pytest_asyncio.fixture
async def test_user(db_session: AsyncSession) -> User:
    """Create a test user."""
    return await _create_user(db_session, "m-robinson", "Max", "Robinson")


@pytest_asyncio.fixture
async def other_user(db_session: AsyncSession) -> User:
    """Create a second user who does not own the test journal."""
    return await _create_user(db_session, "ada", "Ada", "Lovelace")


@pytest_asyncio.fixture
async def auth_headers(test_user: User) -> dict[str, str]:
    """Generate auth headers for test user."""
    return _auth_headers(test_user)


@pytest_asyncio.fixture
async def other_headers(other_user: User) -> dict[str, str]:
    """Generate auth headers for the second user."""
    return _auth_headers(other_user)
