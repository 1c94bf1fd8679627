import os

# Configure before the application (and its engine) is imported
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("AI_API_KEY", "test-key")

import pytest
from uuid import uuid4
from typing import AsyncGenerator
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

from carecompanion.main import app
from carecompanion.database import get_db
from carecompanion.models import Base

# In-memory database, one per test
TEST_DATABASE_URL = "sqlite+aiosqlite://"


@pytest.fixture(scope="function")
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Create a fresh database session for each test."""
    test_engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    test_async_session = async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False
    )

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with test_async_session() as session:
        yield session

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await test_engine.dispose()


@pytest.fixture
def user_id() -> str:
    return str(uuid4())


@pytest.fixture(scope="function")
async def client(db_session: AsyncSession, user_id: str) -> AsyncGenerator[AsyncClient, None]:
    """Test client acting as ``user_id``, with the database session overridden."""

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
        headers={"X-User-Id": user_id},
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
async def child_id(client: AsyncClient) -> str:
    """Create a child for the current user and return its ID."""
    child_data = {
        "first_name": "Sam",
        "last_name": "Rivera",
        "date_of_birth": "2023-01-15",
        "gender": "other",
    }
    response = await client.post("/api/v1/children", json=child_data)
    return response.json()["id"]
