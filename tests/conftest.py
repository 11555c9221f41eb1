"""Pytest configuration and shared fixtures for API tests."""

import os

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import text

# Set test DB before app imports so config/engine use it
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./lifepattern_test.db")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("RATE_LIMIT_DEFAULT", "10000/minute")

from lifepattern.core.auth import create_access_token, hash_password
from lifepattern.db.base import Base
from lifepattern.db.session import async_session_maker, engine, init_db
from lifepattern.main import app
from lifepattern.models.user import User


@pytest_asyncio.fixture(scope="session", loop_scope="session")
async def ensure_db():
    """Recreate tables once per test session."""
    import lifepattern.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await init_db()
    yield
    await engine.dispose()


async def _clear_all():
    """Delete all rows in reverse dependency order so tests start clean."""
    async with engine.begin() as conn:
        for table in reversed(Base.metadata.sorted_tables):
            await conn.execute(text(f"DELETE FROM {table.name}"))


@pytest_asyncio.fixture(loop_scope="session")
async def client(ensure_db):
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest_asyncio.fixture(loop_scope="session")
async def clean_db(ensure_db):
    await _clear_all()
    yield


@pytest_asyncio.fixture(loop_scope="session")
async def test_user(clean_db, client):
    """Create a user via DB (committed) and return (user_id, email, access_token)."""
    async with async_session_maker() as session:
        user = User(
            email="test@test.com",
            name="Test User",
            password_hash=hash_password("password123"),
        )
        session.add(user)
        await session.commit()
        await session.refresh(user)
        token = create_access_token(user.id, user.email)
        return user.id, user.email, token


@pytest.fixture
def auth_headers(test_user):
    _, __, token = test_user
    return {"Authorization": f"Bearer {token}"}
