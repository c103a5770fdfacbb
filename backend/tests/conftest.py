"""
Blog Posts API — Test Configuration (conftest.py)
==================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    ├── mock_db_session: AsyncMock session for service unit tests (no DB)
    ├── db_engine: fresh in-memory SQLite database per test (tables created/dropped)
    ├── session_factory: sessions bound to db_engine
    ├── seeded_posts: ten posts inserted before the test
    └── test_client: HTTPX AsyncClient on a fresh app using db_engine
"""

import os

# Settings are read when blog_api.config is first imported, so the test
# environment must be in place before any blog_api import below.
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["RATE_LIMIT_REQUESTS"] = "100000"

from typing import AsyncGenerator, Dict, List
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from blog_api.database import Base, get_db_session
from blog_api.models.post import Post


FIRST_NAMES = ["Ada", "Grace", "Alan", "Barbara", "Edsger"]
LAST_NAMES = ["Lovelace", "Hopper", "Turing", "Liskov", "Dijkstra"]


def generate_post_data(i: int = 0) -> Dict:
    """Request-shaped post data; varies with i so seeded posts differ."""
    return {
        "title": f"Post number {i}",
        "author": {
            "firstName": FIRST_NAMES[i % len(FIRST_NAMES)],
            "lastName": LAST_NAMES[i % len(LAST_NAMES)],
        },
        "content": f"Lorem ipsum dolor sit amet, paragraph {i}.",
    }


# ══════════════════════════════════════════════════════════════════════════
# Mocked persistence (service unit tests)
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_get_post(mock_db_session):
            mock_db_session.execute.return_value.scalar_one_or_none.return_value = post
            result = await post_service.get_post(mock_db_session, post_id)
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.delete = AsyncMock()
    session.add = MagicMock()
    return session


# ══════════════════════════════════════════════════════════════════════════
# Real database (integration tests)
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def db_engine():
    """
    In-memory SQLite database with the posts table.

    StaticPool keeps one connection so every session sees the same database.
    Tables are dropped after the test.
    """
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def seeded_posts(session_factory) -> List[Dict]:
    """Inserts ten posts and returns their request data plus assigned ids."""
    seed = [generate_post_data(i) for i in range(1, 11)]
    async with session_factory() as session:
        posts = [Post(**data) for data in seed]
        session.add_all(posts)
        await session.commit()
        return [dict(data, id=str(post.id)) for data, post in zip(seed, posts)]


@pytest_asyncio.fixture
async def test_client(session_factory) -> AsyncGenerator[AsyncClient, None]:
    """
    HTTPX AsyncClient routed straight into a fresh FastAPI app.

    get_db_session is overridden so requests use the test database with
    the same commit / rollback behaviour as production.
    """
    from blog_api.main import create_app

    async def override_get_db_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app = create_app()
    app.dependency_overrides[get_db_session] = override_get_db_session

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def new_post() -> Dict:
    """Request body for POST /posts."""
    return generate_post_data(42)
