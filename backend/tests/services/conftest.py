"""Service test fixtures — async DB, seeded projects, authenticated test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test session factory
    - db_manager patched so the readiness probe sees the test engine
    - make_project writes rows directly (bypassing the order manager) so tests
      can seed arbitrary, even corrupted, orderings

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for ordering and route tests
    - created_at assigned from a fixed base + counter: deterministic tie-breaking in rebalance
"""

import itertools
from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from app.db.base import Base
from app.infrastructure.database import get_db, DatabaseSessionManager
from app.infrastructure.security import create_access_token, hash_password
from app.models.project import Project
from app.models.user import User
import app.infrastructure.database as db_module
from app.main import app

OWNER_EMAIL = "owner@portfolio.dev"
OWNER_PASSWORD = "correct-horse"
BASE_TIME = datetime(2025, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def owner(test_db):
    user = User(
        name="Portfolio Owner", email=OWNER_EMAIL,
        password_hash=hash_password(OWNER_PASSWORD),
    )
    test_db.add(user)
    await test_db.commit()
    await test_db.refresh(user)
    return user


@pytest.fixture
async def auth_client(client, owner):
    """Test client that sends the owner's bearer token on every request."""
    client.headers["Authorization"] = f"Bearer {create_access_token(str(owner.id))}"
    return client


@pytest.fixture
def make_project(test_db):
    """Insert a project row with an explicit featured flag and display order."""
    counter = itertools.count()

    async def _make(
        title: str,
        featured: bool = False,
        display_order: int = 0,
        status: str = "published",
    ) -> Project:
        n = next(counter)
        project = Project(
            title=title,
            description=f"{title} description",
            image=f"https://img.example.com/{n}.png",
            technologies=["python", "fastapi"],
            github_url=f"https://github.com/owner/project-{n}",
            url=f"https://project-{n}.example.com/",
            status=status,
            featured=featured,
            display_order=display_order,
            created_at=BASE_TIME + timedelta(seconds=n),
        )
        test_db.add(project)
        await test_db.commit()
        return project

    return _make

