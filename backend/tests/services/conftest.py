"""Service test fixtures — async DB, FastAPI test client and seeded accounts.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test DB session factory
    - db_manager patched so the readiness probe sees the test engine
    - Seeded accounts: one admin, two regular users, each with a bearer token

Design Decisions:
    - SQLite in-memory with StaticPool: every session shares the one connection,
      so rows written by one request are visible to the next
    - Accounts seeded through AccountService, not raw inserts: hashes and roles
      match what the API would produce
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool

import blogapi.infrastructure.database as db_module
from blogapi.db.base import Base
from blogapi.infrastructure.database import get_db, DatabaseSessionManager
from blogapi.infrastructure.session_tokens import issue_token
from blogapi.main import app
from blogapi.services.accounts import AccountService
import blogapi.models  # noqa: F401


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
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


# ─── Seeded accounts ────────────────────────────────────────────

@pytest.fixture
async def admin_user(test_session_factory):
    async with test_session_factory() as db:
        service = AccountService(db)
        await service.seed_admin("admin@example.com", "admin123", "Admin")
        return await service.find_by_email("admin@example.com")


@pytest.fixture
async def reader(test_session_factory):
    async with test_session_factory() as db:
        user, _ = await AccountService(db).register(
            "reader@example.com", "reader-pass", "Reader",
        )
        return user


@pytest.fixture
async def other_reader(test_session_factory):
    async with test_session_factory() as db:
        user, _ = await AccountService(db).register(
            "other@example.com", "other-pass", "Other",
        )
        return user


def bearer(user) -> dict:
    return {"Authorization": f"Bearer {issue_token(user.id)}"}


@pytest.fixture
def admin_headers(admin_user):
    return bearer(admin_user)


@pytest.fixture
def reader_headers(reader):
    return bearer(reader)


@pytest.fixture
def other_headers(other_reader):
    return bearer(other_reader)


@pytest.fixture
async def blog(client, admin_headers):
    """A published blog written by the admin, created through the API."""
    res = await client.post(
        "/api/blogs", json={"title": "Hello", "content": "World"},
        headers=admin_headers,
    )
    assert res.status_code == 201
    return res.json()["data"]
