"""Shared fixtures: an in-memory SQLite database and an app wired to it."""

from collections.abc import AsyncIterator

import httpx
import pytest
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.pool import StaticPool

from irontrack.core.config import Settings
from irontrack.db.session import Database
from irontrack.main import create_application
from irontrack.repositories.cardio_types import seed_built_in_cardio_types

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
def settings() -> Settings:
    return Settings(environment="test", database_url_override=TEST_DATABASE_URL)


@pytest.fixture
async def database() -> AsyncIterator[Database]:
    """Fresh schema per test; StaticPool keeps the single in-memory connection alive."""
    db = Database(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    await db.create_all()
    async with db.session_maker() as session:
        await seed_built_in_cardio_types(session)
    yield db
    await db.dispose()


@pytest.fixture
async def session(database: Database) -> AsyncIterator[AsyncSession]:
    async with database.session_maker() as s:
        yield s


@pytest.fixture
def app(settings: Settings, database: Database):
    return create_application(settings, database=database)


@pytest.fixture
async def client(app) -> AsyncIterator[httpx.AsyncClient]:
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
async def exercise_ids(client: httpx.AsyncClient) -> dict[str, int]:
    """Bench Press and Squat, created through the API."""
    ids = {}
    for name in ("Bench Press", "Squat"):
        response = await client.post("/api/exercises", json={"name": name})
        assert response.status_code == 201
        ids[name] = response.json()["id"]
    return ids


@pytest.fixture
async def cardio_type_id(client: httpx.AsyncClient) -> int:
    response = await client.get("/api/cardio-types")
    return next(t["id"] for t in response.json() if t["name"] == "Outdoor Run")
