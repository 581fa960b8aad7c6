"""Pytest configuration and shared fixtures."""

import os

# Must be set before tracker.config is imported anywhere
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"

from datetime import datetime, timezone

import httpx
import pytest
import pytest_asyncio
from faker import Faker
from sqlalchemy.ext.asyncio import async_sessionmaker

from tracker.adapters.persistence.database import Base, build_engine, get_session
from tracker.adapters.persistence.models import AssignmentModel  # noqa: F401 — register table
from tracker.adapters.persistence.repositories import SqlAssignmentRepository
from tracker.domain.entities.assignment import Assignment
from tracker.main import app

fake = Faker("en_US")
Faker.seed(1234)

DEFAULT_SUBMITTED_ON = datetime(2022, 1, 31, 2, 22, 40, tzinfo=timezone.utc)


def _make_assignment(
    agent: str | None = None,
    address: str | None = None,
    submitted_on: datetime = DEFAULT_SUBMITTED_ON,
    scheduled: bool = False,
    hidden: bool = False,
) -> Assignment:
    return Assignment(
        id=None,
        agent=agent or fake.name(),
        address=address or f"{fake.street_address()} {fake.city()} {fake.state_abbr()}",
        submitted_on=submitted_on,
        scheduled=scheduled,
        hidden=hidden,
    )


@pytest.fixture
def make_assignment():
    """Factory for unsaved assignments with faked agent and address."""
    return _make_assignment


@pytest.fixture
def random_between():
    """Random UTC datetime between two ISO dates."""

    def _random_between(start: str, end: str) -> datetime:
        return fake.date_time_between(
            start_date=datetime.fromisoformat(start).replace(tzinfo=timezone.utc),
            end_date=datetime.fromisoformat(end).replace(tzinfo=timezone.utc),
            tzinfo=timezone.utc,
        )

    return _random_between


# ─── Database / API ─────────────────────────────────────────────────


@pytest_asyncio.fixture
async def session_factory():
    engine = build_engine("sqlite+aiosqlite:///:memory:")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield async_sessionmaker(engine, expire_on_commit=False)
    await engine.dispose()


@pytest_asyncio.fixture
async def seed(session_factory):
    """Persist assignments directly through the repository."""

    async def _seed(assignments: list[Assignment]) -> list[Assignment]:
        async with session_factory() as session:
            saved = await SqlAssignmentRepository(session).save_many(assignments)
            await session.commit()
        return saved

    return _seed


@pytest_asyncio.fixture
async def client(session_factory):
    async def _session_override():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_session] = _session_override
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()
