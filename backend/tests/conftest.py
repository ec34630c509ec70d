"""Shared test fixtures for all test groups."""

import os
import uuid

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from app.db.base import Base
from app.domain.identity import ActingIdentity
from app.domain.roles import Role
from app.llm.text_generator_fake import TextGeneratorFake


@pytest.fixture
def db_url(tmp_path) -> str:
    """TEST_DATABASE_URL (PostgreSQL) when set, else a file-backed SQLite database."""
    return os.getenv("TEST_DATABASE_URL") or f"sqlite+aiosqlite:///{tmp_path / 'community_test.db'}"


@pytest.fixture
async def engine(db_url) -> AsyncEngine:
    """Create the test engine with fresh tables.

    Sets the global session factory in the pytest-asyncio event loop so
    services built from get_session_factory() see the test database.
    """
    import app.db.base as db_mod

    engine = create_async_engine(db_url, echo=False)

    # Import all models so metadata is populated
    import app.db.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    db_mod._engine = engine
    db_mod._session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    db_mod._engine = None
    db_mod._session_factory = None
    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
def make_profile(session_factory):
    """Insert a profile and return its ActingIdentity."""
    from app.db.models.profile import Profile

    async def _make(role: Role = Role.SILVER, email: str | None = None, nickname: str | None = None) -> ActingIdentity:
        user_id = uuid.uuid4()
        profile = Profile(
            id=user_id,
            email=email or f"member-{user_id.hex[:8]}@example.com",
            nickname=nickname,
            role=role.value,
        )
        async with session_factory() as session:
            session.add(profile)
            await session.commit()
        return ActingIdentity.from_profile(profile)

    return _make


@pytest.fixture
def text_generator_fake():
    """Fresh TextGeneratorFake with happy_path scenario (default)."""
    return TextGeneratorFake(scenario="happy_path")


@pytest.fixture
def text_generator_failing():
    """TextGeneratorFake with llm_failure scenario."""
    return TextGeneratorFake(scenario="llm_failure")


@pytest.fixture
def silver_identity() -> ActingIdentity:
    return ActingIdentity(user_id=uuid.uuid4(), role=Role.SILVER, email="silver@example.com", nickname="실버")


@pytest.fixture
def admin_identity() -> ActingIdentity:
    return ActingIdentity(user_id=uuid.uuid4(), role=Role.ADMIN, email="admin@example.com", nickname="운영자")
