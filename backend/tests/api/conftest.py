"""API-specific test fixtures."""

from contextlib import asynccontextmanager

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.core.auth import get_acting_identity
from app.domain.identity import ActingIdentity


@pytest.fixture
def acting_as():
    """Holder for the identity the API client acts as; tests set ``acting_as.identity``."""

    class _Acting:
        identity: ActingIdentity | None = None

    return _Acting()


@pytest.fixture
def api_client(engine, db_url, acting_as):
    """FastAPI test client with test database.

    Initializes the global database via init_db inside the TestClient's
    own event loop so route handlers can use get_session_factory().
    The engine fixture ensures tables exist before this runs.
    get_acting_identity is overridden with ``acting_as.identity``.
    """
    from fastapi import HTTPException

    from app.api.routes import api_router
    from app.core.config import get_settings
    from app.db import close_db, init_db
    from app.main import register_exception_handlers

    @asynccontextmanager
    async def test_lifespan(app: FastAPI):
        """Test lifespan - initialize DB in TestClient's event loop."""
        # Reset global so init_db creates a fresh engine in THIS loop
        import app.db.base as db_mod

        db_mod._engine = None
        db_mod._session_factory = None
        await init_db(db_url)
        yield
        await close_db()

    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Community backend - Test Client",
        version="0.1.0",
        lifespan=test_lifespan,
    )

    register_exception_handlers(app)
    app.include_router(api_router, prefix="/api")

    def _override_identity() -> ActingIdentity:
        if acting_as.identity is None:
            raise HTTPException(status_code=401, detail="Missing authorization header")
        return acting_as.identity

    app.dependency_overrides[get_acting_identity] = _override_identity

    with TestClient(app) as client:
        yield client


@pytest.fixture
async def silver_member(make_profile):
    from app.domain.roles import Role

    return await make_profile(Role.SILVER, email="silver@example.com", nickname="실버회원")


@pytest.fixture
async def gold_member(make_profile):
    from app.domain.roles import Role

    return await make_profile(Role.GOLD, email="gold@example.com", nickname="골드회원")


@pytest.fixture
async def admin_member(make_profile):
    from app.domain.roles import Role

    return await make_profile(Role.ADMIN, email="admin@example.com", nickname="운영자")
