"""Profile provisioning on first login.

Idempotent: creates a SILVER profile for a new Supabase user and returns the
existing row on later calls. Uses ON CONFLICT DO NOTHING for race-safe inserts.
"""

from uuid import UUID

import structlog
from sqlalchemy import select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.base import get_session_factory
from app.db.models.profile import Profile
from app.domain.roles import Role

logger = structlog.get_logger(__name__)

_DIALECT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


async def provision_profile_on_first_login(
    user_id: UUID,
    jwt_claims: dict,
    session: AsyncSession | None = None,
) -> Profile:
    """Return the member's profile, creating it on first login.

    Args:
        user_id: Supabase user id (JWT sub)
        jwt_claims: JWT claims dict containing email and optional user_metadata
        session: Optional AsyncSession for testing (if None, creates new session)

    Returns:
        Profile instance (either newly created or existing)
    """
    if session is not None:
        return await _do_provision(user_id, jwt_claims, session)

    factory = get_session_factory()
    async with factory() as session:
        return await _do_provision(user_id, jwt_claims, session)


async def _do_provision(user_id: UUID, jwt_claims: dict, session: AsyncSession) -> Profile:
    existing = await session.get(Profile, user_id)
    if existing is not None:
        return existing

    email = jwt_claims.get("email") or None
    metadata = jwt_claims.get("user_metadata") or {}
    nickname = metadata.get("nickname") or (email.split("@", 1)[0] if email else None)

    insert = _DIALECT_INSERTS[session.bind.dialect.name]
    stmt = (
        insert(Profile)
        .values(id=user_id, email=email, nickname=nickname, role=Role.SILVER.value)
        .on_conflict_do_nothing(index_elements=["id"])
    )
    await session.execute(stmt)
    await session.commit()

    result = await session.execute(select(Profile).where(Profile.id == user_id))
    profile = result.scalar_one()
    logger.info("profile_provisioned", user_id=str(user_id))
    return profile
