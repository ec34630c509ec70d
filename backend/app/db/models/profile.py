"""Profile model — one row per member, keyed by the auth provider's user id."""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, String, Text, Uuid

from app.db.base import Base


class Profile(Base):
    __tablename__ = "profiles"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    email = Column(String(255), unique=True, nullable=True, index=True)
    nickname = Column(String(100), nullable=True)
    role = Column(String(20), nullable=False, default="SILVER")  # SILVER, GOLD, ADMIN

    # Admin-only notes describing the member
    persona_memo = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))
