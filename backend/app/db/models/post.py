"""Post model — community reports, including interview-assembled documents."""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text, Uuid

from app.db.base import Base


class Post(Base):
    __tablename__ = "posts"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    title = Column(String(255), nullable=False)
    author = Column(String(100), nullable=False)
    category = Column(String(100), nullable=False, index=True)
    content = Column(Text, nullable=False)

    # Structured metadata alongside the Markdown body; free-text interview answers land here
    result = Column(Text, nullable=True)
    tool = Column(Text, nullable=True)
    cost = Column(Text, nullable=True)
    daily_time = Column(Text, nullable=True)

    user_id = Column(Uuid(as_uuid=True), ForeignKey("profiles.id"), nullable=True, index=True)
    likes = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc), index=True)
