"""News and NewsComment models — the news feed and its discussion."""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, ForeignKey, String, Text, Uuid

from app.db.base import Base


class News(Base):
    __tablename__ = "news"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    title = Column(String(255), nullable=False)
    category = Column(String(100), nullable=False, default="")
    summary = Column(Text, nullable=False, default="")
    content = Column(Text, nullable=False, default="")

    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc), index=True)


class NewsComment(Base):
    __tablename__ = "news_comments"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    news_id = Column(Uuid(as_uuid=True), ForeignKey("news.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(Uuid(as_uuid=True), ForeignKey("profiles.id"), nullable=False)

    # Snapshot of the author at comment time
    author_name = Column(String(100), nullable=False)
    role = Column(String(20), nullable=False, default="SILVER")

    text = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))
