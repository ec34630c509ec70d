"""ChatQuestion model — the per-category interview question catalog."""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Integer, String, Text, Uuid

from app.db.base import Base


class ChatQuestion(Base):
    __tablename__ = "chat_questions"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    category = Column(String(100), nullable=False, index=True)
    question_text = Column(Text, nullable=False)

    # Ordering is by comparison; gaps after deletes are allowed, ties break on created_at
    order_index = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))
