"""NewsService — news feed, neighbour navigation and news comments.

Responsibilities:
- Newest-first listing and admin CRUD
- Detail view with the previous (older) and next (newer) item by created_at
- Comments that snapshot the author's display name and role at write time
"""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

import structlog
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.core.exceptions import NotFound, SubmissionFailure
from app.db.models.news import News, NewsComment
from app.domain.identity import ActingIdentity

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class NewsWithNeighbors:
    news: News
    previous: News | None
    next: News | None


class NewsService:
    """Read and maintain the news and news_comments tables."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    async def list_news(self, limit: int = 50) -> list[News]:
        async with self.session_factory() as session:
            result = await session.execute(select(News).order_by(News.created_at.desc()).limit(limit))
            return list(result.scalars().all())

    async def get_with_neighbors(self, news_id: UUID) -> NewsWithNeighbors:
        """Return a news item with its chronological neighbours.

        Raises:
            NotFound: If the news item does not exist
        """
        async with self.session_factory() as session:
            news = await session.get(News, news_id)
            if news is None:
                raise NotFound("News not found")

            previous = await session.execute(
                select(News).where(News.created_at < news.created_at).order_by(News.created_at.desc()).limit(1)
            )
            following = await session.execute(
                select(News).where(News.created_at > news.created_at).order_by(News.created_at.asc()).limit(1)
            )
            return NewsWithNeighbors(
                news=news,
                previous=previous.scalar_one_or_none(),
                next=following.scalar_one_or_none(),
            )

    async def create(self, title: str, category: str, summary: str, content: str) -> News:
        news = News(title=title, category=category, summary=summary, content=content, created_at=datetime.now(UTC))
        try:
            async with self.session_factory() as session:
                session.add(news)
                await session.commit()
                await session.refresh(news)
        except SQLAlchemyError as exc:
            raise SubmissionFailure("Could not save the news item") from exc

        logger.info("news_created", news_id=str(news.id))
        return news

    async def update(self, news_id: UUID, fields: dict) -> News:
        """Apply ``fields`` (title, category, summary, content) to one news item.

        Raises:
            NotFound: If the news item does not exist
        """
        try:
            async with self.session_factory() as session:
                news = await session.get(News, news_id)
                if news is None:
                    raise NotFound("News not found")
                for field, value in fields.items():
                    setattr(news, field, value)
                await session.commit()
                await session.refresh(news)
        except SQLAlchemyError as exc:
            raise SubmissionFailure("Could not update the news item") from exc

        logger.info("news_updated", news_id=str(news_id), fields=sorted(fields))
        return news

    async def delete(self, news_id: UUID) -> None:
        try:
            async with self.session_factory() as session:
                news = await session.get(News, news_id)
                if news is None:
                    raise NotFound("News not found")
                await session.delete(news)
                await session.commit()
        except SQLAlchemyError as exc:
            raise SubmissionFailure("Could not delete the news item") from exc

        logger.info("news_deleted", news_id=str(news_id))

    async def list_comments(self, news_id: UUID) -> list[NewsComment]:
        """Newest first."""
        async with self.session_factory() as session:
            result = await session.execute(
                select(NewsComment).where(NewsComment.news_id == news_id).order_by(NewsComment.created_at.desc())
            )
            return list(result.scalars().all())

    async def add_comment(self, news_id: UUID, acting: ActingIdentity, text: str) -> NewsComment:
        """Raises NotFound if the news item does not exist."""
        try:
            async with self.session_factory() as session:
                if await session.get(News, news_id) is None:
                    raise NotFound("News not found")

                comment = NewsComment(
                    news_id=news_id,
                    user_id=acting.user_id,
                    author_name=acting.display_name,
                    role=acting.role.value,
                    text=text,
                    created_at=datetime.now(UTC),
                )
                session.add(comment)
                await session.commit()
                await session.refresh(comment)
        except SQLAlchemyError as exc:
            raise SubmissionFailure("Could not save the comment") from exc

        logger.info("news_comment_added", news_id=str(news_id), comment_id=str(comment.id))
        return comment
