"""PostService — community board reads, deletes and post comments.

Creating and editing posts goes through SubmissionGateway; this service
covers everything else a board needs.
"""

from uuid import UUID

import structlog
from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.core.exceptions import NotFound, PermissionDenied, SubmissionFailure
from app.db.models.comment import Comment
from app.db.models.post import Post
from app.domain.identity import ActingIdentity
from app.domain.roles import Capability

logger = structlog.get_logger(__name__)


class PostService:
    """Read and moderate rows in the posts and comments tables."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    async def list_posts(self, category: str | None = None, limit: int = 50) -> list[Post]:
        """Newest first, optionally filtered by category."""
        query = select(Post).order_by(Post.created_at.desc()).limit(limit)
        if category:
            query = query.where(Post.category == category)

        async with self.session_factory() as session:
            result = await session.execute(query)
            return list(result.scalars().all())

    async def get_post(self, post_id: UUID) -> Post:
        """Raises NotFound if the post does not exist."""
        async with self.session_factory() as session:
            post = await session.get(Post, post_id)
        if post is None:
            raise NotFound("Post not found")
        return post

    async def delete_post(self, post_id: UUID, acting: ActingIdentity) -> None:
        """Delete a post. Owner or admin only.

        Comments keep their rows with post_id cleared.

        Raises:
            NotFound: If the post does not exist
            PermissionDenied: If acting is neither the owner nor an admin
            SubmissionFailure: If the delete fails
        """
        try:
            async with self.session_factory() as session:
                post = await session.get(Post, post_id)
                if post is None:
                    raise NotFound("Post not found")
                if post.user_id != acting.user_id and not acting.can(Capability.EDIT_ANY_POST):
                    raise PermissionDenied("You can only delete your own posts")

                await session.execute(delete(Post).where(Post.id == post_id))
                await session.commit()
        except SQLAlchemyError as exc:
            raise SubmissionFailure("Could not delete the post") from exc

        logger.info("post_deleted", post_id=str(post_id), user_id=str(acting.user_id))

    async def list_comments(self, post_id: UUID) -> list[Comment]:
        """Oldest first, as a thread reads."""
        async with self.session_factory() as session:
            result = await session.execute(
                select(Comment).where(Comment.post_id == post_id).order_by(Comment.created_at.asc())
            )
            return list(result.scalars().all())

    async def add_comment(self, post_id: UUID, acting: ActingIdentity, text: str) -> Comment:
        """Raises NotFound if the post does not exist."""
        try:
            async with self.session_factory() as session:
                if await session.get(Post, post_id) is None:
                    raise NotFound("Post not found")

                comment = Comment(post_id=post_id, user_id=acting.user_id, text=text)
                session.add(comment)
                await session.commit()
                await session.refresh(comment)
        except SQLAlchemyError as exc:
            raise SubmissionFailure("Could not save the comment") from exc

        logger.info("comment_added", post_id=str(post_id), comment_id=str(comment.id))
        return comment
