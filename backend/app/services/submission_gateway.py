"""SubmissionGateway — the only writer of interview and direct-write posts.

Responsibilities:
- Standard path: the acting member authors the post
- Proxy path (admin only): the post is attributed to a target member looked
  up by email; the acting admin appears nowhere in the stored row
- Category-tier gate re-applied at write time
- Exactly one insert (or update) per successful call, no retries
"""

from datetime import UTC, datetime
from uuid import UUID

import structlog
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.core.exceptions import NotFound, PermissionDenied, SubmissionFailure
from app.db.models.post import Post
from app.db.models.profile import Profile
from app.domain.categories import can_author
from app.domain.identity import ActingIdentity
from app.domain.roles import Capability
from app.schemas.posts import PostDraft

logger = structlog.get_logger(__name__)


class SubmissionGateway:
    """Insert and update rows in the posts table on behalf of an identity."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    async def find_member(self, email: str) -> ActingIdentity:
        """Look up a member by email (case-insensitive).

        Raises:
            NotFound: If no profile has this email
            SubmissionFailure: If the lookup itself fails
        """
        normalized = email.strip().lower()
        try:
            async with self.session_factory() as session:
                result = await session.execute(select(Profile).where(func.lower(Profile.email) == normalized))
                profile = result.scalar_one_or_none()
        except SQLAlchemyError as exc:
            raise SubmissionFailure("Could not look up target member") from exc

        if profile is None:
            raise NotFound(f"No member with email '{email}'")
        return ActingIdentity.from_profile(profile)

    async def submit(
        self,
        draft: PostDraft,
        acting: ActingIdentity,
        target_email: str | None = None,
        author_name: str | None = None,
    ) -> UUID:
        """Insert one post and return its id.

        Args:
            draft: Title, category, Markdown content and metadata fields
            acting: Member performing the action
            target_email: Email of the member to publish as (proxy path only)
            author_name: Byline to store instead of the author's display name

        Raises:
            PermissionDenied: Proxy without PROXY_PUBLISH, or category tier not held
            NotFound: Proxy target does not exist (nothing is written)
            SubmissionFailure: The insert fails
        """
        proxy = target_email is not None
        if proxy:
            if not acting.can(Capability.PROXY_PUBLISH):
                raise PermissionDenied("Only administrators can publish on behalf of another member")
            target = await self.find_member(target_email)
        else:
            target = acting

        self._check_tier(draft.category, acting=acting, author=target)

        post = Post(
            title=draft.title,
            author=author_name or target.display_name,
            category=draft.category,
            content=draft.content,
            result=draft.result,
            tool=draft.tool,
            cost=draft.cost,
            daily_time=draft.daily_time,
            user_id=target.user_id,
            likes=0,
            created_at=datetime.now(UTC),
        )

        try:
            async with self.session_factory() as session:
                session.add(post)
                await session.commit()
                await session.refresh(post)
        except SQLAlchemyError as exc:
            logger.error(
                "post_submit_failed",
                category=draft.category,
                user_id=str(target.user_id),
                proxy=proxy,
                error=str(exc),
                error_type=type(exc).__name__,
            )
            raise SubmissionFailure("Could not save the report") from exc

        if proxy:
            logger.info(
                "proxy_post_submitted",
                post_id=str(post.id),
                category=post.category,
                target_user_id=str(target.user_id),
                acting_user_id=str(acting.user_id),
            )
        else:
            logger.info("post_submitted", post_id=str(post.id), category=post.category, user_id=str(target.user_id))

        return post.id

    async def update(self, post_id: UUID, draft: PostDraft, acting: ActingIdentity) -> Post:
        """Update an existing post's author-controlled fields.

        Author, user_id, created_at and likes are left untouched.

        Raises:
            NotFound: If the post does not exist
            PermissionDenied: If acting is neither the owner nor an admin, or
                the new category's tier is not held
            SubmissionFailure: The update fails
        """
        try:
            async with self.session_factory() as session:
                post = await session.get(Post, post_id)
                if post is None:
                    raise NotFound("Post not found")

                if post.user_id != acting.user_id and not acting.can(Capability.EDIT_ANY_POST):
                    raise PermissionDenied("You can only edit your own posts")

                self._check_tier(draft.category, acting=acting, author=acting)

                post.title = draft.title
                post.category = draft.category
                post.content = draft.content
                post.result = draft.result
                post.tool = draft.tool
                post.cost = draft.cost
                post.daily_time = draft.daily_time

                await session.commit()
                await session.refresh(post)
        except SQLAlchemyError as exc:
            raise SubmissionFailure("Could not update the report") from exc

        logger.info("post_updated", post_id=str(post.id), user_id=str(acting.user_id))
        return post

    @staticmethod
    def _check_tier(category: str, acting: ActingIdentity, author: ActingIdentity) -> None:
        """Reject writes into a tier the author does not hold, unless an admin acts."""
        if can_author(author.role, category) or acting.can(Capability.BYPASS_TIER):
            return
        raise PermissionDenied(f"'{category}' is open to GOLD members and above")
