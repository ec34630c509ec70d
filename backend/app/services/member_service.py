"""MemberService — admin console views over member profiles."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

import structlog
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.core.exceptions import NotFound, SubmissionFailure
from app.db.models.comment import Comment
from app.db.models.post import Post
from app.db.models.profile import Profile
from app.domain.roles import Role

logger = structlog.get_logger(__name__)

DELETED_POST_TITLE = "삭제된 게시글"


@dataclass(frozen=True)
class MemberComment:
    id: UUID
    post_id: UUID | None
    post_title: str
    text: str
    created_at: datetime


@dataclass(frozen=True)
class MemberDetail:
    profile: Profile
    posts: list[Post]
    comments: list[MemberComment]


class MemberService:
    """Read and update profiles on behalf of the admin console."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    async def list_profiles(self) -> list[Profile]:
        async with self.session_factory() as session:
            result = await session.execute(select(Profile).order_by(Profile.created_at.desc()))
            return list(result.scalars().all())

    async def get_detail(self, user_id: UUID) -> MemberDetail:
        """Profile, posts (newest first) and comments with their post titles.

        Comments whose post was deleted carry the "deleted post" title.

        Raises:
            NotFound: If the profile does not exist
        """
        async with self.session_factory() as session:
            profile = await session.get(Profile, user_id)
            if profile is None:
                raise NotFound("Member not found")

            posts = await session.execute(
                select(Post).where(Post.user_id == user_id).order_by(Post.created_at.desc())
            )
            comment_rows = await session.execute(
                select(Comment, Post.title)
                .outerjoin(Post, Comment.post_id == Post.id)
                .where(Comment.user_id == user_id)
                .order_by(Comment.created_at.desc())
            )

            comments = [
                MemberComment(
                    id=comment.id,
                    post_id=comment.post_id,
                    post_title=title or DELETED_POST_TITLE,
                    text=comment.text,
                    created_at=comment.created_at,
                )
                for comment, title in comment_rows.all()
            ]
            return MemberDetail(profile=profile, posts=list(posts.scalars().all()), comments=comments)

    async def update_profile(
        self,
        user_id: UUID,
        role: Role | None = None,
        persona_memo: str | None = None,
        nickname: str | None = None,
    ) -> Profile:
        """Change a member's role, persona memo or nickname. None leaves a field as is.

        Raises:
            NotFound: If the profile does not exist
            SubmissionFailure: If the update fails
        """
        try:
            async with self.session_factory() as session:
                profile = await session.get(Profile, user_id)
                if profile is None:
                    raise NotFound("Member not found")

                if role is not None:
                    profile.role = role.value
                if persona_memo is not None:
                    profile.persona_memo = persona_memo
                if nickname is not None:
                    profile.nickname = nickname

                await session.commit()
                await session.refresh(profile)
        except SQLAlchemyError as exc:
            raise SubmissionFailure("Could not update the member") from exc

        logger.info("member_updated", user_id=str(user_id), role=profile.role)
        return profile
