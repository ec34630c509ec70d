"""Admin API Pydantic schemas."""

from pydantic import BaseModel, Field, field_validator

from app.domain.ordering import Direction
from app.domain.roles import Role
from app.schemas.posts import PostDraft, PostResponse

# ---------- Members ----------


class ProfileSummary(BaseModel):
    id: str
    email: str | None
    nickname: str | None
    role: str
    persona_memo: str | None
    created_at: str


class ProfileUpdate(BaseModel):
    role: Role | None = None
    persona_memo: str | None = None
    nickname: str | None = Field(None, max_length=100)


class MemberCommentResponse(BaseModel):
    id: str
    post_id: str | None
    post_title: str
    text: str
    created_at: str


class MemberDetailResponse(BaseModel):
    profile: ProfileSummary
    posts: list[PostResponse]
    comments: list[MemberCommentResponse]


# ---------- Question catalog ----------


class QuestionEntryResponse(BaseModel):
    id: str
    category: str
    question_text: str
    order_index: int


class QuestionCreate(BaseModel):
    question_text: str = Field(..., min_length=1)

    @field_validator("question_text")
    @classmethod
    def reject_whitespace_only(cls, v: str) -> str:
        stripped = v.strip()
        if not stripped:
            raise ValueError("Question text cannot be empty")
        return stripped


class QuestionUpdate(QuestionCreate):
    pass


class ReorderRequest(BaseModel):
    index: int
    direction: Direction


# ---------- Publishing ----------


class ProxyPostRequest(PostDraft):
    """A post written by an admin and attributed to ``target_email``."""

    target_email: str = Field(..., min_length=3)


def profile_to_summary(profile) -> ProfileSummary:
    return ProfileSummary(
        id=str(profile.id),
        email=profile.email,
        nickname=profile.nickname,
        role=profile.role,
        persona_memo=profile.persona_memo,
        created_at=profile.created_at.isoformat(),
    )


def question_to_response(entry) -> QuestionEntryResponse:
    return QuestionEntryResponse(
        id=str(entry.id),
        category=entry.category,
        question_text=entry.question_text,
        order_index=entry.order_index,
    )
