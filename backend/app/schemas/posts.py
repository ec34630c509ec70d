"""Community post Pydantic schemas — drafts, responses and comments."""

from pydantic import BaseModel, Field, field_validator


class PostDraft(BaseModel):
    """Everything the author controls on a post; identity fields are added on submit."""

    title: str = Field(..., min_length=1, max_length=255)
    category: str = Field(..., min_length=1, max_length=100)
    content: str = Field(..., min_length=1)
    result: str | None = None
    tool: str | None = None
    cost: str | None = None
    daily_time: str | None = None

    @field_validator("title", "category")
    @classmethod
    def strip_required(cls, v: str) -> str:
        """Reject empty or whitespace-only title and category."""
        stripped = v.strip()
        if not stripped:
            raise ValueError("Title and category cannot be empty")
        return stripped

    @field_validator("content")
    @classmethod
    def reject_blank_content(cls, v: str) -> str:
        """Reject whitespace-only content; Markdown is otherwise kept verbatim."""
        if not v.strip():
            raise ValueError("Content cannot be empty")
        return v


class PostResponse(BaseModel):
    id: str
    title: str
    author: str
    category: str
    content: str
    result: str | None
    tool: str | None
    cost: str | None
    daily_time: str | None
    user_id: str | None
    likes: int
    created_at: str


class PostTemplateResponse(BaseModel):
    """Blank Markdown prefill for direct writing."""

    category: str
    content: str


class CommentRequest(BaseModel):
    text: str = Field(..., min_length=1)

    @field_validator("text")
    @classmethod
    def reject_whitespace_only(cls, v: str) -> str:
        stripped = v.strip()
        if not stripped:
            raise ValueError("Comment cannot be empty")
        return stripped


class CommentResponse(BaseModel):
    id: str
    post_id: str | None
    user_id: str
    text: str
    created_at: str


def post_to_response(post) -> PostResponse:
    """Convert a Post row into its API shape."""
    return PostResponse(
        id=str(post.id),
        title=post.title,
        author=post.author,
        category=post.category,
        content=post.content,
        result=post.result,
        tool=post.tool,
        cost=post.cost,
        daily_time=post.daily_time,
        user_id=str(post.user_id) if post.user_id else None,
        likes=post.likes or 0,
        created_at=post.created_at.isoformat(),
    )


def comment_to_response(comment) -> CommentResponse:
    return CommentResponse(
        id=str(comment.id),
        post_id=str(comment.post_id) if comment.post_id else None,
        user_id=str(comment.user_id),
        text=comment.text,
        created_at=comment.created_at.isoformat(),
    )
