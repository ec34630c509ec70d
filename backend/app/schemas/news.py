"""News feed Pydantic schemas."""

from pydantic import BaseModel, Field, field_validator


class NewsRequest(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    category: str = Field("", max_length=100)
    summary: str = ""
    content: str = ""

    @field_validator("title")
    @classmethod
    def reject_blank_title(cls, v: str) -> str:
        stripped = v.strip()
        if not stripped:
            raise ValueError("Title cannot be empty")
        return stripped


class NewsUpdate(BaseModel):
    title: str | None = Field(None, max_length=255)
    category: str | None = Field(None, max_length=100)
    summary: str | None = None
    content: str | None = None


class NewsResponse(BaseModel):
    id: str
    title: str
    category: str
    summary: str
    content: str
    created_at: str


class NewsLink(BaseModel):
    id: str
    title: str


class NewsDetailResponse(BaseModel):
    news: NewsResponse
    previous: NewsLink | None
    next: NewsLink | None


class NewsCommentResponse(BaseModel):
    id: str
    news_id: str
    user_id: str
    author_name: str
    role: str
    text: str
    created_at: str


def news_to_response(news) -> NewsResponse:
    return NewsResponse(
        id=str(news.id),
        title=news.title,
        category=news.category or "",
        summary=news.summary or "",
        content=news.content or "",
        created_at=news.created_at.isoformat(),
    )


def news_to_link(news) -> NewsLink | None:
    if news is None:
        return None
    return NewsLink(id=str(news.id), title=news.title)


def news_comment_to_response(comment) -> NewsCommentResponse:
    return NewsCommentResponse(
        id=str(comment.id),
        news_id=str(comment.news_id),
        user_id=str(comment.user_id),
        author_name=comment.author_name,
        role=comment.role,
        text=comment.text,
        created_at=comment.created_at.isoformat(),
    )
