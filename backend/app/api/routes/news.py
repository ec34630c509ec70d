"""News feed API routes."""

from uuid import UUID

from fastapi import APIRouter, Depends

from app.core.auth import get_acting_identity
from app.db.base import get_session_factory
from app.domain.identity import ActingIdentity
from app.schemas.news import (
    NewsCommentResponse,
    NewsDetailResponse,
    NewsResponse,
    news_comment_to_response,
    news_to_link,
    news_to_response,
)
from app.schemas.posts import CommentRequest
from app.services.news_service import NewsService

router = APIRouter(prefix="/news", tags=["news"])


@router.get("", response_model=list[NewsResponse])
async def list_news():
    items = await NewsService(get_session_factory()).list_news()
    return [news_to_response(n) for n in items]


@router.get("/{news_id}", response_model=NewsDetailResponse)
async def get_news(news_id: UUID):
    """A news item with links to the previous (older) and next (newer) items."""
    detail = await NewsService(get_session_factory()).get_with_neighbors(news_id)
    return NewsDetailResponse(
        news=news_to_response(detail.news),
        previous=news_to_link(detail.previous),
        next=news_to_link(detail.next),
    )


@router.get("/{news_id}/comments", response_model=list[NewsCommentResponse])
async def list_news_comments(news_id: UUID):
    comments = await NewsService(get_session_factory()).list_comments(news_id)
    return [news_comment_to_response(c) for c in comments]


@router.post("/{news_id}/comments", response_model=NewsCommentResponse, status_code=201)
async def add_news_comment(
    news_id: UUID,
    body: CommentRequest,
    acting: ActingIdentity = Depends(get_acting_identity),
):
    """Comment as the caller; name and role are snapshotted on the row."""
    comment = await NewsService(get_session_factory()).add_comment(news_id, acting, body.text)
    return news_comment_to_response(comment)
