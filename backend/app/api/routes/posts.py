"""Community board API routes — posts, direct writing and post comments."""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response

from app.core.auth import get_acting_identity
from app.core.exceptions import PermissionDenied
from app.db.base import get_session_factory
from app.domain.categories import can_author
from app.domain.identity import ActingIdentity
from app.reports.renderer import ReportRenderer
from app.schemas.posts import (
    CommentRequest,
    CommentResponse,
    PostDraft,
    PostResponse,
    PostTemplateResponse,
    comment_to_response,
    post_to_response,
)
from app.services.catalog_service import QuestionCatalog
from app.services.post_service import PostService
from app.services.submission_gateway import SubmissionGateway

router = APIRouter(prefix="/posts", tags=["posts"])


@router.get("", response_model=list[PostResponse])
async def list_posts(category: str | None = Query(default=None)):
    """Posts newest first, optionally for one category."""
    posts = await PostService(get_session_factory()).list_posts(category)
    return [post_to_response(p) for p in posts]


@router.get("/template", response_model=PostTemplateResponse)
async def get_post_template(
    category: str = Query(..., min_length=1),
    acting: ActingIdentity = Depends(get_acting_identity),
):
    """Blank report prefill for direct writing into ``category``."""
    if not can_author(acting.role, category):
        raise PermissionDenied(f"'{category}' is open to GOLD members and above")

    questions = await QuestionCatalog(get_session_factory()).fetch_questions(category)
    content = ReportRenderer().render_blank(category, questions)
    return PostTemplateResponse(category=category, content=content)


@router.get("/{post_id}", response_model=PostResponse)
async def get_post(post_id: UUID):
    post = await PostService(get_session_factory()).get_post(post_id)
    return post_to_response(post)


@router.post("", response_model=PostResponse, status_code=201)
async def create_post(draft: PostDraft, acting: ActingIdentity = Depends(get_acting_identity)):
    """Direct write: the caller authors the post."""
    session_factory = get_session_factory()
    post_id = await SubmissionGateway(session_factory).submit(draft, acting)
    post = await PostService(session_factory).get_post(post_id)
    return post_to_response(post)


@router.put("/{post_id}", response_model=PostResponse)
async def update_post(
    post_id: UUID,
    draft: PostDraft,
    acting: ActingIdentity = Depends(get_acting_identity),
):
    """Edit a post. Owner or admin only."""
    post = await SubmissionGateway(get_session_factory()).update(post_id, draft, acting)
    return post_to_response(post)


@router.delete("/{post_id}", status_code=204)
async def delete_post(post_id: UUID, acting: ActingIdentity = Depends(get_acting_identity)):
    await PostService(get_session_factory()).delete_post(post_id, acting)
    return Response(status_code=204)


@router.get("/{post_id}/comments", response_model=list[CommentResponse])
async def list_comments(post_id: UUID):
    comments = await PostService(get_session_factory()).list_comments(post_id)
    return [comment_to_response(c) for c in comments]


@router.post("/{post_id}/comments", response_model=CommentResponse, status_code=201)
async def add_comment(
    post_id: UUID,
    body: CommentRequest,
    acting: ActingIdentity = Depends(get_acting_identity),
):
    comment = await PostService(get_session_factory()).add_comment(post_id, acting, body.text)
    return comment_to_response(comment)
