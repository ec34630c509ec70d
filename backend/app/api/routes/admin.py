"""Admin API routes — members, posts, news, question catalog, proxy publishing."""

from uuid import UUID

from fastapi import APIRouter, Depends, Response

from app.api.schemas.admin import (
    MemberCommentResponse,
    MemberDetailResponse,
    ProfileSummary,
    ProfileUpdate,
    ProxyPostRequest,
    QuestionCreate,
    QuestionEntryResponse,
    QuestionUpdate,
    ReorderRequest,
    profile_to_summary,
    question_to_response,
)
from app.core.auth import require_admin
from app.db.base import get_session_factory
from app.domain.identity import ActingIdentity
from app.llm.text_generator import TextGenerator
from app.schemas.news import NewsRequest, NewsResponse, NewsUpdate, news_to_response
from app.schemas.posts import PostDraft, PostResponse, post_to_response
from app.schemas.synthesis import SynthesizeRequest, SynthesizeResponse
from app.services.catalog_service import QuestionCatalog
from app.services.interview_service import InterviewService
from app.services.member_service import MemberService
from app.services.news_service import NewsService
from app.services.post_service import PostService
from app.services.submission_gateway import SubmissionGateway
from app.services.synthesis_service import AnswerSynthesizer

router = APIRouter(prefix="/admin", tags=["admin"])


def get_text_generator() -> TextGenerator:
    """Dependency that provides the TextGenerator for answer synthesis.

    Returns AnthropicTextGenerator in production (when ANTHROPIC_API_KEY is set).
    Falls back to TextGeneratorFake for local dev without API key.
    Override this dependency in tests via app.dependency_overrides.
    """
    from app.core.config import get_settings

    settings = get_settings()

    if settings.anthropic_api_key:
        from app.llm.anthropic_generator import AnthropicTextGenerator

        return AnthropicTextGenerator()
    else:
        from app.llm.text_generator_fake import TextGeneratorFake

        return TextGeneratorFake()


# ---------- Members ----------


@router.get("/users", response_model=list[ProfileSummary])
async def list_users(_: ActingIdentity = Depends(require_admin)):
    profiles = await MemberService(get_session_factory()).list_profiles()
    return [profile_to_summary(p) for p in profiles]


@router.get("/users/{user_id}", response_model=MemberDetailResponse)
async def get_user(user_id: UUID, _: ActingIdentity = Depends(require_admin)):
    """Member profile with their posts and comments."""
    detail = await MemberService(get_session_factory()).get_detail(user_id)
    return MemberDetailResponse(
        profile=profile_to_summary(detail.profile),
        posts=[post_to_response(p) for p in detail.posts],
        comments=[
            MemberCommentResponse(
                id=str(c.id),
                post_id=str(c.post_id) if c.post_id else None,
                post_title=c.post_title,
                text=c.text,
                created_at=c.created_at.isoformat(),
            )
            for c in detail.comments
        ],
    )


@router.put("/users/{user_id}", response_model=ProfileSummary)
async def update_user(user_id: UUID, body: ProfileUpdate, _: ActingIdentity = Depends(require_admin)):
    """Change a member's role, persona memo or nickname."""
    profile = await MemberService(get_session_factory()).update_profile(
        user_id,
        role=body.role,
        persona_memo=body.persona_memo,
        nickname=body.nickname,
    )
    return profile_to_summary(profile)


# ---------- Posts ----------


@router.get("/posts", response_model=list[PostResponse])
async def list_all_posts(_: ActingIdentity = Depends(require_admin)):
    posts = await PostService(get_session_factory()).list_posts(limit=500)
    return [post_to_response(p) for p in posts]


@router.delete("/posts/{post_id}", status_code=204)
async def delete_any_post(post_id: UUID, acting: ActingIdentity = Depends(require_admin)):
    await PostService(get_session_factory()).delete_post(post_id, acting)
    return Response(status_code=204)


# ---------- News ----------


@router.get("/news", response_model=list[NewsResponse])
async def list_news(_: ActingIdentity = Depends(require_admin)):
    items = await NewsService(get_session_factory()).list_news(limit=500)
    return [news_to_response(n) for n in items]


@router.post("/news", response_model=NewsResponse, status_code=201)
async def create_news(body: NewsRequest, _: ActingIdentity = Depends(require_admin)):
    news = await NewsService(get_session_factory()).create(
        title=body.title,
        category=body.category,
        summary=body.summary,
        content=body.content,
    )
    return news_to_response(news)


@router.put("/news/{news_id}", response_model=NewsResponse)
async def update_news(news_id: UUID, body: NewsUpdate, _: ActingIdentity = Depends(require_admin)):
    news = await NewsService(get_session_factory()).update(news_id, body.model_dump(exclude_unset=True))
    return news_to_response(news)


@router.delete("/news/{news_id}", status_code=204)
async def delete_news(news_id: UUID, _: ActingIdentity = Depends(require_admin)):
    await NewsService(get_session_factory()).delete(news_id)
    return Response(status_code=204)


# ---------- Question catalog ----------


@router.get("/questions/{category}", response_model=list[QuestionEntryResponse])
async def list_questions(category: str, _: ActingIdentity = Depends(require_admin)):
    entries = await QuestionCatalog(get_session_factory()).list_entries(category)
    return [question_to_response(e) for e in entries]


@router.post("/questions/{category}", response_model=QuestionEntryResponse, status_code=201)
async def add_question(category: str, body: QuestionCreate, _: ActingIdentity = Depends(require_admin)):
    """Append a question at the end of the category's list."""
    entry = await QuestionCatalog(get_session_factory()).append(category, body.question_text)
    return question_to_response(entry)


@router.put("/questions/item/{question_id}", response_model=QuestionEntryResponse)
async def edit_question(question_id: UUID, body: QuestionUpdate, _: ActingIdentity = Depends(require_admin)):
    entry = await QuestionCatalog(get_session_factory()).edit_text(question_id, body.question_text)
    return question_to_response(entry)


@router.delete("/questions/item/{question_id}", status_code=204)
async def delete_question(question_id: UUID, _: ActingIdentity = Depends(require_admin)):
    await QuestionCatalog(get_session_factory()).remove(question_id)
    return Response(status_code=204)


@router.post("/questions/{category}/reorder", response_model=list[QuestionEntryResponse])
async def reorder_questions(category: str, body: ReorderRequest, _: ActingIdentity = Depends(require_admin)):
    """Swap one question with its neighbour; moves past either end change nothing."""
    entries = await QuestionCatalog(get_session_factory()).reorder(category, body.index, body.direction)
    return [question_to_response(e) for e in entries]


# ---------- Publishing ----------


@router.post("/proxy-posts", response_model=PostResponse, status_code=201)
async def create_proxy_post(body: ProxyPostRequest, acting: ActingIdentity = Depends(require_admin)):
    """Publish a post attributed to another member, looked up by email."""
    session_factory = get_session_factory()
    draft = PostDraft(**body.model_dump(exclude={"target_email"}))
    post_id = await SubmissionGateway(session_factory).submit(draft, acting, target_email=body.target_email)
    post = await PostService(session_factory).get_post(post_id)
    return post_to_response(post)


@router.post("/synthesize", response_model=SynthesizeResponse)
async def synthesize_report(
    body: SynthesizeRequest,
    acting: ActingIdentity = Depends(require_admin),
    generator: TextGenerator = Depends(get_text_generator),
):
    """Answer a category's questions as a persona, optionally publishing the report.

    With ``publish`` the report is stored as ``target_email`` (or the admin
    when no target is given).

    Raises:
        SynthesisFailure(502): The generative call failed or returned nothing
        NotFound(404): Target member does not exist
        SubmissionFailure(503): The post could not be stored
    """
    session_factory = get_session_factory()
    service = InterviewService(
        QuestionCatalog(session_factory),
        SubmissionGateway(session_factory),
        synthesizer=AnswerSynthesizer(generator),
    )

    state = await service.start(acting, category=body.category)
    state = await service.synthesize(state, body.persona)
    service.raise_for_failure(state)
    draft = service.build_draft(state)

    post_id = None
    if body.publish:
        state = await service.submit(state, acting, target_email=body.target_email)
        service.raise_for_failure(state)
        post_id = state.record_id

    return SynthesizeResponse(
        category=body.category,
        questions=list(state.questions),
        answers=list(state.answers),
        content=draft.content,
        title=draft.title,
        post_id=post_id,
    )
