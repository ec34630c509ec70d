"""Guided interview API routes — question sets, interview start/complete, scam reports.

The server keeps no interview session: the client holds the question
snapshot returned by /interviews/start and posts it back with the answers.
"""

from fastapi import APIRouter, Depends, HTTPException

from app.core.auth import get_acting_identity
from app.db.base import get_session_factory
from app.domain.identity import ActingIdentity
from app.schemas.interviews import (
    CompleteInterviewRequest,
    InterviewStateResponse,
    QuestionSetResponse,
    ScamReportRequest,
    StartInterviewRequest,
    state_to_response,
)
from app.services.catalog_service import QuestionCatalog
from app.services.interview_service import InterviewService
from app.services.submission_gateway import SubmissionGateway

router = APIRouter()


def _interview_service() -> InterviewService:
    session_factory = get_session_factory()
    return InterviewService(QuestionCatalog(session_factory), SubmissionGateway(session_factory))


@router.get("/questions/{category}", response_model=QuestionSetResponse)
async def get_questions(category: str):
    """Ordered questions for a category, or the default set."""
    catalog = QuestionCatalog(get_session_factory())
    questions = await catalog.fetch_questions(category)
    return QuestionSetResponse(category=category, questions=questions)


@router.post("/interviews/start", response_model=InterviewStateResponse)
async def start_interview(
    request: StartInterviewRequest,
    acting: ActingIdentity = Depends(get_acting_identity),
):
    """Open an interview and return the state awaiting the first answer.

    Raises:
        PermissionDenied(403): Restricted category without GOLD
        HTTPException(422): Unknown flow or missing category
    """
    service = _interview_service()
    try:
        state = await service.start(acting, category=request.category, flow=request.flow)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return state_to_response(state)


@router.post("/interviews/complete", response_model=InterviewStateResponse)
async def complete_interview(
    request: CompleteInterviewRequest,
    acting: ActingIdentity = Depends(get_acting_identity),
):
    """Replay the answers, render the report and store it as a post.

    Raises:
        InvalidInterview(422): Answers do not match the question snapshot
        PermissionDenied(403): Restricted category without GOLD
        SubmissionFailure(503): The post could not be stored
    """
    service = _interview_service()
    try:
        state = await service.replay(
            acting,
            category=request.category,
            questions=request.questions,
            answers=request.answers,
            flow=request.flow,
        )
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    state = await service.submit(state, acting)
    service.raise_for_failure(state)
    return state_to_response(state)


@router.post("/scam-reports", response_model=InterviewStateResponse)
async def submit_scam_report(
    request: ScamReportRequest,
    acting: ActingIdentity = Depends(get_acting_identity),
):
    """Store a nine-answer scam report in the scam-report board."""
    service = _interview_service()
    state = await service.replay(acting, category=None, questions=None, answers=request.answers, flow="scam_report")
    state = await service.submit(state, acting, author_alias=request.author_alias)
    service.raise_for_failure(state)
    return state_to_response(state)
