"""Guided interview Pydantic schemas."""

from pydantic import BaseModel, Field

from app.domain.interview import InterviewState


class QuestionSetResponse(BaseModel):
    category: str
    questions: list[str]


class StartInterviewRequest(BaseModel):
    """Open an interview. ``category`` is ignored by the scam-report flow."""

    category: str | None = None
    flow: str = "community"


class InterviewStateResponse(BaseModel):
    """Client-held interview snapshot; the server keeps no session."""

    flow: str
    status: str
    category: str | None
    questions: list[str]
    pointer: int
    answers: list[str]
    prompt: str | None
    notice: str | None
    failure: str | None
    record_id: str | None


class CompleteInterviewRequest(BaseModel):
    """A finished interview: the question snapshot it was asked with and one answer per question."""

    category: str | None = None
    flow: str = "community"
    questions: list[str] | None = None
    answers: list[str] = Field(..., min_length=1)


class ScamReportRequest(BaseModel):
    answers: list[str] = Field(..., min_length=1)
    author_alias: str | None = Field(None, max_length=100)


def state_to_response(state: InterviewState) -> InterviewStateResponse:
    return InterviewStateResponse(
        flow=state.flow,
        status=state.status.value,
        category=state.category,
        questions=list(state.questions),
        pointer=state.pointer,
        answers=list(state.answers),
        prompt=state.prompt,
        notice=state.notice,
        failure=state.failure.value if state.failure else None,
        record_id=state.record_id,
    )
