"""Guided interview state machine.

Pure reducer: ``transition(state, event) -> state``. No DB access, no LLM
calls, fully deterministic. InterviewService performs the I/O around it and
feeds the outcomes back in as events.

Lifecycle:
    SELECTING_CATEGORY -> AWAITING_ANSWER (one per question)
        -> SUBMITTING | SYNTHESIZING -> SUBMITTING -> COMPLETE
    SYNTHESIZING / SUBMITTING -> FAILED -> (retry) SUBMITTING | AWAITING_ANSWER
    any -> (abort) SELECTING_CATEGORY

Invariant: answers[i] is the answer to questions[i]; len(answers) never
exceeds len(questions). Events that do not apply to the current status
return the state unchanged.
"""

from dataclasses import dataclass, replace
from enum import StrEnum
from typing import Callable

from app.domain.categories import can_author
from app.domain.questions import DEFAULT_QUESTIONS, fit_answers
from app.domain.roles import Role


class InterviewStatus(StrEnum):
    SELECTING_CATEGORY = "selecting_category"
    AWAITING_ANSWER = "awaiting_answer"
    SYNTHESIZING = "synthesizing"
    SUBMITTING = "submitting"
    COMPLETE = "complete"
    FAILED = "failed"


class FailureKind(StrEnum):
    PERMISSION_DENIED = "permission_denied"
    SYNTHESIS_FAILURE = "synthesis_failure"
    SUBMISSION_FAILURE = "submission_failure"


NOTICE_RESTRICTED = "⚠️ 고수의 방은 GOLD 등급 이상만 작성이 가능합니다."
NOTICE_SUBMITTING = "제공해주신 답변을 바탕으로 리포트를 기록 중입니다..."
NOTICE_SYNTHESIZING = "페르소나를 바탕으로 AI 답변을 생성 중입니다..."
NOTICE_COMPLETE = "리포트가 게시판에 등록되었습니다."
NOTICE_SUBMISSION_FAILED = "리포트 저장 중 오류가 발생했습니다."
NOTICE_SYNTHESIS_FAILED = "AI 답변 생성 중 오류가 발생했습니다."


@dataclass(frozen=True)
class InterviewState:
    """Snapshot of one interview. Discarded after COMPLETE; never persisted."""

    flow: str = "community"
    status: InterviewStatus = InterviewStatus.SELECTING_CATEGORY
    category: str | None = None
    questions: tuple[str, ...] = ()
    pointer: int = 0
    answers: tuple[str, ...] = ()
    prompt: str | None = None
    notice: str | None = None
    failure: FailureKind | None = None
    record_id: str | None = None

    @property
    def question_count(self) -> int:
        return len(self.questions)

    @property
    def all_answered(self) -> bool:
        return bool(self.questions) and len(self.answers) == len(self.questions)

    @property
    def is_busy(self) -> bool:
        """True while a synthesis or submission is in flight."""
        return self.status in (InterviewStatus.SYNTHESIZING, InterviewStatus.SUBMITTING)


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SelectCategory:
    category: str
    role: Role
    questions: tuple[str, ...]


@dataclass(frozen=True)
class SubmitAnswer:
    text: str


@dataclass(frozen=True)
class StartSynthesis:
    pass


@dataclass(frozen=True)
class SynthesisSucceeded:
    answers: tuple[str, ...]


@dataclass(frozen=True)
class SynthesisFailed:
    reason: str = ""


@dataclass(frozen=True)
class SubmissionSucceeded:
    record_id: str


@dataclass(frozen=True)
class SubmissionFailed:
    reason: str = ""


@dataclass(frozen=True)
class RetrySubmission:
    pass


@dataclass(frozen=True)
class Abort:
    pass


InterviewEvent = (
    SelectCategory
    | SubmitAnswer
    | StartSynthesis
    | SynthesisSucceeded
    | SynthesisFailed
    | SubmissionSucceeded
    | SubmissionFailed
    | RetrySubmission
    | Abort
)


def new_interview(flow: str = "community") -> InterviewState:
    """Return the initial state for a flow."""
    return InterviewState(flow=flow)


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------


def _on_select(state: InterviewState, event: SelectCategory) -> InterviewState:
    if state.status != InterviewStatus.SELECTING_CATEGORY:
        return state

    if not can_author(event.role, event.category):
        return replace(state, notice=NOTICE_RESTRICTED, failure=FailureKind.PERMISSION_DENIED)

    questions = tuple(event.questions) or DEFAULT_QUESTIONS
    return InterviewState(
        flow=state.flow,
        status=InterviewStatus.AWAITING_ANSWER,
        category=event.category,
        questions=questions,
        pointer=0,
        answers=(),
        prompt=questions[0],
        notice=f"감사합니다. [{event.category}] 분석을 시작합니다. 첫 번째 질문입니다.",
    )


def _on_answer(state: InterviewState, event: SubmitAnswer) -> InterviewState:
    if state.status != InterviewStatus.AWAITING_ANSWER:
        return state

    text = event.text.strip()
    if not text:
        return state

    answers = state.answers + (text,)
    next_pointer = state.pointer + 1
    if next_pointer < state.question_count:
        return replace(
            state,
            answers=answers,
            pointer=next_pointer,
            prompt=state.questions[next_pointer],
            notice=None,
            failure=None,
        )

    return replace(
        state,
        answers=answers,
        status=InterviewStatus.SUBMITTING,
        prompt=None,
        notice=NOTICE_SUBMITTING,
        failure=None,
    )


def _on_start_synthesis(state: InterviewState, event: StartSynthesis) -> InterviewState:
    if state.status != InterviewStatus.AWAITING_ANSWER:
        return state
    return replace(state, status=InterviewStatus.SYNTHESIZING, prompt=None, notice=NOTICE_SYNTHESIZING)


def _on_synthesis_succeeded(state: InterviewState, event: SynthesisSucceeded) -> InterviewState:
    if state.status != InterviewStatus.SYNTHESIZING:
        return state
    answers = fit_answers(event.answers, state.question_count)
    return replace(
        state,
        answers=answers,
        pointer=max(state.question_count - 1, 0),
        status=InterviewStatus.SUBMITTING,
        notice=NOTICE_SUBMITTING,
        failure=None,
    )


def _on_synthesis_failed(state: InterviewState, event: SynthesisFailed) -> InterviewState:
    if state.status != InterviewStatus.SYNTHESIZING:
        return state
    return replace(
        state,
        status=InterviewStatus.FAILED,
        notice=NOTICE_SYNTHESIS_FAILED,
        failure=FailureKind.SYNTHESIS_FAILURE,
    )


def _on_submission_succeeded(state: InterviewState, event: SubmissionSucceeded) -> InterviewState:
    if state.status != InterviewStatus.SUBMITTING:
        return state
    return replace(
        state,
        status=InterviewStatus.COMPLETE,
        record_id=event.record_id,
        notice=NOTICE_COMPLETE,
        failure=None,
    )


def _on_submission_failed(state: InterviewState, event: SubmissionFailed) -> InterviewState:
    if state.status != InterviewStatus.SUBMITTING:
        return state
    return replace(
        state,
        status=InterviewStatus.FAILED,
        notice=NOTICE_SUBMISSION_FAILED,
        failure=FailureKind.SUBMISSION_FAILURE,
    )


def _on_retry(state: InterviewState, event: RetrySubmission) -> InterviewState:
    if state.status != InterviewStatus.FAILED:
        return state

    if state.all_answered:
        return replace(state, status=InterviewStatus.SUBMITTING, notice=NOTICE_SUBMITTING, failure=None)

    pointer = len(state.answers)
    return replace(
        state,
        status=InterviewStatus.AWAITING_ANSWER,
        pointer=pointer,
        prompt=state.questions[pointer],
        notice=None,
        failure=None,
    )


def _on_abort(state: InterviewState, event: Abort) -> InterviewState:
    return new_interview(state.flow)


_HANDLERS: dict[type, Callable[[InterviewState, object], InterviewState]] = {
    SelectCategory: _on_select,
    SubmitAnswer: _on_answer,
    StartSynthesis: _on_start_synthesis,
    SynthesisSucceeded: _on_synthesis_succeeded,
    SynthesisFailed: _on_synthesis_failed,
    SubmissionSucceeded: _on_submission_succeeded,
    SubmissionFailed: _on_submission_failed,
    RetrySubmission: _on_retry,
    Abort: _on_abort,
}


def transition(state: InterviewState, event: InterviewEvent) -> InterviewState:
    """Apply ``event`` to ``state`` and return the next state.

    Raises:
        TypeError: If ``event`` is not an interview event
    """
    handler = _HANDLERS.get(type(event))
    if handler is None:
        raise TypeError(f"Unknown interview event: {type(event).__name__}")
    return handler(state, event)
