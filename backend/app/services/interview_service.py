"""InterviewService — drives the interview reducer around real I/O.

Responsibilities:
- Resolve the question snapshot (catalog or fixed set) and open the interview
- Feed answers, synthesis results and submission results into transition()
- Build the PostDraft through the interview's report flow and submit it
- Replay a client-held session (question snapshot + answers) for the
  stateless HTTP API

Interview state is never persisted; only the resulting post is.
"""

from typing import Sequence

import structlog

from app.core.exceptions import InvalidInterview, PermissionDenied, SubmissionFailure, SynthesisFailure
from app.domain.identity import ActingIdentity
from app.domain.interview import (
    FailureKind,
    InterviewState,
    InterviewStatus,
    SelectCategory,
    StartSynthesis,
    SubmissionFailed,
    SubmissionSucceeded,
    SubmitAnswer,
    SynthesisFailed,
    SynthesisSucceeded,
    new_interview,
    transition,
)
from app.reports.flows import ReportFlow, get_flow
from app.reports.renderer import ReportRenderer
from app.schemas.posts import PostDraft
from app.schemas.synthesis import PersonaDescriptor
from app.services.catalog_service import QuestionCatalog
from app.services.submission_gateway import SubmissionGateway
from app.services.synthesis_service import AnswerSynthesizer

logger = structlog.get_logger(__name__)


class InterviewService:
    """Orchestrates one interview from category selection to a stored post."""

    def __init__(
        self,
        catalog: QuestionCatalog,
        gateway: SubmissionGateway,
        synthesizer: AnswerSynthesizer | None = None,
        renderer: ReportRenderer | None = None,
    ):
        self.catalog = catalog
        self.gateway = gateway
        self.synthesizer = synthesizer
        self.renderer = renderer or ReportRenderer()

    def flow_for(self, state: InterviewState) -> ReportFlow:
        return get_flow(state.flow, self.renderer)

    async def start(
        self,
        acting: ActingIdentity,
        category: str | None = None,
        flow: str = "community",
        questions: Sequence[str] | None = None,
    ) -> InterviewState:
        """Open an interview and return the state awaiting the first answer.

        Args:
            acting: Member taking the interview
            category: Board category; ignored by flows with a fixed category
            flow: Report flow name ("community" or "scam_report")
            questions: Question snapshot to use instead of fetching one

        Raises:
            PermissionDenied: If the category's tier is not held by acting
            ValueError: If the flow is unknown or no category was given
        """
        report_flow = get_flow(flow, self.renderer)
        category = report_flow.fixed_category or category
        if not category:
            raise ValueError("A category is required")

        if report_flow.fixed_questions is not None:
            snapshot = tuple(report_flow.fixed_questions)
        elif questions is not None:
            snapshot = tuple(questions)
        else:
            snapshot = tuple(await self.catalog.fetch_questions(category))

        state = transition(new_interview(flow), SelectCategory(category=category, role=acting.role, questions=snapshot))
        if state.failure == FailureKind.PERMISSION_DENIED:
            logger.info("interview_denied", category=category, user_id=str(acting.user_id), role=acting.role)
            raise PermissionDenied(state.notice)

        logger.debug("interview_started", flow=flow, category=category, question_count=state.question_count)
        return state

    def answer(self, state: InterviewState, text: str) -> InterviewState:
        """Record one answer. Blank text and answers while busy are ignored."""
        return transition(state, SubmitAnswer(text=text))

    async def replay(
        self,
        acting: ActingIdentity,
        category: str | None,
        questions: Sequence[str] | None,
        answers: Sequence[str],
        flow: str = "community",
    ) -> InterviewState:
        """Rebuild a finished interview from its question snapshot and answers.

        Raises:
            PermissionDenied: If the category's tier is not held by acting
            InvalidInterview: If the answers do not complete the interview
        """
        state = await self.start(acting, category=category, flow=flow, questions=questions)
        for text in answers:
            if state.status != InterviewStatus.AWAITING_ANSWER:
                break
            state = self.answer(state, text)

        if state.status != InterviewStatus.SUBMITTING or len(answers) != state.question_count:
            raise InvalidInterview(status=state.status, answered=len(state.answers), expected=state.question_count)
        return state

    async def synthesize(self, state: InterviewState, persona: PersonaDescriptor) -> InterviewState:
        """Replace manual answering with one AI synthesis call.

        Returns SUBMITTING with answers fitted to the question count, or
        FAILED with ``failure = SYNTHESIS_FAILURE``.

        Raises:
            InvalidInterview: If the interview is not awaiting answers
        """
        if self.synthesizer is None:
            raise SynthesisFailure("AI answer generation is not configured")

        state = transition(state, StartSynthesis())
        if state.status != InterviewStatus.SYNTHESIZING:
            raise InvalidInterview(status=state.status, answered=len(state.answers), expected=state.question_count)

        try:
            answers = await self.synthesizer.synthesize(persona, state.questions)
        except SynthesisFailure as exc:
            return transition(state, SynthesisFailed(reason=str(exc)))

        return transition(state, SynthesisSucceeded(answers=tuple(answers)))

    def build_draft(self, state: InterviewState) -> PostDraft:
        """Render the interview's document and metadata."""
        return self.flow_for(state).build_draft(state.category, state.questions, state.answers)

    async def submit(
        self,
        state: InterviewState,
        acting: ActingIdentity,
        target_email: str | None = None,
        author_alias: str | None = None,
    ) -> InterviewState:
        """Write the interview's post through the gateway.

        ``author_alias`` is honoured only by flows that let the reporter pick
        a byline (scam reports).

        Returns COMPLETE with ``record_id`` set, or FAILED with
        ``failure = SUBMISSION_FAILURE``. Permission and lookup errors
        propagate unchanged since retrying cannot fix them.

        Raises:
            InvalidInterview: If the interview is not ready to submit
            PermissionDenied: Tier or proxy capability not held
            NotFound: Proxy target does not exist
        """
        if state.status != InterviewStatus.SUBMITTING:
            raise InvalidInterview(status=state.status, answered=len(state.answers), expected=state.question_count)

        report_flow = self.flow_for(state)
        draft = report_flow.build_draft(state.category, state.questions, state.answers)
        author_name = report_flow.author_name(acting, author_alias)
        try:
            record_id = await self.gateway.submit(draft, acting, target_email=target_email, author_name=author_name)
        except SubmissionFailure as exc:
            return transition(state, SubmissionFailed(reason=str(exc)))

        return transition(state, SubmissionSucceeded(record_id=str(record_id)))

    @staticmethod
    def raise_for_failure(state: InterviewState) -> None:
        """Raise the error matching a FAILED state's failure kind."""
        if state.status != InterviewStatus.FAILED:
            return
        if state.failure == FailureKind.SYNTHESIS_FAILURE:
            raise SynthesisFailure(state.notice)
        raise SubmissionFailure(state.notice)
