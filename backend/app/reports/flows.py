"""Report flows: how a completed interview becomes a PostDraft.

- CommunityReportFlow: catalog questions for any board category, generic
  report layout, title from the first answer
- ScamReportFlow: fixed nine questions, fixed category, scam report layout
"""

from typing import Sequence

from app.domain.categories import SCAM_REPORT_CATEGORY
from app.domain.identity import ActingIdentity
from app.domain.questions import SCAM_REPORT_QUESTIONS, answer_at, optional_answer
from app.reports.renderer import TITLE_MAX_LENGTH, ReportRenderer, derive_title
from app.schemas.posts import PostDraft

COMMUNITY_RESULT = "기록 완료"
SCAM_REPORT_RESULT = "검증 완료: 사기 주의보"
ANONYMOUS_REPORTER = "익명의모험가"
AUTHOR_MAX_LENGTH = 100


class CommunityReportFlow:
    """Catalog-driven interview for the community boards."""

    name = "community"
    fixed_category: str | None = None
    fixed_questions: tuple[str, ...] | None = None

    def __init__(self, renderer: ReportRenderer | None = None):
        self.renderer = renderer or ReportRenderer()

    def build_draft(self, category: str, questions: Sequence[str], answers: Sequence[str]) -> PostDraft:
        # tool and daily_time follow the default catalog's third and fourth questions
        return PostDraft(
            title=derive_title(category, answers),
            category=category,
            content=self.renderer.render(category, questions, answers),
            result=COMMUNITY_RESULT,
            tool=optional_answer(answers, 2),
            daily_time=optional_answer(answers, 3),
        )

    def author_name(self, acting: ActingIdentity, alias: str | None = None) -> str | None:
        """None: the gateway signs community posts with the author's display name."""
        return None


class ScamReportFlow:
    """Fixed scam-report intake."""

    name = "scam_report"
    fixed_category: str | None = SCAM_REPORT_CATEGORY
    fixed_questions: tuple[str, ...] | None = SCAM_REPORT_QUESTIONS

    def __init__(self, renderer: ReportRenderer | None = None):
        self.renderer = renderer or ReportRenderer()

    def build_draft(self, category: str, questions: Sequence[str], answers: Sequence[str]) -> PostDraft:
        title = f"[피해사례] {answer_at(answers, 0)} 관련 제보 리포트"
        return PostDraft(
            title=title[:TITLE_MAX_LENGTH],
            category=SCAM_REPORT_CATEGORY,
            content=self.renderer.render_scam_report(answers),
            result=SCAM_REPORT_RESULT,
            cost=optional_answer(answers, 1),
        )

    def author_name(self, acting: ActingIdentity, alias: str | None = None) -> str | None:
        """Reporter-chosen alias, else the nickname, else an anonymous reporter name."""
        for name in (alias, acting.nickname):
            if name and name.strip():
                return name.strip()[:AUTHOR_MAX_LENGTH]
        return ANONYMOUS_REPORTER


ReportFlow = CommunityReportFlow | ScamReportFlow

_FLOWS: dict[str, type[CommunityReportFlow] | type[ScamReportFlow]] = {
    CommunityReportFlow.name: CommunityReportFlow,
    ScamReportFlow.name: ScamReportFlow,
}


def get_flow(name: str, renderer: ReportRenderer | None = None) -> ReportFlow:
    """Return the flow registered under ``name``.

    Raises:
        ValueError: If no flow has that name
    """
    flow_cls = _FLOWS.get(name)
    if flow_cls is None:
        raise ValueError(f"Unknown report flow: {name}")
    return flow_cls(renderer)
