"""Markdown report rendering.

Renders interview results into the community's report layout:

    ## 📊 <category> Intelligence Report

    ### 🔍 <question>
    > <answer or "답변 없음">

Rendering is pure: the same inputs always give byte-identical output, and
missing or blank answers render as the placeholder instead of raising.
"""

from pathlib import Path
from typing import Sequence

from jinja2 import Environment, FileSystemLoader

from app.domain.questions import NO_ANSWER_PLACEHOLDER, SCAM_REPORT_QUESTIONS, answer_at

REPORT_TEMPLATE_DIR = Path(__file__).parent / "templates"

TITLE_MAX_LENGTH = 255


def derive_title(category: str, answers: Sequence[str]) -> str:
    """First answer (trimmed) when present, else ``[<category>] 데이터 리포트``."""
    title = answer_at(answers, 0, placeholder="")
    if not title:
        return f"[{category}] 데이터 리포트"
    return title[:TITLE_MAX_LENGTH]


class ReportRenderer:
    """Render interview Markdown from jinja2 templates."""

    def __init__(self, template_dir: Path = REPORT_TEMPLATE_DIR):
        self.env = Environment(
            loader=FileSystemLoader(str(template_dir)),
            autoescape=False,  # Markdown should NOT be escaped
            keep_trailing_newline=True,
            trim_blocks=True,
        )

    def render(self, category: str, questions: Sequence[str], answers: Sequence[str]) -> str:
        """Render one section per question, in question order.

        Args:
            category: Board category shown in the heading
            questions: Question texts
            answers: answers[i] answers questions[i]; may be shorter than questions

        Returns:
            Markdown string
        """
        items = [
            {"question": question, "answer": answer_at(answers, index, NO_ANSWER_PLACEHOLDER)}
            for index, question in enumerate(questions)
        ]
        return self._render("report.md.j2", category=category, items=items)

    def render_blank(self, category: str, questions: Sequence[str]) -> str:
        """Same layout with empty quote lines, used to prefill direct writing."""
        items = [{"question": question, "answer": ""} for question in questions]
        return self._render("report.md.j2", category=category, items=items)

    def render_scam_report(self, answers: Sequence[str]) -> str:
        """Fixed-layout scam report over the nine scam-report answers."""
        fitted = [answer_at(answers, index) for index in range(len(SCAM_REPORT_QUESTIONS))]
        return self._render("scam_report.md.j2", a=fitted)

    def _render(self, template_name: str, **context) -> str:
        template = self.env.get_template(template_name)
        return template.render(**context)
