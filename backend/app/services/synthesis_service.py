"""AnswerSynthesizer — persona-driven answers from one generative-text call.

The collaborator is asked for one answer per line, in question order. The
reply is split into non-empty lines and line i is taken as the answer to
question i. This alignment is best effort: a multi-line or blank-separated
answer shifts every later answer, and fewer lines than questions is normal.
Consumers pad with the "no answer" placeholder (domain.questions.fit_answers)
and must not assume answers[i] is correct near the end of the list.
"""

from typing import Sequence

import structlog

from app.core.exceptions import SynthesisFailure
from app.llm.text_generator import TextGenerator
from app.schemas.synthesis import PersonaDescriptor

logger = structlog.get_logger(__name__)

SYNTHESIS_SYSTEM_PROMPT = (
    "당신은 AI 부업 커뮤니티의 실제 회원처럼 답하는 인터뷰 응답자입니다. "
    "주어진 페르소나의 관점에서 솔직하고 구체적으로 답하세요. "
    "각 질문의 답변은 반드시 한 줄로 작성하고, 질문 순서대로 한 줄에 하나씩만 적으세요. "
    "번호, 머리말, 빈 줄은 넣지 마세요."
)


def build_synthesis_prompt(persona: PersonaDescriptor, questions: Sequence[str]) -> str:
    """Render the single prompt embedding persona traits and numbered questions."""
    lines = ["[페르소나]"]
    lines.extend(f"- {label}: {value}" for label, value in persona.trait_lines())
    lines.append("")
    lines.append("[질문]")
    lines.extend(f"{number}. {question}" for number, question in enumerate(questions, start=1))
    lines.append("")
    lines.append(f"위 {len(questions)}개의 질문에 순서대로, 한 줄에 하나씩 답하세요.")
    return "\n".join(lines)


def split_answers(text: str) -> list[str]:
    """Split a completion into stripped, non-empty lines."""
    return [line.strip() for line in text.splitlines() if line.strip()]


class AnswerSynthesizer:
    """Produces interview answers for a persona via a TextGenerator."""

    def __init__(self, generator: TextGenerator):
        self.generator = generator

    async def synthesize(self, persona: PersonaDescriptor, questions: Sequence[str]) -> list[str]:
        """Return one answer per non-empty reply line.

        The list may be shorter or longer than ``questions``.

        Raises:
            SynthesisFailure: If the call fails or the reply has no usable line
        """
        prompt = build_synthesis_prompt(persona, questions)

        try:
            text = await self.generator.generate(prompt, system=SYNTHESIS_SYSTEM_PROMPT)
        except Exception as exc:
            logger.warning("synthesis_failed", question_count=len(questions), error=str(exc), error_type=type(exc).__name__)
            raise SynthesisFailure("AI answer generation failed") from exc

        answers = split_answers(text or "")
        if not answers:
            logger.warning("synthesis_empty_reply", question_count=len(questions))
            raise SynthesisFailure("AI answer generation returned no answers")

        if len(answers) != len(questions):
            logger.warning("synthesis_line_mismatch", expected=len(questions), received=len(answers))

        return answers
