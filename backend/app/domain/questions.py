"""Built-in question sets and answer access helpers."""

from typing import Sequence

# Served whenever a category has no stored questions or the catalog cannot be read.
# Must never be empty: the interview finishes when the last question is answered.
DEFAULT_QUESTIONS: tuple[str, ...] = (
    "제목을 입력해주세요.",
    "상세 내용을 기록해주세요.",
)

NO_ANSWER_PLACEHOLDER = "답변 없음"

SCAM_REPORT_QUESTIONS: tuple[str, ...] = (
    "실행한 부업명이 무엇인가요?",
    "강의 비용은 얼마였나요?",
    "강의에서 무엇을 배웠나요? 생각나시는대로 서술해 주세요.",
    "강팔이가 제시한 장밋빛 미래를 문장으로 표현하면?",
    "모험가님이 실행한 결과는 어떠했나요?",
    "강팔이가 속았다고 생각하시나요?",
    "왜 그렇게 생각하시나요? 길게 써도 됩니다.",
    "이런 강팔이를 만났을 때, 주의할 사항을 한 수 가르쳐 주세요.",
    "자유롭게 하시고 싶은 말씀 부탁드려요.",
)


def answer_at(answers: Sequence[str], index: int, placeholder: str = NO_ANSWER_PLACEHOLDER) -> str:
    """Return the stripped answer at ``index``, or ``placeholder`` if missing or blank."""
    if 0 <= index < len(answers):
        text = (answers[index] or "").strip()
        if text:
            return text
    return placeholder


def optional_answer(answers: Sequence[str], index: int) -> str | None:
    """Return the stripped answer at ``index``, or None if missing or blank."""
    value = answer_at(answers, index, placeholder="")
    return value or None


def fit_answers(answers: Sequence[str], count: int) -> tuple[str, ...]:
    """Truncate or pad ``answers`` to exactly ``count`` entries.

    Padding uses the placeholder so answers[i] still lines up with questions[i].
    """
    fitted = [answer_at(answers, i) for i in range(min(len(answers), count))]
    fitted.extend(NO_ANSWER_PLACEHOLDER for _ in range(count - len(fitted)))
    return tuple(fitted)
