"""Tests for AnswerSynthesizer and the synthesis prompt."""

from unittest.mock import AsyncMock

import pytest

from app.core.exceptions import SynthesisFailure
from app.domain.questions import NO_ANSWER_PLACEHOLDER, fit_answers
from app.llm.text_generator import TextGenerator
from app.llm.text_generator_fake import TextGeneratorFake
from app.schemas.synthesis import PersonaDescriptor
from app.services.synthesis_service import (
    SYNTHESIS_SYSTEM_PROMPT,
    AnswerSynthesizer,
    build_synthesis_prompt,
    split_answers,
)

pytestmark = pytest.mark.unit

QUESTIONS = ["어떤 도구를 쓰셨나요?", "결과는 어땠나요?", "추천하시나요?"]


@pytest.fixture
def persona():
    return PersonaDescriptor(
        proficiency="beginner",
        scam_exposure="once",
        side_income_experience="under_one_year",
        attitude="skeptical",
        occupation="office_worker",
        marital_status="married",
        parental_status="has_children",
    )


def test_fake_satisfies_protocol():
    assert isinstance(TextGeneratorFake(), TextGenerator)


def test_prompt_embeds_traits_and_numbered_questions(persona):
    prompt = build_synthesis_prompt(persona, QUESTIONS)

    assert "AI 초보" in prompt
    assert "강의 사기 피해 1회 경험" in prompt
    assert "직장인" in prompt
    assert "자녀 있음" in prompt
    assert "1. 어떤 도구를 쓰셨나요?" in prompt
    assert "3. 추천하시나요?" in prompt
    assert prompt.index("1. ") < prompt.index("2. ") < prompt.index("3. ")


def test_persona_rejects_values_outside_closed_sets():
    with pytest.raises(ValueError):
        PersonaDescriptor(
            proficiency="wizard",
            scam_exposure="never",
            side_income_experience="none",
            attitude="neutral",
            occupation="student",
            marital_status="single",
            parental_status="no_children",
        )


def test_split_answers_drops_blank_lines():
    assert split_answers("  첫째 \n\n둘째\n   \n") == ["첫째", "둘째"]


@pytest.mark.asyncio
async def test_happy_path_one_answer_per_question(persona, text_generator_fake):
    synthesizer = AnswerSynthesizer(text_generator_fake)

    answers = await synthesizer.synthesize(persona, QUESTIONS)

    assert len(answers) == 3
    assert len(text_generator_fake.calls) == 1
    _, system = text_generator_fake.calls[0]
    assert system == SYNTHESIS_SYSTEM_PROMPT


@pytest.mark.asyncio
async def test_single_line_reply_does_not_raise(persona):
    synthesizer = AnswerSynthesizer(TextGeneratorFake(scenario="single_line"))

    answers = await synthesizer.synthesize(persona, QUESTIONS)

    assert len(answers) == 1
    fitted = fit_answers(answers, len(QUESTIONS))
    assert fitted[1] == NO_ANSWER_PLACEHOLDER
    assert fitted[2] == NO_ANSWER_PLACEHOLDER


@pytest.mark.asyncio
async def test_generator_failure_raises_synthesis_failure(persona, text_generator_failing):
    synthesizer = AnswerSynthesizer(text_generator_failing)

    with pytest.raises(SynthesisFailure):
        await synthesizer.synthesize(persona, QUESTIONS)

    # Exactly one attempt, no retries
    assert len(text_generator_failing.calls) == 1


@pytest.mark.asyncio
async def test_blank_reply_raises_synthesis_failure(persona):
    synthesizer = AnswerSynthesizer(TextGeneratorFake(scenario="blank"))

    with pytest.raises(SynthesisFailure):
        await synthesizer.synthesize(persona, QUESTIONS)


@pytest.mark.asyncio
async def test_extra_lines_are_returned_as_is(persona):
    generator = AsyncMock()
    generator.generate.return_value = "a\nb\nc\nd"

    answers = await AnswerSynthesizer(generator).synthesize(persona, QUESTIONS)

    assert answers == ["a", "b", "c", "d"]
    generator.generate.assert_awaited_once()
