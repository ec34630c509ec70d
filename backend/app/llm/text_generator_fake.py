"""TextGeneratorFake: scenario-based double for the TextGenerator protocol.

Scenarios:
- happy_path: one answer per numbered question found in the prompt
- single_line: a single line regardless of how many questions were asked
- blank: only whitespace
- llm_failure: raises like a provider outage

Returns instantly; records every prompt it receives.
"""

import re

_QUESTION_LINE = re.compile(r"^\s*(\d+)\.\s+(.+)$")


class TextGeneratorFake:
    """Deterministic stand-in for AnthropicTextGenerator."""

    VALID_SCENARIOS = {"happy_path", "single_line", "blank", "llm_failure"}

    def __init__(self, scenario: str = "happy_path"):
        if scenario not in self.VALID_SCENARIOS:
            raise ValueError(f"Unknown scenario: {scenario}. Valid scenarios: {self.VALID_SCENARIOS}")
        self.scenario = scenario
        self.calls: list[tuple[str, str | None]] = []

    async def generate(self, prompt: str, system: str | None = None) -> str:
        self.calls.append((prompt, system))

        if self.scenario == "llm_failure":
            raise RuntimeError("Generative text provider unavailable")

        if self.scenario == "blank":
            return "  \n\n "

        numbered = [m.group(1) for m in map(_QUESTION_LINE.match, prompt.splitlines()) if m]

        if self.scenario == "single_line":
            return "AI 도구로 부업을 시작했지만 아직 큰 성과는 없습니다."

        return "\n".join(f"질문 {n}에 대한 모험가의 답변입니다." for n in numbered)
