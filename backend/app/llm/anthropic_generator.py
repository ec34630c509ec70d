"""AnthropicTextGenerator — direct anthropic.AsyncAnthropic Messages call.

Single request per call; no retries. Model, temperature and token budget
come from Settings.
"""

import anthropic
import structlog

from app.core.config import get_settings

logger = structlog.get_logger(__name__)


class AnthropicTextGenerator:
    """TextGenerator backed by the Anthropic Messages API."""

    def __init__(
        self,
        client: anthropic.AsyncAnthropic | None = None,
        model: str | None = None,
        temperature: float | None = None,
        max_tokens: int | None = None,
    ):
        settings = get_settings()
        self.client = client or anthropic.AsyncAnthropic(api_key=settings.anthropic_api_key)
        self.model = model or settings.synthesis_model
        self.temperature = settings.synthesis_temperature if temperature is None else temperature
        self.max_tokens = max_tokens or settings.synthesis_max_tokens

    async def generate(self, prompt: str, system: str | None = None) -> str:
        kwargs = {
            "model": self.model,
            "max_tokens": self.max_tokens,
            "temperature": self.temperature,
            "messages": [{"role": "user", "content": prompt}],
        }
        if system:
            kwargs["system"] = system

        response = await self.client.messages.create(**kwargs)

        text = "".join(block.text for block in response.content if getattr(block, "type", "text") == "text")
        logger.debug("text_generated", model=self.model, chars=len(text))
        return text
