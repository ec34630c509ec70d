"""TextGenerator Protocol: the seam for every generative-text call.

Implementations:
- AnthropicTextGenerator: Anthropic Messages API (production)
- TextGeneratorFake: deterministic scenario-based double (dev without an API
  key, and tests)
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class TextGenerator(Protocol):
    """One request, one plain-text completion."""

    async def generate(self, prompt: str, system: str | None = None) -> str:
        """Return the completion text for ``prompt``.

        Args:
            prompt: User prompt
            system: Optional system instruction

        Raises:
            Exception: Any provider failure propagates to the caller
        """
        ...
