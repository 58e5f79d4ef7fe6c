"""
llm.py
------
Text-completion clients for the optional itinerary enrichment step.

Both clients expose a single `complete(prompt) -> str`.  Nothing in the
planning engine depends on what they return; the enrichment provider
treats any failure or unusable reply as "no plan".
"""

from __future__ import annotations

from google import genai
from google.genai import types as genai_types

from tourguide import config


class StubLLMClient:
    """No-op client used when USE_STUB_LLM=true or no API key is configured."""

    def complete(self, prompt: str) -> str:  # noqa: ARG002
        return "[stub response]"


class GeminiClient:
    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        timeout_seconds: int | None = None,
    ) -> None:
        timeout = timeout_seconds or config.LLM_TIMEOUT_SECONDS
        self._client = genai.Client(
            api_key=api_key or config.GEMINI_API_KEY,
            http_options=genai_types.HttpOptions(timeout=timeout * 1000),  # milliseconds
        )
        self._model = model or config.LLM_MODEL_NAME

    def complete(self, prompt: str) -> str:
        response = self._client.models.generate_content(
            model=self._model,
            contents=prompt,
        )
        if not response or not response.text:
            raise RuntimeError("Empty Gemini response")
        return response.text.strip()


def get_llm_client() -> StubLLMClient | GeminiClient:
    """Real Gemini client only when stub mode is off and a key is present."""
    if config.USE_STUB_LLM or not config.GEMINI_API_KEY:
        return StubLLMClient()
    return GeminiClient()
