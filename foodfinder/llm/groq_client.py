from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Protocol

import groq
from groq import Groq

from ..search.errors import AIServiceError
from .config import DEFAULT_LLM_CONFIG, LLMConfig

logger = logging.getLogger(__name__)

# Field names a text-generation response may carry its output under, in
# lookup order.
TEXT_FIELDS: tuple[str, ...] = ("response", "text")


class TextGenerator(Protocol):
    def __call__(self, prompt: str, max_tokens: int, temperature: float) -> Any: ...


def extract_generated_text(payload: Any) -> str:
    """Return the first string found under ``TEXT_FIELDS``, else ``""``."""
    if payload is None:
        return ""
    for field in TEXT_FIELDS:
        if isinstance(payload, Mapping):
            value = payload.get(field)
        else:
            value = getattr(payload, field, None)
        if isinstance(value, str):
            return value
    return ""


class GroqTextGenerator:
    """Text generation backed by Groq chat completions."""

    def __init__(self, config: LLMConfig = DEFAULT_LLM_CONFIG) -> None:
        self.config = config

    @property
    def available(self) -> bool:
        return self.config.enabled and bool(self.config.api_key)

    def __call__(self, prompt: str, max_tokens: int, temperature: float) -> dict[str, str]:
        if not self.available:
            logger.info("Groq LLM disabled or missing API key, returning empty output")
            return {"response": ""}

        try:
            client = Groq(api_key=self.config.api_key, timeout=self.config.timeout)
            response = client.chat.completions.create(
                model=self.config.model,
                messages=[{"role": "user", "content": prompt}],
                max_tokens=max_tokens,
                temperature=temperature,
            )
        except groq.APIError as exc:
            logger.warning("Groq LLM call failed", exc_info=True)
            raise AIServiceError("AI service is unavailable. Please try again.") from exc

        content = response.choices[0].message.content if response.choices else None
        return {"response": content or ""}
