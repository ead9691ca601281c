from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class LLMConfig:
    api_key: str = os.getenv("GROQ_API_KEY", "")
    model: str = os.getenv("FOOD_SEARCH_MODEL", "llama-3.1-8b-instant")
    timeout: float = float(os.getenv("FOOD_SEARCH_TIMEOUT", "20.0"))
    max_tokens: int = 2000
    temperature: float = 0.7
    enabled: bool = _env_flag("FOOD_SEARCH_LLM_ENABLED", True)


DEFAULT_LLM_CONFIG = LLMConfig()
