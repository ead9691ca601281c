from __future__ import annotations

import logging
from typing import Any, Mapping

from ..llm.config import DEFAULT_LLM_CONFIG, LLMConfig
from ..llm.groq_client import TextGenerator, extract_generated_text
from .models import FoodSearchRequest, FoodSearchResponse
from .prompt import build_prompt
from .reconciler import reconcile
from .validation import validate_request, validate_result

logger = logging.getLogger(__name__)


def search_food(
    raw: FoodSearchRequest | Mapping[str, Any],
    generator: TextGenerator,
    config: LLMConfig = DEFAULT_LLM_CONFIG,
) -> FoodSearchResponse:
    """
    Run one food search end to end.

    Raises ``InvalidRequest`` before any model call, ``AIServiceError`` if the
    generator fails, and ``SchemaViolation`` if the reconciled result is still
    invalid. Malformed model output never raises.
    """
    criteria = validate_request(raw)
    logger.info("Food search for location=%r", criteria.location)

    prompt = build_prompt(criteria)
    payload = generator(prompt, max_tokens=config.max_tokens, temperature=config.temperature)
    raw_text = extract_generated_text(payload)

    reconciliation = reconcile(raw_text, criteria)
    result = validate_result(reconciliation.candidate)

    logger.info(
        "Food search for %r returned %d results (source=%s)",
        criteria.location,
        len(result.search_results),
        reconciliation.source,
    )
    return FoodSearchResponse(result=result, degraded=reconciliation.degraded)
