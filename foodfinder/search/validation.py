from __future__ import annotations

import logging
from typing import Any, Mapping

from pydantic import BaseModel, ValidationError

from .errors import InvalidRequest, SchemaViolation
from .models import PRICE_RANGES, FoodSearchRequest, SearchCriteria, SearchResult

logger = logging.getLogger(__name__)


def _describe(exc: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
    )


# ---------------------------------------------------------------------------
# Request Validator
# ---------------------------------------------------------------------------


def _optional_text(value: str | None) -> str | None:
    """Return the value verbatim, or ``None`` when absent or blank."""
    if value is None or not value.strip():
        return None
    return value


def validate_request(raw: FoodSearchRequest | Mapping[str, Any]) -> SearchCriteria:
    """
    Turn raw search fields into ``SearchCriteria``.

    Mappings may use wire (camelCase) or attribute (snake_case) keys. Raises
    ``InvalidRequest`` when location is missing or blank, when a text field
    is not text, or when priceRange is not exactly one of
    budget / moderate / upscale (case-sensitive).
    """
    if isinstance(raw, FoodSearchRequest):
        request = raw
    else:
        try:
            request = FoodSearchRequest.model_validate(raw)
        except ValidationError as exc:
            raise InvalidRequest(f"Invalid request format: {_describe(exc)}") from exc

    location = _optional_text(request.location)
    if location is None:
        raise InvalidRequest("location is required")

    price_range = request.price_range
    if price_range is not None and price_range not in PRICE_RANGES:
        raise InvalidRequest(f"priceRange must be one of: {', '.join(PRICE_RANGES)}")

    return SearchCriteria(
        location=location,
        cuisine=_optional_text(request.cuisine),
        price_range=price_range,
        dietary_restrictions=_optional_text(request.dietary_restrictions),
    )


# ---------------------------------------------------------------------------
# Result Validator
# ---------------------------------------------------------------------------


def validate_result(candidate: SearchResult | Mapping[str, Any]) -> SearchResult:
    """
    Authoritative schema check on the reconciled result.

    Validation is strict: values of the wrong type (a rating of ``"4.5"`` or
    ``true``) are rejected rather than converted. Model instances are dumped
    and re-validated so that nothing built earlier in the pipeline skips the
    check. Violations are never repaired.
    """
    if isinstance(candidate, BaseModel):
        candidate = candidate.model_dump(by_alias=True)

    try:
        return SearchResult.model_validate(candidate, strict=True)
    except ValidationError as exc:
        problems = _describe(exc)
        logger.error("Search result failed schema validation (defect): %s", problems)
        raise SchemaViolation(f"Search result failed schema validation: {problems}") from exc
