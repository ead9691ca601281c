"""
Reconcile free-text model output into a search result candidate.

The model is an untrusted text generator. ``reconcile`` never raises on
malformed model output; it walks these tiers and stops at the first that
yields a candidate:

1. Extract the outermost ``{`` ... ``}`` span from the text.
2. Parse it as JSON and check the top-level shape.
3. Synthesize a small default result echoing the caller's criteria.
4. If that synthesis itself raises, synthesize a single minimal entry.

Value-level invariants (rating bounds, price tier enumeration) are left to
``validate_result``, which runs after reconciliation.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from .models import SearchCriteria

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Outcomes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Validated:
    payload: dict[str, Any]


@dataclass(frozen=True)
class Failed:
    reason: str


ReconciliationOutcome = Union[Validated, Failed]


class FallbackContext(str, Enum):
    """How much of the caller's criteria a synthesized result echoes."""

    full = "full"
    minimal = "minimal"


@dataclass(frozen=True)
class Reconciliation:
    candidate: dict[str, Any]
    degraded: bool
    source: str


# ---------------------------------------------------------------------------
# Tier 1 + 2: extraction and structural parse
# ---------------------------------------------------------------------------


def extract_json_candidate(text: str) -> str | None:
    """
    Return the span from the first ``{`` to the last ``}``, or ``None``.

    Heuristic: braces are not balanced, so prose containing two separate JSON
    objects yields one span covering both, which then fails to parse.
    """
    start = text.find("{")
    if start == -1:
        return None
    end = text.rfind("}")
    if end < start:
        return None
    return text[start : end + 1]


def parse_candidate(candidate: str) -> ReconciliationOutcome:
    try:
        parsed = json.loads(candidate)
    except ValueError as exc:
        return Failed(f"invalid JSON: {exc}")

    if not isinstance(parsed, dict):
        return Failed(f"expected a JSON object, got {type(parsed).__name__}")
    if not isinstance(parsed.get("location"), str):
        return Failed("missing or non-text 'location'")
    if not isinstance(parsed.get("searchSummary"), str):
        return Failed("missing or non-text 'searchSummary'")

    results = parsed.get("searchResults")
    if not isinstance(results, list):
        return Failed("missing or non-list 'searchResults'")
    if not all(isinstance(item, dict) for item in results):
        return Failed("'searchResults' contains non-object entries")

    return Validated(parsed)


# ---------------------------------------------------------------------------
# Tier 3 + 4: fallback synthesis
# ---------------------------------------------------------------------------


def _first_entry_dietary(criteria: SearchCriteria) -> list[str]:
    if criteria.dietary_restrictions:
        return [criteria.dietary_restrictions]
    return ["vegetarian-friendly"]


def _full_default(criteria: SearchCriteria) -> dict[str, Any]:
    location = criteria.location
    return {
        "location": location,
        "searchResults": [
            {
                "name": "Local Cafe",
                "cuisine": criteria.cuisine or "American",
                "priceRange": criteria.price_range or "moderate",
                "description": "A cozy local cafe offering fresh, locally-sourced ingredients",
                "address": f"123 Main St, {location}",
                "rating": 4.2,
                "dietaryOptions": _first_entry_dietary(criteria),
            },
            {
                "name": "Pizza Corner",
                "cuisine": "Italian",
                "priceRange": "budget",
                "description": "Authentic Italian pizza with fresh toppings and traditional recipes",
                "address": f"456 Oak Ave, {location}",
                "rating": 4.0,
                "dietaryOptions": ["vegetarian", "vegan options"],
            },
            {
                "name": "Sushi Garden",
                "cuisine": "Japanese",
                "priceRange": "moderate",
                "description": "Fresh sushi and Japanese cuisine in a modern setting",
                "address": f"789 Pine St, {location}",
                "rating": 4.5,
                "dietaryOptions": ["gluten-free options"],
            },
        ],
        "searchSummary": (
            f"Found several great food options in {location}. Mix of local "
            "favorites and diverse cuisines to suit your preferences."
        ),
    }


def _minimal_default(criteria: SearchCriteria) -> dict[str, Any]:
    location = criteria.location
    return {
        "location": location,
        "searchResults": [
            {
                "name": "Downtown Bistro",
                "cuisine": criteria.cuisine or "Contemporary",
                "priceRange": criteria.price_range or "moderate",
                "description": "Modern bistro serving seasonal dishes with local ingredients",
                "address": f"100 Center St, {location}",
                "rating": 4.3,
                "dietaryOptions": _first_entry_dietary(criteria),
            }
        ],
        "searchSummary": f"Found food options in {location} that match your preferences.",
    }


_SYNTHESIZERS = {
    FallbackContext.full: _full_default,
    FallbackContext.minimal: _minimal_default,
}


def synthesize_default(
    criteria: SearchCriteria,
    context: FallbackContext = FallbackContext.full,
) -> dict[str, Any]:
    """Build a schema-valid result from the criteria alone. Deterministic."""
    return _SYNTHESIZERS[context](criteria)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def reconcile(raw_text: str, criteria: SearchCriteria) -> Reconciliation:
    candidate = extract_json_candidate(raw_text or "")
    if candidate is None:
        reason = "no JSON object found in model output"
    else:
        outcome = parse_candidate(candidate)
        if isinstance(outcome, Validated):
            return Reconciliation(outcome.payload, degraded=False, source="model")
        reason = outcome.reason

    logger.warning("Model output unusable (%s), synthesizing default results", reason)
    try:
        return Reconciliation(
            synthesize_default(criteria, FallbackContext.full),
            degraded=True,
            source=FallbackContext.full.value,
        )
    except Exception:
        logger.exception("Default synthesis failed, using minimal result")
        return Reconciliation(
            synthesize_default(criteria, FallbackContext.minimal),
            degraded=True,
            source=FallbackContext.minimal.value,
        )
