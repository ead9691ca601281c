from __future__ import annotations


class FoodSearchError(Exception):
    """Base class for failures surfaced to the caller as ``{"error": ...}``."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidRequest(FoodSearchError):
    """Search criteria are missing or malformed. Never retried."""

    status_code = 400


class AIServiceError(FoodSearchError):
    """The inference call itself failed (network, timeout, 5xx). Retryable."""

    status_code = 503


class SchemaViolation(FoodSearchError):
    """The reconciled result still breaks the output schema.

    Fallback synthesis always produces a valid result, so seeing this means
    the model's parsed output carried out-of-range values or the synthesis
    itself has a bug.
    """

    status_code = 500
