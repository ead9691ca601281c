from __future__ import annotations

import logging
import os

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, RedirectResponse

from .llm.config import DEFAULT_LLM_CONFIG
from .llm.groq_client import GroqTextGenerator, TextGenerator
from .logging_config import setup_logging
from .search.errors import FoodSearchError
from .search.models import ErrorResponse, FoodSearchRequest, FoodSearchResponse
from .search.service import search_food

setup_logging(os.environ.get("LOG_LEVEL", "INFO"))
logger = logging.getLogger(__name__)

app = FastAPI(title="Food Search API", version="1.0.0")


def get_text_generator() -> TextGenerator:
    return GroqTextGenerator(DEFAULT_LLM_CONFIG)


# ── Error handlers ───────────────────────────────────────────────────────


@app.exception_handler(FoodSearchError)
def food_search_error_handler(request: Request, exc: FoodSearchError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": "Invalid request format"})


@app.exception_handler(Exception)
def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Food search error", exc_info=exc)
    return JSONResponse(
        status_code=500,
        content={"error": "Failed to search for food options. Please try again."},
    )


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.post(
    "/api/food/search",
    response_model=FoodSearchResponse,
    response_model_exclude_none=True,
    tags=["Food"],
    summary="Search for food options in a specific area",
    responses={
        400: {"model": ErrorResponse, "description": "Invalid request"},
        500: {"model": ErrorResponse, "description": "Result failed schema validation"},
        503: {"model": ErrorResponse, "description": "AI service unavailable"},
    },
)
def food_search(
    body: FoodSearchRequest,
    generator: TextGenerator = Depends(get_text_generator),
) -> FoodSearchResponse:
    return search_food(body, generator)


@app.get("/", include_in_schema=False)
def root():
    return RedirectResponse(url="/docs")
