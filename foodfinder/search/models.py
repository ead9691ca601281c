from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

PriceRange = Literal["budget", "moderate", "upscale"]

PRICE_RANGES: tuple[str, ...] = ("budget", "moderate", "upscale")


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FoodSearchRequest(_CamelModel):
    """Raw request body. Semantic checks happen in ``validate_request``."""

    location: str | None = Field(
        default=None, description="The area or location to search for food options"
    )
    cuisine: str | None = Field(default=None, description="Preferred cuisine type (optional)")
    price_range: str | None = Field(
        default=None, description="Price range preference: budget, moderate or upscale"
    )
    dietary_restrictions: str | None = Field(
        default=None, description="Dietary restrictions or preferences"
    )


class SearchCriteria(_CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    location: str = Field(..., min_length=1)
    cuisine: str | None = None
    price_range: PriceRange | None = None
    dietary_restrictions: str | None = None


class FoodOption(_CamelModel):
    name: str
    cuisine: str
    price_range: PriceRange
    description: str
    address: str
    rating: float | None = Field(default=None, ge=1.0, le=5.0)
    dietary_options: list[str] | None = None


class SearchResult(_CamelModel):
    location: str
    search_results: list[FoodOption]
    search_summary: str


class FoodSearchResponse(BaseModel):
    success: bool = True
    result: SearchResult
    degraded: bool = False


class ErrorResponse(BaseModel):
    error: str
