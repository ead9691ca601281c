from __future__ import annotations

import pytest
from pydantic import ValidationError

from foodfinder.search.errors import InvalidRequest, SchemaViolation
from foodfinder.search.models import (
    FoodOption,
    FoodSearchRequest,
    SearchCriteria,
    SearchResult,
)
from foodfinder.search.validation import validate_request, validate_result


def _option(**overrides):
    option = {
        "name": "Taco Stand",
        "cuisine": "Mexican",
        "priceRange": "budget",
        "description": "Street tacos",
        "address": "1 Congress Ave, Austin, TX",
        "rating": 4.0,
        "dietaryOptions": ["vegetarian"],
    }
    option.update(overrides)
    return option


def _result(*options):
    return {"location": "Austin, TX", "searchResults": list(options), "searchSummary": "ok"}


# ── Request Validator ────────────────────────────────────────────────────


class TestValidateRequest:
    def test_location_only(self):
        criteria = validate_request({"location": "Austin, TX"})
        assert criteria == SearchCriteria(location="Austin, TX")
        assert criteria.cuisine is None
        assert criteria.price_range is None
        assert criteria.dietary_restrictions is None

    def test_all_fields(self):
        criteria = validate_request({
            "location": "Portland",
            "cuisine": "Thai",
            "priceRange": "upscale",
            "dietaryRestrictions": "gluten-free",
        })
        assert criteria.cuisine == "Thai"
        assert criteria.price_range == "upscale"
        assert criteria.dietary_restrictions == "gluten-free"

    def test_accepts_request_model(self):
        body = FoodSearchRequest.model_validate({"location": "Austin, TX", "priceRange": "moderate"})
        assert validate_request(body).price_range == "moderate"

    @pytest.mark.parametrize("location", [None, "", "   "])
    def test_missing_location_rejected(self, location):
        with pytest.raises(InvalidRequest):
            validate_request({"location": location})

    def test_absent_location_rejected(self):
        with pytest.raises(InvalidRequest, match="location"):
            validate_request({"cuisine": "Thai"})

    @pytest.mark.parametrize("price", ["cheap", "Budget", "MODERATE", "", "upscale "])
    def test_price_outside_enumeration_rejected(self, price):
        with pytest.raises(InvalidRequest, match="priceRange"):
            validate_request({"location": "Austin, TX", "priceRange": price})

    def test_blank_optional_text_becomes_absent(self):
        criteria = validate_request({
            "location": "Austin, TX",
            "cuisine": "  ",
            "dietaryRestrictions": "",
        })
        assert criteria.cuisine is None
        assert criteria.dietary_restrictions is None

    def test_optional_text_kept_verbatim(self):
        criteria = validate_request({"location": "Austin, TX", "cuisine": " Tex-Mex "})
        assert criteria.cuisine == " Tex-Mex "

    def test_non_text_field_rejected(self):
        with pytest.raises(InvalidRequest):
            validate_request({"location": "Austin, TX", "cuisine": 42})

    def test_attribute_style_keys_accepted(self):
        criteria = validate_request({
            "location": "Austin, TX",
            "price_range": "budget",
            "dietary_restrictions": "kosher",
        })
        assert criteria.price_range == "budget"
        assert criteria.dietary_restrictions == "kosher"

    def test_attribute_style_price_still_checked(self):
        with pytest.raises(InvalidRequest, match="priceRange"):
            validate_request({"location": "Austin, TX", "price_range": "cheap"})

    def test_criteria_are_immutable(self):
        criteria = validate_request({"location": "Austin, TX"})
        with pytest.raises(ValidationError):
            criteria.location = "Dallas"


# ── Result Validator ─────────────────────────────────────────────────────


class TestValidateResult:
    def test_empty_results_valid(self):
        result = validate_result(_result())
        assert result.search_results == []

    @pytest.mark.parametrize("rating", [1, 5, 1.0, 5.0, 3.7])
    def test_rating_in_bounds(self, rating):
        result = validate_result(_result(_option(rating=rating)))
        assert result.search_results[0].rating == rating

    @pytest.mark.parametrize("rating", [0.99, 5.01, 0, 9, 12])
    def test_rating_out_of_bounds(self, rating):
        with pytest.raises(SchemaViolation, match="rating"):
            validate_result(_result(_option(rating=rating)))

    @pytest.mark.parametrize("rating", ["4.5", "5", True])
    def test_rating_not_coerced(self, rating):
        with pytest.raises(SchemaViolation, match="rating"):
            validate_result(_result(_option(rating=rating)))

    def test_text_fields_not_coerced(self):
        with pytest.raises(SchemaViolation, match="name"):
            validate_result(_result(_option(name=123)))

    def test_rating_and_dietary_options_optional(self):
        option = _option()
        del option["rating"]
        del option["dietaryOptions"]
        result = validate_result(_result(option))
        assert result.search_results[0].rating is None
        assert result.search_results[0].dietary_options is None

    def test_price_range_not_coerced(self):
        with pytest.raises(SchemaViolation):
            validate_result(_result(_option(priceRange="Moderate")))

    def test_missing_required_field(self):
        option = _option()
        del option["address"]
        with pytest.raises(SchemaViolation, match="address"):
            validate_result(_result(option))

    def test_each_entry_checked(self):
        with pytest.raises(SchemaViolation):
            validate_result(_result(_option(), _option(rating=6)))

    def test_model_instance_revalidated(self):
        result = SearchResult.model_construct(
            location="Austin, TX",
            search_results=[
                FoodOption.model_construct(
                    name="Taco Stand",
                    cuisine="Mexican",
                    price_range="budget",
                    description="Street tacos",
                    address="1 Congress Ave, Austin, TX",
                    rating=9.0,
                    dietary_options=None,
                )
            ],
            search_summary="ok",
        )
        with pytest.raises(SchemaViolation):
            validate_result(result)
