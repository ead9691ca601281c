from __future__ import annotations

from .models import PRICE_RANGES, SearchCriteria

MIN_RESULTS = 5
MAX_RESULTS = 8

_PROMPT_TEMPLATE = """\
You are a helpful food recommendation assistant. Based on the user's request, \
provide realistic food options in the specified area.

User Request:
- Location: {location}
- Cuisine: {cuisine}
- Price Range: {price_range}
- Dietary Restrictions: {dietary_restrictions}

Please provide {min_results}-{max_results} realistic food options that would be \
available in this area. For each option, include:
1. Restaurant/food establishment name
2. Cuisine type
3. Price range ({price_tiers})
4. Brief description of what they offer
5. A realistic address in the area
6. A rating between 1-5 stars
7. Relevant dietary options if applicable

Make the recommendations realistic and diverse. Consider local specialties, \
popular chains, and unique local establishments that might exist in such an area.

Format your response as a JSON object with:
- location: the search location
- searchResults: array of food options
- searchSummary: a brief summary of the recommendations

Each food option should have: name, cuisine, priceRange, description, address, \
rating, dietaryOptions (array of strings)"""


def build_prompt(criteria: SearchCriteria) -> str:
    """Render criteria into the model prompt. Absent fields read "Any"/"None"."""
    return _PROMPT_TEMPLATE.format(
        location=criteria.location,
        cuisine=criteria.cuisine or "Any",
        price_range=criteria.price_range or "Any",
        dietary_restrictions=criteria.dietary_restrictions or "None",
        min_results=MIN_RESULTS,
        max_results=MAX_RESULTS,
        price_tiers="/".join(PRICE_RANGES),
    )
