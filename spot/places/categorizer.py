from __future__ import annotations

from collections.abc import Sequence

from .categories import DEFAULT_EAT_SUBTYPE, DEFAULT_SEE_SUBTYPE
from .models import MainCategory, PlaceCategory

EAT_TYPES = frozenset({
    "restaurant",
    "cafe",
    "bar",
    "bakery",
    "meal_delivery",
    "meal_takeaway",
    "food",
})

SEE_TYPES = frozenset({
    "museum",
    "art_gallery",
    "tourist_attraction",
    "park",
    "amusement_park",
    "aquarium",
    "zoo",
    "stadium",
    "movie_theater",
    "night_club",
})

# Provider types that say nothing about what a place actually is.
AMBIGUOUS_TYPES = frozenset({
    "establishment",
    "point_of_interest",
    "store",
    "local_business",
})

# ---------------------------------------------------------------------------
# Ordered rules: the first match wins.
# ---------------------------------------------------------------------------

CUISINE_KEYWORDS: tuple[tuple[str, str], ...] = (
    ("pizza", "Pizza"),
    ("italian", "Italian"),
    ("pasta", "Italian"),
    ("sushi", "Sushi"),
    ("japanese", "Japanese"),
    ("ramen", "Ramen"),
    ("chinese", "Chinese"),
    ("dim_sum", "Chinese"),
    ("dumpling", "Chinese"),
    ("mexican", "Mexican"),
    ("taco", "Mexican"),
    ("burrito", "Mexican"),
    ("indian", "Indian"),
    ("curry", "Indian"),
    ("thai", "Thai"),
    ("korean", "Korean"),
    ("vietnamese", "Vietnamese"),
    ("pho", "Vietnamese"),
    ("french", "French"),
    ("mediterranean", "Mediterranean"),
    ("greek", "Greek"),
    ("american", "American"),
    ("burger", "American"),
    ("bbq", "BBQ"),
    ("cafe", "Coffee"),
    ("coffee", "Coffee"),
    ("bakery", "Bakery"),
    ("bar", "Bar"),
    ("cocktail", "Cocktails"),
    ("wine", "Wine Bar"),
    ("seafood", "Seafood"),
    ("steakhouse", "Steakhouse"),
    ("deli", "Deli"),
    ("sandwich", "Deli"),
    ("dessert", "Dessert"),
    ("ice_cream", "Dessert"),
    ("brunch", "Brunch"),
    ("breakfast", "Brunch"),
)

SEE_SUBTYPE_RULES: tuple[tuple[str, str], ...] = (
    ("museum", "Museum"),
    ("art_gallery", "Gallery"),
    ("park", "Park"),
    ("night_club", "Nightlife"),
)


def _haystack(provider_types: Sequence[str], name: str, description: str) -> str:
    return f"{' '.join(provider_types)} {name} {description}".lower()


def detect_cuisine(text: str) -> str | None:
    """Return the cuisine of the first keyword found in ``text``, if any."""
    lowered = text.lower()
    for keyword, cuisine in CUISINE_KEYWORDS:
        if keyword in lowered:
            return cuisine
    return None


def categorize(
    provider_types: Sequence[str],
    name: str = "",
    description: str = "",
) -> PlaceCategory:
    """
    Classify a place from its provider types, name and description.

    Eat types are checked before see types, so a place tagged both
    ``restaurant`` and ``museum`` is an eat place. With no recognised
    type at all the place defaults to eat / Restaurant.
    """
    types = list(provider_types or [])

    if any(t in EAT_TYPES for t in types):
        cuisine = detect_cuisine(_haystack(types, name or "", description or ""))
        return PlaceCategory(
            main_category=MainCategory.eat,
            subtype=cuisine or DEFAULT_EAT_SUBTYPE,
        )

    if any(t in SEE_TYPES for t in types):
        for provider_type, subtype in SEE_SUBTYPE_RULES:
            if provider_type in types:
                return PlaceCategory(main_category=MainCategory.see, subtype=subtype)
        return PlaceCategory(main_category=MainCategory.see, subtype=DEFAULT_SEE_SUBTYPE)

    return default_category()


def default_category() -> PlaceCategory:
    return PlaceCategory(main_category=MainCategory.eat, subtype=DEFAULT_EAT_SUBTYPE)


def needs_ai_classification(provider_types: Sequence[str]) -> bool:
    """True when no provider type carries an eat or see signal."""
    return all(
        t in AMBIGUOUS_TYPES or (t not in EAT_TYPES and t not in SEE_TYPES)
        for t in provider_types or []
    )
