from __future__ import annotations

from .models import MainCategory

# Generic subtypes emitted when nothing more specific is known.
DEFAULT_EAT_SUBTYPE = "Restaurant"
DEFAULT_SEE_SUBTYPE = "Activity"

EAT_SUBTYPES: tuple[str, ...] = (
    "Pizza",
    "Indian",
    "Chinese",
    "Italian",
    "American",
    "Japanese",
    "Mexican",
    "Thai",
    "Korean",
    "Vietnamese",
    "Mediterranean",
    "Middle Eastern",
    "French",
    "Greek",
    "Spanish",
    "Seafood",
    "Steakhouse",
    "BBQ",
    "Burgers",
    "Sushi",
    "Ramen",
    "Dessert",
    "Coffee",
    "Bakery",
    "Bar",
    "Cocktails",
    "Wine Bar",
    "Brunch",
    "Deli",
    "Fast Casual",
    "Fine Dining",
    "Food Truck",
    "Vegetarian",
    "Vegan",
    "Other",
)

SEE_SUBTYPES: tuple[str, ...] = (
    "Museum",
    "Park",
    "Historic Site",
    "Theater",
    "Gallery",
    "Landmark",
    "Shopping",
    "Entertainment",
    "Nightlife",
    "Rooftop",
    "Beach",
    "Garden",
    "Zoo",
    "Aquarium",
    "Observation Deck",
    "Walking Tour",
    "Neighborhood",
    "Market",
    "Library",
    "Other",
)

# Time-limited activities shown under "see" when the place is an event.
EVENT_SUBTYPES: tuple[str, ...] = (
    "Concert",
    "Festival",
    "Pop-up",
    "Show",
    "Market",
    "Exhibition",
    "Comedy",
    "Sports",
    "Workshop",
    "Theater",
    "Dance",
    "Film",
    "Talk",
    "Party",
    "Other",
)

_LEGACY_EAT_TYPES = frozenset({"restaurant", "cafe", "bar"})

_LEGACY_SUBTYPES: dict[str, str] = {
    "restaurant": DEFAULT_EAT_SUBTYPE,
    "cafe": "Coffee",
    "bar": "Bar",
    "attraction": "Landmark",
    "activity": DEFAULT_SEE_SUBTYPE,
    "museum": "Museum",
    "park": "Park",
    "theater": "Theater",
    "shopping": "Shopping",
}


def subtypes_for_category(main_category: MainCategory, is_event: bool = False) -> tuple[str, ...]:
    if main_category == MainCategory.eat:
        return EAT_SUBTYPES
    if is_event:
        return EVENT_SUBTYPES
    return SEE_SUBTYPES


def is_known_subtype(main_category: MainCategory, subtype: str, is_event: bool = False) -> bool:
    """
    Report whether ``subtype`` is one of the enumerated values.

    Editors may still save free-text subtypes; this only answers
    membership and never rejects anything.
    """
    return subtype in subtypes_for_category(main_category, is_event)


def main_category_from_legacy_type(legacy_type: str) -> MainCategory:
    if legacy_type.lower() in _LEGACY_EAT_TYPES:
        return MainCategory.eat
    return MainCategory.see


def subtype_from_legacy_data(legacy_type: str, cuisine: str | None = None) -> str:
    if cuisine and cuisine.strip():
        return cuisine.strip()
    return _LEGACY_SUBTYPES.get(legacy_type.lower(), "Other")


def category_label(main_category: MainCategory) -> str:
    return "Eat" if main_category == MainCategory.eat else "See"
