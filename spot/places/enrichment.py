from __future__ import annotations

import logging

from ..llm.place_classifier import PlaceClassifier
from .cache import classification_cache
from .categorizer import categorize, default_category, needs_ai_classification
from .config import DEFAULT_PLACES_CONFIG, PlacesConfig
from .models import (
    Coordinates,
    GooglePlace,
    MainCategory,
    PlaceCategory,
    PlaceEnrichment,
    PlaceInput,
)

logger = logging.getLogger(__name__)


def resolve_category(
    place: PlaceInput,
    classifier: PlaceClassifier | None = None,
    config: PlacesConfig = DEFAULT_PLACES_CONFIG,
) -> tuple[PlaceCategory, bool]:
    """
    Categorize a place, deferring to ``classifier`` for ambiguous types.

    Returns the category and whether the classifier produced it. Any
    classifier failure yields eat / Restaurant; errors never propagate.
    """
    if not needs_ai_classification(place.provider_types):
        return categorize(place.provider_types, place.name, place.description), False

    if classifier is None:
        return default_category(), False

    cached = classification_cache.get(place, ttl_seconds=config.cache_ttl_seconds)
    if cached is not None:
        return cached, True

    try:
        category = classifier.classify(place)
    except Exception:
        logger.warning(
            "AI classification failed for %r, using default category",
            place.name,
            exc_info=True,
        )
        return default_category(), False

    classification_cache.set(place, category)
    return category, True


def build_enrichment(
    google_place: GooglePlace,
    category: PlaceCategory,
    config: PlacesConfig = DEFAULT_PLACES_CONFIG,
) -> PlaceEnrichment:
    image_url = None
    if google_place.photos:
        image_url = config.photo_url(google_place.photos[0].name)

    coordinates = None
    if google_place.location:
        coordinates = Coordinates(
            lat=google_place.location.latitude,
            lng=google_place.location.longitude,
        )

    return PlaceEnrichment(
        name=google_place.name or None,
        address=google_place.formatted_address,
        description=google_place.description or None,
        image_url=image_url,
        source_url=google_place.website_uri,
        rating=google_place.rating,
        coordinates=coordinates,
        main_category=category.main_category,
        subtype=category.subtype,
        type="restaurant" if category.main_category == MainCategory.eat else "activity",
        needs_enhancement=False,
    )


def enrich_place(
    google_place: GooglePlace,
    classifier: PlaceClassifier | None = None,
    config: PlacesConfig = DEFAULT_PLACES_CONFIG,
) -> PlaceEnrichment:
    category, _ = resolve_category(google_place.to_place_input(), classifier, config)
    return build_enrichment(google_place, category, config)
