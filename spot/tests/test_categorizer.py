from __future__ import annotations

import pytest

from spot.places.categories import (
    DEFAULT_EAT_SUBTYPE,
    DEFAULT_SEE_SUBTYPE,
    EAT_SUBTYPES,
    EVENT_SUBTYPES,
    SEE_SUBTYPES,
    category_label,
    is_known_subtype,
    main_category_from_legacy_type,
    subtype_from_legacy_data,
    subtypes_for_category,
)
from spot.places.categorizer import (
    CUISINE_KEYWORDS,
    EAT_TYPES,
    SEE_SUBTYPE_RULES,
    SEE_TYPES,
    categorize,
    detect_cuisine,
    needs_ai_classification,
)
from spot.places.models import MainCategory


# ── Eat ──────────────────────────────────────────────────────────────────


class TestEatCategorization:
    def test_cuisine_from_description(self):
        result = categorize(["restaurant"], "Lucali", "best pizza in Brooklyn")
        assert result.main_category == MainCategory.eat
        assert result.subtype == "Pizza"

    def test_cuisine_from_name(self):
        result = categorize(["restaurant"], "Sushi Nakazawa", "omakase counter")
        assert result.subtype == "Sushi"

    def test_earlier_keyword_wins(self):
        result = categorize(["restaurant"], "Pizza & Sushi House", "")
        assert result.subtype == "Pizza"

    def test_provider_type_feeds_keywords(self):
        result = categorize(["cafe"], "Blue Bottle", "")
        assert result.subtype == "Coffee"

    def test_no_keyword_defaults_to_restaurant(self):
        result = categorize(["restaurant"], "Joe's", "")
        assert result.main_category == MainCategory.eat
        assert result.subtype == DEFAULT_EAT_SUBTYPE

    def test_case_insensitive_keywords(self):
        result = categorize(["restaurant"], "RAMEN LAB", "")
        assert result.subtype == "Ramen"

    def test_eat_beats_see(self):
        result = categorize(["museum", "restaurant"], "The Modern", "")
        assert result.main_category == MainCategory.eat


# ── See ──────────────────────────────────────────────────────────────────


class TestSeeCategorization:
    @pytest.mark.parametrize(
        "types, subtype",
        [
            (["museum"], "Museum"),
            (["art_gallery"], "Gallery"),
            (["park"], "Park"),
            (["night_club"], "Nightlife"),
            (["zoo"], DEFAULT_SEE_SUBTYPE),
            (["tourist_attraction", "point_of_interest"], DEFAULT_SEE_SUBTYPE),
        ],
    )
    def test_see_subtypes(self, types, subtype):
        result = categorize(types, "", "")
        assert result.main_category == MainCategory.see
        assert result.subtype == subtype

    def test_priority_order(self):
        assert categorize(["park", "art_gallery"]).subtype == "Gallery"
        assert categorize(["night_club", "park"]).subtype == "Park"
        assert categorize(["night_club", "art_gallery", "museum"]).subtype == "Museum"

    def test_see_ignores_cuisine_keywords(self):
        result = categorize(["museum"], "Museum of Pizza", "")
        assert result.subtype == "Museum"


# ── Fallback & coverage ──────────────────────────────────────────────────


class TestFallback:
    @pytest.mark.parametrize(
        "types",
        [[], ["point_of_interest"], ["establishment", "store"], ["florist"]],
    )
    def test_unknown_types_default_to_restaurant(self, types):
        result = categorize(types, "Somewhere", "something")
        assert result.main_category == MainCategory.eat
        assert result.subtype == DEFAULT_EAT_SUBTYPE

    def test_every_emitted_subtype_is_enumerated(self):
        emitted = {cuisine for _, cuisine in CUISINE_KEYWORDS}
        assert emitted <= set(EAT_SUBTYPES)
        assert {subtype for _, subtype in SEE_SUBTYPE_RULES} <= set(SEE_SUBTYPES)

    def test_rule_types_are_known(self):
        assert {t for t, _ in SEE_SUBTYPE_RULES} <= SEE_TYPES
        assert not EAT_TYPES & SEE_TYPES

    def test_detect_cuisine(self):
        assert detect_cuisine("late night TACO truck") == "Mexican"
        assert detect_cuisine("nothing here") is None


# ── Ambiguity gate ───────────────────────────────────────────────────────


class TestAmbiguityGate:
    def test_only_ambiguous_types(self):
        assert needs_ai_classification(["point_of_interest"])
        assert needs_ai_classification(["establishment", "store", "local_business"])

    def test_empty_list_is_ambiguous(self):
        assert needs_ai_classification([])

    def test_unrecognised_types_are_ambiguous(self):
        assert needs_ai_classification(["florist", "point_of_interest"])

    def test_any_eat_or_see_type_settles_it(self):
        assert not needs_ai_classification(["establishment", "restaurant"])
        assert not needs_ai_classification(["point_of_interest", "museum"])


# ── Subtype taxonomy ─────────────────────────────────────────────────────


class TestSubtypeTaxonomy:
    def test_subtypes_for_category(self):
        assert subtypes_for_category(MainCategory.eat) == EAT_SUBTYPES
        assert subtypes_for_category(MainCategory.see) == SEE_SUBTYPES
        assert subtypes_for_category(MainCategory.see, is_event=True) == EVENT_SUBTYPES

    def test_is_known_subtype(self):
        assert is_known_subtype(MainCategory.eat, "Sushi")
        assert not is_known_subtype(MainCategory.eat, "Museum")
        assert is_known_subtype(MainCategory.see, "Concert", is_event=True)
        assert not is_known_subtype(MainCategory.see, "My favourite bench")

    def test_legacy_main_category(self):
        assert main_category_from_legacy_type("Restaurant") == MainCategory.eat
        assert main_category_from_legacy_type("bar") == MainCategory.eat
        assert main_category_from_legacy_type("museum") == MainCategory.see

    def test_legacy_subtype(self):
        assert subtype_from_legacy_data("restaurant", " Thai ") == "Thai"
        assert subtype_from_legacy_data("cafe") == "Coffee"
        assert subtype_from_legacy_data("attraction", "") == "Landmark"
        assert subtype_from_legacy_data("spaceship") == "Other"

    def test_category_label(self):
        assert category_label(MainCategory.eat) == "Eat"
        assert category_label(MainCategory.see) == "See"
