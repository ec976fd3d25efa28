from __future__ import annotations

import pytest

from spot.personas.catalog import PERSONAS, validate_personas
from spot.personas.models import Persona, PersonaAssignment
from spot.personas.scoring import (
    SECONDARY_MIN_SCORE,
    assign_persona,
    format_persona_display,
    get_persona_by_id,
    persona_guidance,
    score_personas,
    select_personas,
)


def _persona(persona_id: str, tags: list[str]) -> Persona:
    return Persona(
        id=persona_id,
        name=persona_id.title(),
        emoji="⭐",
        description="",
        reveal_comment="",
        tags=tags,
    )


# ── Scoring ──────────────────────────────────────────────────────────────


class TestScorePersonas:
    def test_counts_shared_tags(self):
        scores = score_personas({"club", "dj", "dancing"})
        assert scores["nightlife_explorer"] == 3
        assert all(v == 0 for k, v in scores.items() if k != "nightlife_explorer")

    def test_shared_tag_counts_for_every_persona(self):
        scores = score_personas({"talks"})
        assert scores["culture_arts"] == 1
        assert scores["curious_learner"] == 1

    def test_every_persona_scored(self):
        assert set(score_personas(set())) == {p.id for p in PERSONAS}

    def test_adding_a_tag_never_lowers_a_score(self):
        base = {"museum", "park"}
        before = score_personas(base)
        after = score_personas(base | {"cozy"})
        for persona_id, score in before.items():
            assert after[persona_id] >= score


# ── Selection ────────────────────────────────────────────────────────────


class TestSelectPersonas:
    def test_nightlife_without_secondary(self):
        result = assign_persona({"club", "dj", "dancing"})
        assert result.primary.id == "nightlife_explorer"
        assert result.secondary is None

    def test_culture_with_curious_secondary(self):
        tags = {"museum", "cultural", "theatre", "talks"}
        scores = score_personas(tags)
        assert scores["culture_arts"] == 4
        assert scores["curious_learner"] == 3

        result = select_personas(scores)
        assert result.primary.id == "culture_arts"
        assert result.secondary.id == "curious_learner"

    def test_tie_goes_to_first_declared(self):
        # culture_arts is declared before curious_learner; both score 2
        result = assign_persona({"museum", "cultural"})
        assert result.primary.id == "culture_arts"
        assert result.secondary.id == "curious_learner"

    def test_tie_break_follows_catalog_order(self):
        a = _persona("a", ["x"])
        b = _persona("b", ["x"])
        assert select_personas({"a": 3, "b": 3}, [a, b]).primary.id == "a"
        assert select_personas({"a": 3, "b": 3}, [b, a]).primary.id == "b"

    def test_zero_scores_still_assign_primary(self):
        result = assign_persona(set())
        assert result.primary.id == PERSONAS[0].id
        assert result.secondary is None

    @pytest.mark.parametrize("runner_up", [0, 1])
    def test_no_secondary_below_threshold(self, runner_up):
        a = _persona("a", [])
        b = _persona("b", [])
        assert select_personas({"a": 5, "b": runner_up}, [a, b]).secondary is None

    @pytest.mark.parametrize("runner_up", [SECONDARY_MIN_SCORE, 4])
    def test_secondary_at_or_above_threshold(self, runner_up):
        a = _persona("a", [])
        b = _persona("b", [])
        assert select_personas({"a": 5, "b": runner_up}, [a, b]).secondary.id == "b"

    def test_deterministic(self):
        scores = score_personas({"park", "cafe", "museum", "cultural"})
        assert select_personas(scores) == select_personas(scores)

    def test_single_persona_catalog(self):
        only = _persona("only", ["x"])
        result = select_personas({"only": 0}, [only])
        assert result.primary.id == "only"
        assert result.secondary is None

    def test_empty_catalog_is_rejected(self):
        with pytest.raises(ValueError):
            select_personas({}, [])
        with pytest.raises(ValueError):
            validate_personas([])


# ── Lookup & display ─────────────────────────────────────────────────────


class TestPersonaHelpers:
    def test_get_persona_by_id(self):
        assert get_persona_by_id("hidden_gems").name == "Hidden Gems Hunter"
        assert get_persona_by_id("missing") is None

    def test_guidance(self):
        assert "museums" in persona_guidance("culture_arts")
        assert persona_guidance("missing") == "Use your best judgment based on their preferences"

    def test_display_with_and_without_secondary(self):
        primary = get_persona_by_id("nightlife_explorer")
        secondary = get_persona_by_id("culture_arts")
        assert format_persona_display(PersonaAssignment(primary=primary)) == "🌃 Nightlife Explorer"
        assert (
            format_persona_display(PersonaAssignment(primary=primary, secondary=secondary))
            == "🌃 Nightlife Explorer + 🎨 Culture & Arts Lover"
        )
