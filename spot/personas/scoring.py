from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence

from .catalog import DEFAULT_GUIDANCE, PERSONA_GUIDANCE, PERSONAS
from .models import Persona, PersonaAssignment

# A single incidental overlap is not enough to earn a secondary persona.
SECONDARY_MIN_SCORE = 2


def score_personas(
    tags: Iterable[str],
    catalog: Sequence[Persona] = PERSONAS,
) -> dict[str, int]:
    """Count, per persona id, how many of ``tags`` the persona shares."""
    user_tags = set(tags)
    return {persona.id: len(user_tags & set(persona.tags)) for persona in catalog}


def select_personas(
    scores: Mapping[str, int],
    catalog: Sequence[Persona] = PERSONAS,
) -> PersonaAssignment:
    """
    Rank the catalog by score and pick primary / secondary personas.

    Ties keep catalog order, so the first-declared persona wins. The
    primary is always set, even when every score is zero.
    """
    if not catalog:
        raise ValueError("Persona catalog must not be empty")

    # sorted() is stable with reverse=True
    ranked = sorted(catalog, key=lambda p: scores.get(p.id, 0), reverse=True)

    primary = ranked[0]
    secondary = None
    if len(ranked) > 1 and scores.get(ranked[1].id, 0) >= SECONDARY_MIN_SCORE:
        secondary = ranked[1]
    return PersonaAssignment(primary=primary, secondary=secondary)


def assign_persona(
    tags: Iterable[str],
    catalog: Sequence[Persona] = PERSONAS,
) -> PersonaAssignment:
    return select_personas(score_personas(tags, catalog), catalog)


def get_persona_by_id(persona_id: str, catalog: Sequence[Persona] = PERSONAS) -> Persona | None:
    for persona in catalog:
        if persona.id == persona_id:
            return persona
    return None


def persona_guidance(persona_id: str) -> str:
    return PERSONA_GUIDANCE.get(persona_id, DEFAULT_GUIDANCE)


def format_persona_display(assignment: PersonaAssignment) -> str:
    primary = assignment.primary
    label = f"{primary.emoji} {primary.name}"
    if assignment.secondary:
        label += f" + {assignment.secondary.emoji} {assignment.secondary.name}"
    return label
