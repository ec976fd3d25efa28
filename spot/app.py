from __future__ import annotations

from fastapi import Depends, FastAPI, HTTPException, Request

from .llm.config import DEFAULT_LLM_CONFIG
from .llm.place_classifier import GroqPlaceClassifier, PlaceClassifier
from .onboarding.models import OnboardingQuestion, PersonaRequest
from .onboarding.questions import ONBOARDING_QUESTIONS
from .onboarding.tags import aggregate_tags, dietary_tags, over_limit_questions
from .personas.catalog import PERSONAS
from .personas.models import Persona, PersonaResponse
from .personas.scoring import (
    format_persona_display,
    get_persona_by_id,
    persona_guidance,
    score_personas,
    select_personas,
)
from .places.cache import get_cache_stats
from .places.categories import subtypes_for_category
from .places.enrichment import enrich_place, resolve_category
from .places.models import CategorizeResponse, GooglePlace, MainCategory, PlaceEnrichment

app = FastAPI(title="Spot Taste Engine API", version="1.0.0")

# Built once at startup and shared by every request.
app.state.place_classifier = GroqPlaceClassifier(DEFAULT_LLM_CONFIG)


def get_place_classifier(request: Request) -> PlaceClassifier | None:
    classifier = request.app.state.place_classifier
    # Classifiers that can be switched off report it through `available`.
    if not getattr(classifier, "available", True):
        return None
    return classifier


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


# ── Onboarding ───────────────────────────────────────────────────────────


@app.get("/onboarding/questions", response_model=list[OnboardingQuestion])
def onboarding_questions() -> list[OnboardingQuestion]:
    return ONBOARDING_QUESTIONS


@app.post("/onboarding/persona", response_model=PersonaResponse)
def onboarding_persona(body: PersonaRequest) -> PersonaResponse:
    over_limit = over_limit_questions(body.answers)
    if over_limit:
        raise HTTPException(
            status_code=422,
            detail=f"Too many picks for: {', '.join(over_limit)}",
        )

    tags = aggregate_tags(body.answers)
    scores = score_personas(tags)
    assignment = select_personas(scores)

    return PersonaResponse(
        tags=sorted(tags),
        dietary_tags=dietary_tags(tags),
        scores=scores,
        primary=assignment.primary,
        secondary=assignment.secondary,
        display=format_persona_display(assignment),
        guidance=persona_guidance(assignment.primary.id),
    )


# ── Personas ─────────────────────────────────────────────────────────────


@app.get("/personas", response_model=list[Persona])
def personas() -> list[Persona]:
    return PERSONAS


@app.get("/personas/{persona_id}", response_model=Persona)
def persona_detail(persona_id: str) -> Persona:
    persona = get_persona_by_id(persona_id)
    if persona is None:
        raise HTTPException(status_code=404, detail=f"Unknown persona: {persona_id}")
    return persona


# ── Places ───────────────────────────────────────────────────────────────


@app.post("/places/categorize", response_model=CategorizeResponse)
def categorize_place(
    body: GooglePlace,
    classifier: PlaceClassifier | None = Depends(get_place_classifier),
) -> CategorizeResponse:
    category, used_ai = resolve_category(body.to_place_input(), classifier)
    return CategorizeResponse(
        main_category=category.main_category,
        subtype=category.subtype,
        used_ai=used_ai,
    )


@app.post("/places/enrich", response_model=PlaceEnrichment)
def enrich(
    body: GooglePlace,
    classifier: PlaceClassifier | None = Depends(get_place_classifier),
) -> PlaceEnrichment:
    return enrich_place(body, classifier)


@app.get("/categories/{main_category}/subtypes")
def category_subtypes(main_category: MainCategory, is_event: bool = False) -> dict:
    return {
        "main_category": main_category.value,
        "is_event": is_event,
        "subtypes": list(subtypes_for_category(main_category, is_event)),
    }


@app.get("/cache/stats")
def cache_stats() -> dict:
    return get_cache_stats()
