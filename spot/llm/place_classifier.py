from __future__ import annotations

import json
import logging
import re
from typing import Protocol

from groq import Groq

from ..places.categories import DEFAULT_EAT_SUBTYPE
from ..places.models import MainCategory, PlaceCategory, PlaceInput
from .config import DEFAULT_LLM_CONFIG, LLMConfig

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You categorize places in New York City for a discovery app.\n\n"
    "Return ONLY valid JSON in this exact format:\n"
    '{"mainCategory": "eat" or "see", "subtype": "<specific type>"}\n'
    '- "eat" for restaurants, cafes, bars, food places\n'
    '- "see" for attractions, activities, events, entertainment\n'
    '- subtype should be specific like "Pizza", "Sushi", "Museum", "Park", etc.'
)

_FENCE_RE = re.compile(r"```(?:json)?", re.IGNORECASE)
_OBJECT_RE = re.compile(r"\{[\s\S]*\}")


class ClassificationError(Exception):
    """Raised when a classifier cannot produce a category."""


class PlaceClassifier(Protocol):
    def classify(self, place: PlaceInput) -> PlaceCategory: ...


def _build_user_message(place: PlaceInput) -> str:
    return (
        "Categorize this place:\n"
        f'Name: "{place.name}"\n'
        f'Description: "{place.description}"\n'
        f"Google Types: {', '.join(place.provider_types)}"
    )


def parse_classification(text: str) -> PlaceCategory:
    """
    Turn raw model text into a category.

    Anything other than a literal ``"see"`` becomes ``eat``, and a missing
    subtype becomes ``Restaurant``.
    """
    cleaned = _FENCE_RE.sub("", text or "").strip()
    match = _OBJECT_RE.search(cleaned)
    if not match:
        raise ClassificationError(f"No JSON object in classifier output: {text!r}")

    try:
        parsed = json.loads(match.group(0))
    except json.JSONDecodeError as exc:
        raise ClassificationError("Classifier returned invalid JSON") from exc
    if not isinstance(parsed, dict):
        raise ClassificationError("Classifier JSON is not an object")

    main = MainCategory.see if parsed.get("mainCategory") == "see" else MainCategory.eat
    subtype = parsed.get("subtype")
    if not isinstance(subtype, str) or not subtype.strip():
        subtype = DEFAULT_EAT_SUBTYPE
    return PlaceCategory(main_category=main, subtype=subtype.strip())


class GroqPlaceClassifier:
    """Place classifier backed by a Groq chat model."""

    def __init__(self, config: LLMConfig = DEFAULT_LLM_CONFIG) -> None:
        self.config = config
        self._client = None
        if config.enabled and config.api_key:
            self._client = Groq(api_key=config.api_key, timeout=config.timeout)

    @property
    def available(self) -> bool:
        return self._client is not None

    def classify(self, place: PlaceInput) -> PlaceCategory:
        if self._client is None:
            raise ClassificationError("Groq classifier is disabled or has no API key")

        response = self._client.chat.completions.create(
            model=self.config.model,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": _build_user_message(place)},
            ],
            max_tokens=self.config.max_tokens,
            temperature=self.config.temperature,
            response_format={"type": "json_object"},
        )
        content = response.choices[0].message.content or ""
        return parse_classification(content)
