from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class QuestionCategory(str, Enum):
    food = "food"
    events = "events"
    places = "places"


class OnboardingOption(BaseModel):
    id: str = Field(..., min_length=1)
    label: str
    emoji: str
    tags: list[str] = Field(default_factory=list)


class OnboardingQuestion(BaseModel):
    id: str = Field(..., min_length=1)
    category: QuestionCategory
    question: str
    subtext: str | None = None
    max_picks: int = Field(..., ge=1)
    options: list[OnboardingOption]

    def find_option(self, option_id: str) -> OnboardingOption | None:
        for option in self.options:
            if option.id == option_id:
                return option
        return None


class PersonaRequest(BaseModel):
    answers: dict[str, list[str]] = Field(
        default_factory=dict,
        description="Question id -> selected option ids",
    )
