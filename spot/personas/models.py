from __future__ import annotations

from pydantic import BaseModel, Field


class Persona(BaseModel):
    id: str = Field(..., min_length=1)
    name: str
    emoji: str
    description: str
    reveal_comment: str = Field(..., description="What Spot says when revealing this persona")
    tags: list[str]


class PersonaAssignment(BaseModel):
    primary: Persona
    secondary: Persona | None = None


class PersonaResponse(BaseModel):
    tags: list[str]
    dietary_tags: list[str]
    scores: dict[str, int]
    primary: Persona
    secondary: Persona | None = None
    display: str
    guidance: str
