from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class MainCategory(str, Enum):
    eat = "eat"
    see = "see"


class PlaceInput(BaseModel):
    name: str = ""
    description: str = ""
    provider_types: list[str] = Field(default_factory=list)


class PlaceCategory(BaseModel):
    main_category: MainCategory
    subtype: str


# ── Google Places (v1) payload ───────────────────────────────────────────


class LocalizedText(BaseModel):
    text: str = ""


class PlacePhoto(BaseModel):
    name: str


class LatLng(BaseModel):
    latitude: float
    longitude: float


class GooglePlace(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str | None = None
    display_name: LocalizedText | None = Field(default=None, alias="displayName")
    formatted_address: str | None = Field(default=None, alias="formattedAddress")
    rating: float | None = None
    website_uri: str | None = Field(default=None, alias="websiteUri")
    types: list[str] = Field(default_factory=list)
    photos: list[PlacePhoto] = Field(default_factory=list)
    editorial_summary: LocalizedText | None = Field(default=None, alias="editorialSummary")
    location: LatLng | None = None

    @property
    def name(self) -> str:
        return self.display_name.text if self.display_name else ""

    @property
    def description(self) -> str:
        return self.editorial_summary.text if self.editorial_summary else ""

    def to_place_input(self) -> PlaceInput:
        return PlaceInput(
            name=self.name,
            description=self.description,
            provider_types=list(self.types),
        )


# ── Enrichment output ────────────────────────────────────────────────────


class Coordinates(BaseModel):
    lat: float
    lng: float


class PlaceEnrichment(BaseModel):
    name: str | None = None
    address: str | None = None
    description: str | None = None
    image_url: str | None = None
    source_url: str | None = None
    rating: float | None = None
    coordinates: Coordinates | None = None
    main_category: MainCategory
    subtype: str
    type: str = Field(..., description='Legacy place type: "restaurant" or "activity"')
    needs_enhancement: bool = False


class CategorizeResponse(BaseModel):
    main_category: MainCategory
    subtype: str
    used_ai: bool
