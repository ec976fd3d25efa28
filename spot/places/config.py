from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


@dataclass(frozen=True)
class PlacesConfig:
    """
    Settings for building enrichment records from Google Places data.
    """

    api_key: str = os.getenv("GOOGLE_PLACES_API_KEY", "")
    media_base_url: str = "https://places.googleapis.com/v1"
    photo_max_width_px: int = 800
    cache_ttl_seconds: int = 3600

    def photo_url(self, photo_name: str) -> str:
        return (
            f"{self.media_base_url}/{photo_name}/media"
            f"?maxWidthPx={self.photo_max_width_px}&key={self.api_key}"
        )


DEFAULT_PLACES_CONFIG = PlacesConfig()
