from __future__ import annotations

import hashlib
import json
import threading
import time
from dataclasses import dataclass, field

from .config import DEFAULT_PLACES_CONFIG
from .models import PlaceCategory, PlaceInput


def _place_key(place: PlaceInput) -> str:
    # Type order from the provider is not meaningful.
    payload = {
        "name": place.name.strip().lower(),
        "description": place.description.strip().lower(),
        "provider_types": sorted(set(place.provider_types)),
    }
    normalized = json.dumps(payload, sort_keys=True)
    return hashlib.sha256(normalized.encode()).hexdigest()[:16]


@dataclass
class ClassificationCache:
    """
    In-memory TTL cache of LLM place classifications.

    Shared by request handlers running in FastAPI's thread pool, so every
    access to the entry map goes through one lock.
    """

    ttl_seconds: float = DEFAULT_PLACES_CONFIG.cache_ttl_seconds
    _entries: dict[str, tuple[PlaceCategory, float]] = field(default_factory=dict)
    hits: int = 0
    misses: int = 0
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def get(self, place: PlaceInput, ttl_seconds: float | None = None) -> PlaceCategory | None:
        ttl = self.ttl_seconds if ttl_seconds is None else ttl_seconds
        key = _place_key(place)
        with self._lock:
            entry = self._entries.get(key)
            if entry and time.time() - entry[1] < ttl:
                self.hits += 1
                return entry[0]
            if entry:
                self._entries.pop(key, None)
            self.misses += 1
            return None

    def set(self, place: PlaceInput, category: PlaceCategory) -> None:
        now = time.time()
        with self._lock:
            self._prune(now)
            self._entries[_place_key(place)] = (category, now)

    def _prune(self, now: float) -> None:
        stale = [key for key, (_, stored_at) in self._entries.items() if now - stored_at >= self.ttl_seconds]
        for key in stale:
            self._entries.pop(key, None)

    def stats(self) -> dict:
        with self._lock:
            total = self.hits + self.misses
            return {
                "size": len(self._entries),
                "hits": self.hits,
                "misses": self.misses,
                "hit_rate": round(self.hits / total * 100, 1) if total > 0 else 0.0,
            }

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self.hits = 0
            self.misses = 0


classification_cache = ClassificationCache()


def get_cache_stats() -> dict:
    return classification_cache.stats()


def clear_cache() -> None:
    classification_cache.clear()
