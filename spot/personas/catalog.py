from __future__ import annotations

from .models import Persona

PERSONAS: list[Persona] = [
    Persona(
        id="nightlife_explorer",
        name="Nightlife Explorer",
        emoji="🌃",
        description="You live for the night. Concerts, clubs, rooftop bars — that's your scene.",
        reveal_comment=(
            "Okay I see you — you're definitely a night owl. "
            "Concerts, clubs, late-night eats... I got you."
        ),
        tags=[
            "club", "dj", "dancing", "late_night", "after_hours", "high_energy", "party",
            "club_energy", "loud", "drinks_focused", "cocktails", "weekend_night",
            "prime_time", "nightlife", "live_music", "concerts", "music",
        ],
    ),
    Persona(
        id="culture_arts",
        name="Culture & Arts Lover",
        emoji="🎨",
        description="Museums, galleries, theatre — you're all about that cultural immersion.",
        reveal_comment=(
            "A cultured one! Museums, galleries, theatre... "
            "you appreciate the finer things. Love that for you."
        ),
        tags=[
            "museum", "cultural", "institution", "gallery", "indie_art", "theatre",
            "broadway", "performing_arts", "art", "talks", "intellectual", "learning",
            "historic", "landmark", "architecture",
        ],
    ),
    Persona(
        id="food_adventurer",
        name="Food-First Adventurer",
        emoji="🍣",
        description="You'll travel anywhere for good food. New spots, pop-ups, food markets — you're there.",
        reveal_comment=(
            "Food is your love language, clearly. New openings, hidden gems, "
            "street food... we're gonna get along great."
        ),
        tags=[
            "street_food", "cheap_eats", "adventurous", "trendy", "upscale", "variety_lover",
            "open_minded", "fine_dining", "premium", "special_occasion", "splurge",
        ],
    ),
    Persona(
        id="chill_local",
        name="Chill Local",
        emoji="☕",
        description="Cozy cafés, quiet parks, easy neighborhood walks — you keep it chill.",
        reveal_comment=(
            "You're giving low-key local vibes. Cozy cafés, chill walks, no rush. "
            "Honestly? Iconic energy."
        ),
        tags=[
            "cafe", "chill", "coffee", "casual", "comfort", "budget_friendly", "brunch",
            "weekend", "park", "garden", "nature", "outdoor", "quiet", "relaxed", "peaceful",
            "work_friendly", "wanderer", "spontaneous", "no_plan", "cafe_hopper",
            "people_watching",
        ],
    ),
    Persona(
        id="family_planner",
        name="Family Planner",
        emoji="👨‍👩‍👧‍👦",
        description="Planning for the crew? You need kid-friendly, daytime-friendly, everyone-friendly.",
        reveal_comment=(
            "Family mode activated! I'll keep things kid-friendly, daytime, "
            "and stress-free. You got this."
        ),
        tags=[
            "family_friendly", "kid_friendly", "daytime", "family", "kids", "all_ages",
            "weekend_day", "markets", "landmarks", "tourist", "iconic",
        ],
    ),
    Persona(
        id="hidden_gems",
        name="Hidden Gems Hunter",
        emoji="🕵️",
        description="You skip the tourist traps and find the spots only locals know about.",
        reveal_comment=(
            "Ooh you're one of those 'I don't go where tourists go' types. "
            "Say less — I know all the secret spots."
        ),
        tags=[
            "hidden_gems", "local", "off_beaten_path", "indie", "underground", "experimental",
            "quirky", "immersive", "interactive", "unique", "small_venue", "cozy", "intimate",
        ],
    ),
    Persona(
        id="curious_learner",
        name="Curious Mind",
        emoji="🧠",
        description="Talks, workshops, book events — you're always learning something new.",
        reveal_comment=(
            "Big brain energy! You like talks, workshops, book stuff... "
            "I respect it. Let's find you some cool events."
        ),
        tags=[
            "talks", "intellectual", "learning", "museum", "cultural", "historic",
            "landmark", "architecture",
        ],
    ),
]

PERSONA_GUIDANCE: dict[str, str] = {
    "nightlife_explorer": "Prioritize concerts, club nights, late-night food spots, rooftop bars, high-energy venues",
    "culture_arts": "Prioritize exhibitions, theatre, book events, galleries, cultural districts, museums",
    "food_adventurer": "Prioritize new openings, pop-ups, food markets, trendy restaurants, hidden gems",
    "chill_local": "Prioritize brunch spots, cozy cafés, calm museums, easy neighborhood walks, parks",
    "family_planner": "Prioritize family-friendly events, kid-friendly spots, parks, daytime activities, accessible venues",
    "hidden_gems": "Prioritize offbeat events, small venues, unusual places, local favorites, non-touristy spots",
    "curious_learner": "Prioritize lectures, workshops, historic tours, educational exhibits, book events",
}

DEFAULT_GUIDANCE = "Use your best judgment based on their preferences"


def validate_personas(personas: list[Persona]) -> None:
    """Raise ``ValueError`` if the catalog is empty or has duplicate ids."""
    if not personas:
        raise ValueError("Persona catalog must not be empty")
    ids = [p.id for p in personas]
    if len(ids) != len(set(ids)):
        raise ValueError("Persona ids must be unique")


validate_personas(PERSONAS)
