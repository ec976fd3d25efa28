from __future__ import annotations

from .models import OnboardingOption, OnboardingQuestion, QuestionCategory


def _opt(option_id: str, emoji: str, label: str, tags: list[str]) -> OnboardingOption:
    return OnboardingOption(id=option_id, emoji=emoji, label=label, tags=tags)


# ---------------------------------------------------------------------------
# Food
# ---------------------------------------------------------------------------

_FOOD_QUESTIONS = [
    OnboardingQuestion(
        id="food_outing_type",
        category=QuestionCategory.food,
        question="When you're going out for food, what's the vibe?",
        subtext="Pick up to 3 that feel like you",
        max_picks=3,
        options=[
            _opt("brunch_spots", "🥞", "Cozy brunch spots", ["brunch", "weekend", "casual"]),
            _opt("cafes", "☕", "Cute cafés to sit & hang", ["cafe", "chill", "coffee"]),
            _opt("comfort_food", "🍕", "Casual comfort food (pizza, burgers, wings)", ["casual", "comfort", "budget_friendly"]),
            _opt("trendy", "🍣", "Trendy spots (sushi bars, small plates)", ["trendy", "upscale", "date_spot"]),
            _opt("street_food", "🌯", "Street food & food trucks", ["street_food", "cheap_eats", "adventurous"]),
            _opt("wine_bars", "🍷", "Wine bars & cocktails with bites", ["drinks_focused", "date_spot", "upscale"]),
            _opt("healthy", "🥗", "Healthy-ish bowls & salads", ["healthy", "light", "quick"]),
            _opt("desserts", "🍰", "Dessert cafés & bakeries", ["bakery", "dessert", "sweet_tooth"]),
            _opt("fine_dining", "🍽️", "Fancy tasting menus for special nights", ["fine_dining", "premium", "special_occasion"]),
        ],
    ),
    OnboardingQuestion(
        id="food_cuisines",
        category=QuestionCategory.food,
        question="If I only showed you food you actually love, what would that look like?",
        subtext="Pick your top 3 (or just vibe with everything)",
        max_picks=3,
        options=[
            _opt("italian", "🍝", "Italian (pasta, pizza, aperitivo vibes)", ["italian", "pasta", "pizza"]),
            _opt("american", "🍔", "American comfort (burgers, BBQ, diners)", ["american", "burgers", "bbq"]),
            _opt("japanese", "🍣", "Japanese (sushi, ramen, izakaya)", ["japanese", "sushi", "ramen"]),
            _opt("chinese", "🥟", "Chinese (dumplings, noodles, regional)", ["chinese", "dumplings", "noodles"]),
            _opt("mexican", "🌮", "Mexican & Latin (tacos, arepas, ceviche)", ["mexican", "tacos", "latin"]),
            _opt("indian", "🥘", "Indian & South Asian", ["indian", "south_asian", "curry"]),
            _opt("middle_eastern", "🧆", "Middle Eastern & Mediterranean", ["middle_eastern", "mediterranean", "falafel"]),
            _opt("plant_based", "🥗", "Plant-based / vegetarian-first", ["vegetarian", "vegan_friendly", "plant_based"]),
            _opt("bakeries", "🍞", "Bakeries, pastries, croissants", ["bakery", "pastry", "breakfast"]),
            _opt("variety", "🍜", "Honestly, a bit of everything", ["variety_lover", "adventurous", "open_minded"]),
        ],
    ),
    OnboardingQuestion(
        id="food_rules",
        category=QuestionCategory.food,
        question="Any food rules I should know about?",
        subtext="So I don't recommend the wrong stuff",
        max_picks=3,
        options=[
            _opt("vegetarian", "🌱", "Vegetarian", ["dietary:vegetarian"]),
            _opt("vegan", "🌿", "Vegan", ["dietary:vegan"]),
            _opt("no_pork", "🚫", "No pork", ["dietary:no_pork"]),
            _opt("halal", "✓", "Halal only", ["dietary:halal"]),
            _opt("gluten_free", "🌾", "Gluten-free", ["dietary:gluten_free"]),
            _opt("dairy_free", "🥛", "Dairy-free / lactose-free", ["dietary:dairy_free"]),
            _opt("spicy_lover", "🔥", "I love spicy food", ["spicy_lover"]),
            _opt("mild_only", "❄️", "Keep it mild please", ["spice_avoid"]),
            _opt("cheap_eats", "💸", "Prefer cheap eats most of the time", ["cheap_eats", "budget"]),
            _opt("premium", "💳", "Happy to pay more for great food", ["premium", "splurge"]),
            _opt("drinks_matter", "🍹", "Drinks matter (cocktails, wine, etc.)", ["drinks_focused", "cocktails"]),
        ],
    ),
]

# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------

_EVENT_QUESTIONS = [
    OnboardingQuestion(
        id="event_types",
        category=QuestionCategory.events,
        question="When you think 'I wanna go to something' — what do you mean?",
        subtext="Pick up to 3",
        max_picks=3,
        options=[
            _opt("live_music", "🎵", "Live music: small gigs, concerts", ["live_music", "concerts", "music"]),
            _opt("clubs", "🎧", "Clubs / DJs / dance nights", ["club", "dj", "dancing"]),
            _opt("theatre", "🎭", "Theatre, plays, musicals", ["theatre", "broadway", "performing_arts"]),
            _opt("comedy", "😂", "Stand-up comedy, improv", ["comedy", "standup", "improv"]),
            _opt("art_shows", "🎨", "Art shows, gallery openings", ["art", "gallery", "cultural"]),
            _opt("talks", "🎓", "Talks, panels, book events", ["talks", "intellectual", "learning"]),
            _opt("festivals", "🎪", "Festivals & big outdoor events", ["festival", "outdoor", "big_event"]),
            _opt("sports", "🏟️", "Sports games / watch parties", ["sports", "games", "watch_party"]),
            _opt("social", "🧑‍🤝‍🧑", "Social meetups, mixers", ["social", "meetup", "networking"]),
        ],
    ),
    OnboardingQuestion(
        id="event_energy",
        category=QuestionCategory.events,
        question="What kind of energy do you like at events?",
        subtext="Be honest — no judgment here",
        max_picks=3,
        options=[
            _opt("chill", "🕯️", "Super chill, seated, low noise", ["chill", "quiet", "relaxed"]),
            _opt("intimate", "🛋️", "Intimate & cozy (small venues)", ["intimate", "small_venue", "cozy"]),
            _opt("lively", "😊", "Lively but not overwhelming", ["lively", "moderate_energy"]),
            _opt("high_energy", "🎉", "Big buzz, crowds, high energy", ["high_energy", "crowded", "buzzy"]),
            _opt("party", "🔊", "Full-on party / club energy", ["party", "club_energy", "loud"]),
            _opt("family", "👨‍👩‍👧‍👦", "Family-friendly vibes", ["family_friendly", "kid_friendly", "daytime"]),
            _opt("indie", "🎨", "Indie / underground, experimental", ["indie", "underground", "experimental"]),
        ],
    ),
    OnboardingQuestion(
        id="event_timing",
        category=QuestionCategory.events,
        question="When & how do you actually go out?",
        subtext="Real life, not aspirational",
        max_picks=3,
        options=[
            _opt("weekend_day", "🌞", "Weekend daytime (markets, fairs)", ["weekend_day", "daytime", "markets"]),
            _opt("weeknight", "🌅", "Weeknight evenings (after work)", ["weeknight", "after_work", "evening"]),
            _opt("weekend_night", "🌙", "Weekend nights (8pm–1am)", ["weekend_night", "prime_time", "nightlife"]),
            _opt("late_night", "🌃", "Late-night (after midnight)", ["late_night", "after_hours"]),
            _opt("solo", "🧍", "Happy going solo", ["solo_friendly", "independent"]),
            _opt("date", "❤️", "Usually a date / one other person", ["date_night", "romantic", "couples"]),
            _opt("friends", "🧑‍🤝‍🧑", "Small friend group", ["group_friendly", "friends", "social"]),
            _opt("family_with", "👨‍👩‍👧‍👦", "Mostly family / with kids", ["family", "kids", "all_ages"]),
        ],
    ),
]

# ---------------------------------------------------------------------------
# Places
# ---------------------------------------------------------------------------

_PLACE_QUESTIONS = [
    OnboardingQuestion(
        id="place_types",
        category=QuestionCategory.places,
        question="What kind of places should I surface for you?",
        subtext="Think: 'I have a free afternoon, show me...'",
        max_picks=3,
        options=[
            _opt("museums", "🖼️", "Museums & big cultural institutions", ["museum", "cultural", "institution"]),
            _opt("galleries", "🧑‍🎨", "Small galleries, indie art spaces", ["gallery", "indie_art", "small_venue"]),
            _opt("historic", "🏛️", "Historical sites & landmarks", ["historic", "landmark", "architecture"]),
            _opt("viewpoints", "📸", "Scenic viewpoints, rooftops, city views", ["viewpoint", "rooftop", "scenic", "photo_spot"]),
            _opt("parks", "🌳", "Parks, gardens, nice walking areas", ["park", "garden", "nature", "outdoor"]),
            _opt("shopping", "🛍️", "Cool streets, bookstores, record shops", ["shopping", "bookstore", "browse", "street"]),
            _opt("quirky", "🧪", "Quirky / immersive (VR, escape rooms)", ["quirky", "immersive", "interactive", "unique"]),
            _opt("quiet", "🧘", "Quiet places to read, think, or work", ["quiet", "peaceful", "work_friendly"]),
        ],
    ),
    OnboardingQuestion(
        id="explore_style",
        category=QuestionCategory.places,
        question="How do you like exploring a new neighborhood?",
        subtext="There's no wrong answer here",
        max_picks=3,
        options=[
            _opt("landmarks", "🗺️", "Hit the 'must-see' landmarks first", ["landmarks", "tourist", "iconic"]),
            _opt("wander", "🚶", "Just walk with no plan and see what happens", ["wanderer", "spontaneous", "no_plan"]),
            _opt("hidden_gems", "🧭", "Find hidden gems & local-only spots", ["hidden_gems", "local", "off_beaten_path"]),
            _opt("cafe_hop", "☕", "Hop between cafés & people-watch", ["cafe_hopper", "people_watching", "relaxed"]),
            _opt("photo_spots", "📷", "Walkable photo spots / street art", ["photo_spots", "street_art", "aesthetic"]),
            _opt("nature_walks", "🌿", "Nature-y walks (rivers, greenery)", ["nature", "waterfront", "greenery", "walks"]),
            _opt("compact", "🔁", "Compact areas, minimal walking", ["compact", "low_mobility", "accessible"]),
        ],
    ),
]

ONBOARDING_QUESTIONS: list[OnboardingQuestion] = _FOOD_QUESTIONS + _EVENT_QUESTIONS + _PLACE_QUESTIONS


def validate_questions(questions: list[OnboardingQuestion]) -> None:
    """Raise ``ValueError`` if the catalog is empty or has duplicate ids."""
    if not questions:
        raise ValueError("Onboarding question catalog must not be empty")
    seen_questions: set[str] = set()
    for question in questions:
        if question.id in seen_questions:
            raise ValueError(f"Duplicate question id: {question.id}")
        seen_questions.add(question.id)
        option_ids = [o.id for o in question.options]
        if len(option_ids) != len(set(option_ids)):
            raise ValueError(f"Duplicate option id in question: {question.id}")


def get_question_by_id(question_id: str) -> OnboardingQuestion | None:
    for question in ONBOARDING_QUESTIONS:
        if question.id == question_id:
            return question
    return None


validate_questions(ONBOARDING_QUESTIONS)
