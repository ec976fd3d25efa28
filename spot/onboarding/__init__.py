"""
Onboarding questionnaire.

Responsibilities:
- Hold the static question catalog shown during onboarding.
- Turn a user's answer selections into the aggregate tag set.
- Split aggregate tags into dietary (hard filter) and preference tags.
"""
