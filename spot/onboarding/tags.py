from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence

from .models import OnboardingQuestion
from .questions import ONBOARDING_QUESTIONS

DIETARY_PREFIX = "dietary:"


def aggregate_tags(
    answers: Mapping[str, Sequence[str]],
    catalog: Sequence[OnboardingQuestion] = ONBOARDING_QUESTIONS,
) -> set[str]:
    """
    Union the tags of every selected option across the catalog.

    Option ids that no longer exist in their question are skipped, as are
    answers for questions outside the catalog.
    """
    tags: set[str] = set()
    for question in catalog:
        for option_id in answers.get(question.id) or []:
            option = question.find_option(option_id)
            if option is not None:
                tags.update(option.tags)
    return tags


def over_limit_questions(
    answers: Mapping[str, Sequence[str]],
    catalog: Sequence[OnboardingQuestion] = ONBOARDING_QUESTIONS,
) -> list[str]:
    """Return ids of questions whose distinct selections exceed ``max_picks``.

    Unknown option ids do not count, matching ``aggregate_tags``.
    """
    over: list[str] = []
    for question in catalog:
        selected = {
            option_id
            for option_id in answers.get(question.id) or []
            if question.find_option(option_id) is not None
        }
        if len(selected) > question.max_picks:
            over.append(question.id)
    return over


def dietary_tags(tags: Iterable[str]) -> list[str]:
    return sorted(t for t in tags if t.startswith(DIETARY_PREFIX))


def preference_tags(tags: Iterable[str]) -> list[str]:
    return sorted(t for t in tags if not t.startswith(DIETARY_PREFIX))
