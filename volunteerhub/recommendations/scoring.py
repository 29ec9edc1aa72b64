from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Sequence

from .config import DEFAULT_ENGINE_CONFIG, EngineConfig
from .models import Event
from .synonyms import DEFAULT_CATEGORY_SYNONYMS, CategorySynonyms


@dataclass
class ScoredEvent:
    event: Event
    score: float = 0.0
    matched: list[str] = field(default_factory=list)

    def add_label(self, label: str) -> None:
        if label not in self.matched:
            self.matched.append(label)


def registered_categories(past_events: Iterable[Event] | None) -> set[str]:
    """Lowercased categories of the events a user registered for before."""
    if not past_events:
        return set()
    return {e.category.strip().lower() for e in past_events if e.category and e.category.strip()}


def score_event(
    event: Event,
    keywords: Sequence[str],
    history_keywords: Sequence[str] = (),
    past_categories: set[str] | None = None,
    synonyms: CategorySynonyms = DEFAULT_CATEGORY_SYNONYMS,
    config: EngineConfig = DEFAULT_ENGINE_CONFIG,
) -> ScoredEvent:
    """Score a single event against the query keywords."""
    title = (event.title or "").lower()
    description = (event.description or "").lower()
    location = (event.location or "").lower()
    category = (event.category or "").strip().lower()

    scored = ScoredEvent(event=event)

    # Field-major so the matched list follows title, description, location, category
    fields = [
        (title, config.title_weight),
        (description, config.description_weight),
        (location, config.location_weight),
    ]
    if category:
        fields.append((category, config.category_weight))
    for text, weight in fields:
        for keyword in keywords:
            if keyword in text:
                scored.score += weight
                scored.add_label(keyword)

    history_only = [k for k in history_keywords if k not in keywords]
    for keyword in history_only:
        if keyword in title:
            scored.score += config.history_title_weight
        if keyword in description:
            scored.score += config.history_description_weight
        if category and keyword in category:
            scored.score += config.history_category_weight

    combined = set(keywords) | set(history_only)
    for name, words in synonyms.items():
        related = any(w in combined or w in title or w in description for w in words)
        if related and (not category or name.lower() in category):
            scored.score += config.synonym_weight
            scored.add_label(name)

    if past_categories and category in past_categories:
        scored.score += config.past_registration_weight
        scored.add_label(config.past_registration_label)

    return scored


def score_events(
    events: Sequence[Event],
    keywords: Sequence[str],
    history_keywords: Sequence[str] = (),
    past_categories: set[str] | None = None,
    synonyms: CategorySynonyms = DEFAULT_CATEGORY_SYNONYMS,
    config: EngineConfig = DEFAULT_ENGINE_CONFIG,
) -> list[ScoredEvent]:
    return [
        score_event(e, keywords, history_keywords, past_categories, synonyms, config)
        for e in events
    ]
