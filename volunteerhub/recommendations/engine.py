"""
Keyword recommendation engine.

Ranks candidate events against free-text interests and falls back through
three tiers:

1. **match** - events scoring above zero, best first (ties keep input order).
2. **category** - a random pick among events that carry a category.
3. **random** - a random pick among all candidates.

The engine is pure: candidates, history and past registrations are passed in,
and the only non-determinism is the injected ``random.Random`` used by the
fallback tiers.
"""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Sequence

from .config import DEFAULT_ENGINE_CONFIG, EngineConfig
from .models import Event, RecommendedEvent
from .scoring import ScoredEvent, registered_categories, score_events
from .synonyms import DEFAULT_CATEGORY_SYNONYMS, CategorySynonyms
from .tokenizer import pooled_tokens, tokenize

logger = logging.getLogger(__name__)

TIER_MATCH = "match"
TIER_CATEGORY = "category"
TIER_RANDOM = "random"
TIER_EMPTY = "empty"


@dataclass
class RecommendationResult:
    tier: str
    recommendations: list[RecommendedEvent] = field(default_factory=list)


def make_rng(config: EngineConfig = DEFAULT_ENGINE_CONFIG) -> random.Random:
    return random.Random(config.seed)


def sample_events(events: Sequence[Event], k: int, rng: random.Random) -> list[Event]:
    """Pick ``min(k, len(events))`` events uniformly without replacement."""
    return rng.sample(list(events), min(k, len(events)))


def build_reason(scored: ScoredEvent, config: EngineConfig = DEFAULT_ENGINE_CONFIG) -> str:
    if not scored.matched:
        return config.interests_reason
    if scored.matched == [config.past_registration_label]:
        return config.past_registration_reason
    return config.matched_reason_prefix + ", ".join(scored.matched)


def rank_matches(scored: Sequence[ScoredEvent], limit: int) -> list[ScoredEvent]:
    positive = [s for s in scored if s.score > 0]
    return sorted(positive, key=lambda s: s.score, reverse=True)[:limit]


def recommend(
    events: Sequence[Event],
    interests: str | None,
    search_history: Sequence[str] | None = None,
    past_registrations: Sequence[Event] | None = None,
    *,
    synonyms: CategorySynonyms = DEFAULT_CATEGORY_SYNONYMS,
    config: EngineConfig = DEFAULT_ENGINE_CONFIG,
    rng: random.Random | None = None,
) -> RecommendationResult:
    """Return up to ``config.max_results`` recommended events with reasons."""
    if not events:
        return RecommendationResult(tier=TIER_EMPTY)

    limit = config.max_results
    keywords = tokenize(interests, config.min_token_length)

    if keywords:
        history_keywords = pooled_tokens(
            (search_history or [])[: config.history_limit], config.min_token_length,
        )
        scored = score_events(
            events,
            keywords,
            history_keywords,
            registered_categories(past_registrations),
            synonyms,
            config,
        )
        top = rank_matches(scored, limit)
        if top:
            return RecommendationResult(
                tier=TIER_MATCH,
                recommendations=[
                    RecommendedEvent.from_event(s.event, build_reason(s, config)) for s in top
                ],
            )
        logger.info("No keyword matches for %r, falling back to category picks", interests)

    rng = rng or make_rng(config)

    categorized = [e for e in events if e.category and e.category.strip()]
    if categorized:
        picks = sample_events(categorized, limit, rng)
        return RecommendationResult(
            tier=TIER_CATEGORY,
            recommendations=[
                RecommendedEvent.from_event(e, config.category_reason.format(category=e.category))
                for e in picks
            ],
        )

    picks = sample_events(events, limit, rng)
    return RecommendationResult(
        tier=TIER_RANDOM,
        recommendations=[RecommendedEvent.from_event(e, config.random_reason) for e in picks],
    )
