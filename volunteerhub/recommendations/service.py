from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass, field
from datetime import date

from ..analytics.store import record_usage
from ..llm.config import DEFAULT_LLM_CONFIG, LLMConfig
from ..llm.groq_client import rank_and_explain
from ..store.errors import StoreError
from ..store.events import EventStore
from ..store.history import SearchHistoryStore
from ..store.profiles import ProfileStore
from ..store.registrations import RegistrationStore
from .config import DEFAULT_ENGINE_CONFIG, EngineConfig
from .engine import (
    TIER_EMPTY,
    TIER_MATCH,
    RecommendationResult,
    make_rng,
    recommend,
    sample_events,
)
from .models import Event, RecommendationRequest, RecommendationResponse, RecommendedEvent
from .synonyms import DEFAULT_CATEGORY_SYNONYMS, CategorySynonyms

logger = logging.getLogger(__name__)

SOURCE_KEYWORD = "keyword"
SOURCE_AI = "ai"
SOURCE_POPULAR = "popular"
TIER_POPULAR = "popular"


class EventsUnavailableError(Exception):
    """Raised when neither the full nor the reduced event fetch succeeds."""


@dataclass
class Stores:
    events: EventStore = field(default_factory=EventStore)
    history: SearchHistoryStore = field(default_factory=SearchHistoryStore)
    registrations: RegistrationStore = field(default_factory=RegistrationStore)
    profiles: ProfileStore = field(default_factory=ProfileStore)


_stores = Stores()


def get_stores() -> Stores:
    """Return the process-wide stores (overridden in tests)."""
    return _stores


def _normalized(request: RecommendationRequest) -> RecommendationRequest:
    # A missing or null interests string is treated as empty input
    if request.interests is None:
        return request.model_copy(update={"interests": ""})
    return request


def _resolve_history(
    request: RecommendationRequest,
    user_id: str | None,
    stores: Stores,
    config: EngineConfig,
) -> list[str]:
    if request.search_history is not None:
        return request.search_history[: config.history_limit]
    if not user_id:
        return []
    try:
        return stores.history.recent(user_id, config.history_limit)
    except StoreError:
        logger.warning("Could not load search history for %s", user_id, exc_info=True)
        return []


def _resolve_past_registrations(user_id: str | None, stores: Stores) -> list[Event]:
    if not user_id:
        return []
    try:
        return stores.events.get_many(stores.registrations.event_ids_for(user_id))
    except StoreError:
        logger.warning("Could not load past registrations for %s", user_id, exc_info=True)
        return []


def _fetch_candidates(
    stores: Stores, today: date | None, config: EngineConfig,
) -> tuple[list[Event], bool]:
    """Upcoming events, or a reduced-scope fetch flagged with ``True``."""
    try:
        return stores.events.upcoming(today), False
    except StoreError:
        logger.warning("Upcoming event fetch failed, trying reduced fetch", exc_info=True)
        record_usage("event_fetch_failed")

    try:
        events = stores.events.recent(config.max_results)
    except StoreError as exc:
        logger.warning("Reduced event fetch failed", exc_info=True)
        raise EventsUnavailableError("Failed to get event recommendations") from exc
    return events[: config.max_results], True


def _record_history(user_id: str | None, interests: str, stores: Stores) -> None:
    if not user_id or not interests.strip():
        return
    try:
        stores.history.add(user_id, interests)
    except Exception:
        logger.warning("Could not save search history for %s", user_id, exc_info=True)
        record_usage("history_write_failed", {"user_id": user_id})


def _finish(
    request: RecommendationRequest,
    user_id: str | None,
    stores: Stores,
    source: str,
    result: RecommendationResult,
    start_time: float,
) -> RecommendationResponse:
    _record_history(user_id, request.interests, stores)

    elapsed_ms = round((time.time() - start_time) * 1000, 1)
    record_usage("recommendation", {
        "source": source,
        "tier": result.tier,
        "interests": request.interests,
        "user_id": user_id,
        "results_returned": len(result.recommendations),
        "response_time_ms": elapsed_ms,
    })
    return RecommendationResponse(recommended_events=result.recommendations)


def _popular_result(events: list[Event], config: EngineConfig) -> RecommendationResult:
    return RecommendationResult(
        tier=TIER_POPULAR,
        recommendations=[RecommendedEvent.from_event(e, config.popular_reason) for e in events],
    )


def get_recommendations(
    request: RecommendationRequest,
    user_id: str | None = None,
    *,
    stores: Stores | None = None,
    today: date | None = None,
    rng: random.Random | None = None,
    synonyms: CategorySynonyms = DEFAULT_CATEGORY_SYNONYMS,
    config: EngineConfig = DEFAULT_ENGINE_CONFIG,
) -> RecommendationResponse:
    """Keyword-engine recommendations for *request*.

    Raises ``EventsUnavailableError`` only when no events can be fetched at all.
    """
    start_time = time.time()
    request = _normalized(request)
    stores = stores or get_stores()
    user_id = user_id or request.user_id

    history = _resolve_history(request, user_id, stores, config)
    past_events = _resolve_past_registrations(user_id, stores)

    events, reduced = _fetch_candidates(stores, today, config)
    if reduced:
        result = _popular_result(events, config)
        return _finish(request, user_id, stores, SOURCE_POPULAR, result, start_time)

    result = recommend(
        events,
        request.interests,
        history,
        past_events,
        synonyms=synonyms,
        config=config,
        rng=rng,
    )
    logger.info("Keyword recommendations for %r resolved at tier %s", request.interests, result.tier)
    return _finish(request, user_id, stores, SOURCE_KEYWORD, result, start_time)


def get_ai_recommendations(
    request: RecommendationRequest,
    user_id: str | None = None,
    *,
    stores: Stores | None = None,
    today: date | None = None,
    rng: random.Random | None = None,
    synonyms: CategorySynonyms = DEFAULT_CATEGORY_SYNONYMS,
    config: EngineConfig = DEFAULT_ENGINE_CONFIG,
    llm_config: LLMConfig = DEFAULT_LLM_CONFIG,
) -> RecommendationResponse:
    """LLM-picked recommendations, falling back to the keyword engine."""
    start_time = time.time()
    request = _normalized(request)
    stores = stores or get_stores()
    user_id = user_id or request.user_id

    history = _resolve_history(request, user_id, stores, config)

    events, reduced = _fetch_candidates(stores, today, config)
    if reduced:
        result = _popular_result(events, config)
        return _finish(request, user_id, stores, SOURCE_POPULAR, result, start_time)

    if not events:
        return _finish(request, user_id, stores, SOURCE_AI, RecommendationResult(tier=TIER_EMPTY), start_time)

    by_id = {e.id: e for e in events}
    picks = [
        RecommendedEvent.from_event(by_id[eid], reason)
        for eid, reason in rank_and_explain(request.interests, history, events, llm_config)
        if eid in by_id
    ][: config.max_results]

    if not picks:
        logger.info("No usable LLM picks, using keyword recommendations")
        result = recommend(
            events,
            request.interests,
            history,
            _resolve_past_registrations(user_id, stores),
            synonyms=synonyms,
            config=config,
            rng=rng,
        )
        return _finish(request, user_id, stores, SOURCE_KEYWORD, result, start_time)

    if len(picks) < config.max_results and len(events) >= config.max_results:
        chosen = {p.id for p in picks}
        remaining = [e for e in events if e.id not in chosen]
        extra = sample_events(remaining, config.max_results - len(picks), rng or make_rng(config))
        picks.extend(RecommendedEvent.from_event(e, config.padding_reason) for e in extra)

    return _finish(
        request, user_id, stores, SOURCE_AI, RecommendationResult(tier=TIER_MATCH, recommendations=picks), start_time,
    )
