from __future__ import annotations

import os
from dataclasses import dataclass


def _env_seed() -> int | None:
    raw = os.getenv("RECOMMENDATION_SEED", "").strip()
    return int(raw) if raw else None


@dataclass(frozen=True)
class EngineConfig:
    """Weights, caps and reason wording for the keyword recommendation engine."""

    max_results: int = 3
    min_token_length: int = 3

    # Direct matches against the current interests
    title_weight: float = 3
    description_weight: float = 2
    location_weight: float = 1
    category_weight: float = 4

    # Silent boost from earlier searches
    history_title_weight: float = 1
    history_description_weight: float = 0.5
    history_category_weight: float = 2

    synonym_weight: float = 2
    past_registration_weight: float = 3
    past_registration_label: str = "past registrations"

    matched_reason_prefix: str = "Matched: "
    interests_reason: str = "Recommended based on your interests"
    past_registration_reason: str = "Recommended based on your past registrations"
    category_reason: str = "Recommended {category} event you might enjoy"
    random_reason: str = "Recommended event you might enjoy"
    popular_reason: str = "Popular event"
    padding_reason: str = "Popular event you might be interested in"

    history_limit: int = 5
    seed: int | None = None


DEFAULT_ENGINE_CONFIG = EngineConfig(seed=_env_seed())
