import random
from datetime import date, timedelta

from volunteerhub.recommendations.config import EngineConfig
from volunteerhub.recommendations.engine import (
    TIER_CATEGORY,
    TIER_EMPTY,
    TIER_MATCH,
    TIER_RANDOM,
    recommend,
    sample_events,
)
from volunteerhub.recommendations.models import Event

TODAY = date(2030, 1, 1)


def _event(eid, title, description="", location="", category=None, days=0):
    return Event(
        id=eid,
        title=title,
        description=description,
        location=location,
        category=category,
        date=TODAY + timedelta(days=days),
    )


BEACH = _event("beach", "Beach Cleanup", "Help clean the beach", "Ocean Park", "Environment", 1)
TUTOR = _event("tutor", "Tutoring Session", "Teach kids math", "Library", "Education", 2)

# Neutral text so no synonym can match
PLAIN = [
    _event("p1", "Alpha Gathering", location="Hall", days=1),
    _event("p2", "Bravo Meetup", location="Hall", days=2),
    _event("p3", "Delta Session", location="Hall", days=3),
    _event("p4", "Omega Session", location="Hall", days=4),
]


def test_beach_environment_query_ranks_beach_first():
    result = recommend([BEACH, TUTOR], "environment beach", rng=random.Random(0))
    assert result.tier == TIER_MATCH
    first = result.recommendations[0]
    assert first.id == "beach"
    assert first.reason == "Matched: beach, environment"


def test_match_reason_never_exposes_scores():
    result = recommend([BEACH, TUTOR], "environment beach", rng=random.Random(0))
    for rec in result.recommendations:
        assert rec.reason
        assert not any(ch.isdigit() for ch in rec.reason)


def test_output_carries_event_fields():
    event = BEACH.model_copy(update={"image_url": "https://img.example/beach.png"})
    rec = recommend([event], "beach").recommendations[0]
    assert rec.title == "Beach Cleanup"
    assert rec.date == BEACH.date
    assert rec.location == "Ocean Park"
    assert rec.category == "Environment"
    assert rec.image_url == "https://img.example/beach.png"


def test_empty_interests_uses_category_tier():
    events = [BEACH, TUTOR] + PLAIN
    result = recommend(events, "", rng=random.Random(1))
    assert result.tier == TIER_CATEGORY
    assert {r.id for r in result.recommendations} == {"beach", "tutor"}
    reasons = {r.id: r.reason for r in result.recommendations}
    assert reasons["beach"] == "Recommended Environment event you might enjoy"
    assert reasons["tutor"] == "Recommended Education event you might enjoy"


def test_short_words_only_skip_scoring():
    result = recommend([BEACH] + PLAIN, "to a be", rng=random.Random(1))
    assert result.tier == TIER_CATEGORY
    assert [r.id for r in result.recommendations] == ["beach"]


def test_uncategorized_events_fall_to_random_tier():
    result = recommend(PLAIN, "zzzz", rng=random.Random(3))
    assert result.tier == TIER_RANDOM
    assert len(result.recommendations) == 3
    assert len({r.id for r in result.recommendations}) == 3
    assert all(r.reason == "Recommended event you might enjoy" for r in result.recommendations)


def test_random_tier_returns_all_when_fewer_than_cap():
    result = recommend(PLAIN[:2], "", rng=random.Random(3))
    assert result.tier == TIER_RANDOM
    assert {r.id for r in result.recommendations} == {"p1", "p2"}


def test_no_events_returns_empty():
    result = recommend([], "beach")
    assert result.tier == TIER_EMPTY
    assert result.recommendations == []


def test_results_capped_at_three():
    events = [_event(str(i), f"Beach day {i}", category="Environment", days=i) for i in range(10)]
    result = recommend(events, "beach")
    assert len(result.recommendations) == 3


def test_ties_keep_input_order():
    events = [_event(str(i), "Beach day", category="Environment", days=i) for i in range(5)]
    result = recommend(events, "beach")
    assert [r.id for r in result.recommendations] == ["0", "1", "2"]


def test_higher_score_first():
    low = _event("low", "Saturday shift", "Bring a beach towel", category="Social", days=1)
    high = _event("high", "Beach shift", "Bring a beach towel", category="Social", days=2)
    result = recommend([low, high], "beach")
    assert [r.id for r in result.recommendations] == ["high", "low"]


def test_match_tier_excludes_zero_scores():
    quiz = _event("quiz", "Quiz Night", category="Social", days=0)
    result = recommend([quiz, BEACH], "beach")
    ids = [r.id for r in result.recommendations]
    assert ids == ["beach"]


def test_past_registration_boost_surfaces_event():
    past = _event("past", "Blood drive", category="Health", days=-30)
    boosted = _event("c", "Morning Shift", "Front desk duty", category="Health", days=2)
    other = _event("d", "Evening Shift", "Front desk duty", category="Sports", days=1)
    result = recommend([other, boosted], "gardening", past_registrations=[past])
    assert result.tier == TIER_MATCH
    assert [r.id for r in result.recommendations] == ["c"]
    assert result.recommendations[0].reason == "Recommended based on your past registrations"


def test_history_only_match_uses_interest_reason():
    event = _event("1", "Beach Party", "Bring a beach towel", category="Social")
    result = recommend([event], "zzzz", search_history=["beach"])
    assert result.tier == TIER_MATCH
    assert result.recommendations[0].reason == "Recommended based on your interests"


def test_history_beyond_limit_ignored():
    event = _event("1", "Beach Party", "Bring a beach towel", category="Social")
    history = ["one1", "two2", "three", "four", "five", "beach"]
    result = recommend([event], "zzzz", search_history=history, rng=random.Random(0))
    assert result.tier == TIER_CATEGORY


def test_match_tier_is_deterministic():
    events = [BEACH, TUTOR] + PLAIN
    runs = [recommend(events, "kids beach", ["park"]).recommendations for _ in range(3)]
    assert runs[0] == runs[1] == runs[2]


def test_seeded_fallback_is_reproducible():
    a = recommend(PLAIN, "", rng=random.Random(42))
    b = recommend(PLAIN, "", rng=random.Random(42))
    assert [r.id for r in a.recommendations] == [r.id for r in b.recommendations]


def test_config_seed_used_when_no_rng_given():
    config = EngineConfig(seed=7)
    a = recommend(PLAIN, "", config=config)
    b = recommend(PLAIN, "", config=config)
    assert [r.id for r in a.recommendations] == [r.id for r in b.recommendations]


def test_sample_events_without_replacement():
    picks = sample_events(PLAIN, 3, random.Random(5))
    assert len(picks) == 3
    assert len({p.id for p in picks}) == 3
    assert sample_events([], 3, random.Random(5)) == []
