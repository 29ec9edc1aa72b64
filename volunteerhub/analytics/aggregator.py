from __future__ import annotations

from collections import Counter
from datetime import date
from typing import Any, Sequence

from ..recommendations.models import DashboardStats, Event
from ..recommendations.tokenizer import tokenize


def compute_analytics(records: list[dict[str, Any]]) -> dict[str, Any]:
    requests = [e for e in records if e["type"] == "recommendation"]
    total = len(requests)

    # Average response time
    times = [r["response_time_ms"] for r in requests if "response_time_ms" in r]
    avg_time = round(sum(times) / len(times), 1) if times else 0.0

    # Which path answered and which tier it landed in
    source_counter: Counter[str] = Counter(r.get("source", "unknown") for r in requests)
    tier_counter: Counter[str] = Counter(r.get("tier", "unknown") for r in requests)

    # Top query keywords
    keyword_counter: Counter[str] = Counter()
    for r in requests:
        for k in tokenize(r.get("interests")):
            keyword_counter[k] += 1
    top_keywords = [{"name": n, "count": c} for n, c in keyword_counter.most_common(10)]

    empty_results = sum(1 for r in requests if r.get("results_returned", 0) == 0)
    history_failures = sum(1 for e in records if e["type"] == "history_write_failed")
    store_failures = sum(1 for e in records if e["type"] == "event_fetch_failed")

    return {
        "total_requests": total,
        "avg_response_time_ms": avg_time,
        "by_source": dict(source_counter),
        "by_tier": dict(tier_counter),
        "top_keywords": top_keywords,
        "empty_result_rate": round(empty_results / total * 100, 1) if total else 0.0,
        "history_write_failures": history_failures,
        "event_fetch_failures": store_failures,
    }


def compute_dashboard(events: Sequence[Event], today: date | None = None) -> DashboardStats:
    """Totals for an organization's events; events dated today count as active."""
    today = today or date.today()
    active = sum(1 for e in events if e.date >= today)
    return DashboardStats(
        total_events=len(events),
        active_events=active,
        completed_events=len(events) - active,
        total_volunteers=sum(e.current_volunteers for e in events),
    )
