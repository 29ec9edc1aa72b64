from __future__ import annotations

from datetime import date, timedelta

from fastapi.testclient import TestClient

from volunteerhub.analytics.aggregator import compute_analytics, compute_dashboard
from volunteerhub.analytics.store import clear_usage, get_usage
from volunteerhub.app import app
from volunteerhub.recommendations.models import Event

client = TestClient(app)


def _login_organization(c):
    c.post("/auth/login", json={"username": "helpinghands", "password": "org123"})


def test_analytics_returns_empty_initially():
    clear_usage()
    _login_organization(client)
    resp = client.get("/analytics")
    assert resp.status_code == 200
    body = resp.json()
    assert body["total_requests"] == 0
    assert body["avg_response_time_ms"] == 0.0


def test_analytics_tracks_recommendations():
    clear_usage()
    client.post("/recommendations", json={"interests": "beach cleanup"})
    client.post("/recommendations", json={"interests": "beach"})
    _login_organization(client)
    body = client.get("/analytics").json()
    assert body["total_requests"] == 2
    assert body["by_source"] == {"keyword": 2}
    assert body["top_keywords"][0] == {"name": "beach", "count": 2}


def test_compute_analytics_counts_failures():
    records = [
        {"type": "recommendation", "source": "popular", "tier": "popular",
         "interests": "", "results_returned": 0, "response_time_ms": 4.0},
        {"type": "event_fetch_failed"},
        {"type": "history_write_failed"},
        {"type": "history_write_failed"},
    ]
    summary = compute_analytics(records)
    assert summary["total_requests"] == 1
    assert summary["empty_result_rate"] == 100.0
    assert summary["event_fetch_failures"] == 1
    assert summary["history_write_failures"] == 2
    assert summary["by_tier"] == {"popular": 1}


def test_usage_snapshot_is_a_copy():
    clear_usage()
    snapshot = get_usage()
    snapshot.append({"type": "recommendation"})
    assert get_usage() == []


def test_compute_dashboard_splits_active_and_completed():
    today = date(2030, 6, 1)
    events = [
        Event(id="a", title="A", date=today - timedelta(days=3), current_volunteers=4),
        Event(id="b", title="B", date=today, current_volunteers=2),
        Event(id="c", title="C", date=today + timedelta(days=7)),
    ]
    stats = compute_dashboard(events, today)
    assert stats.total_events == 3
    assert stats.active_events == 2
    assert stats.completed_events == 1
    assert stats.total_volunteers == 6


def test_compute_dashboard_empty():
    assert compute_dashboard([]).total_events == 0
