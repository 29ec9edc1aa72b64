from concurrent.futures import ThreadPoolExecutor
from datetime import date, timedelta

import pytest

from volunteerhub.recommendations.models import Event, EventCreate, ProfileUpdate
from volunteerhub.store.errors import (
    AlreadyRegisteredError,
    EventFullError,
    EventNotFoundError,
    EventPastError,
    ProfileFieldError,
    StoreError,
)
from volunteerhub.store.events import EventStore
from volunteerhub.store.history import SearchHistoryStore
from volunteerhub.store.profiles import ProfileStore
from volunteerhub.store.registrations import RegistrationStore

TODAY = date(2030, 6, 1)


def _store():
    store = EventStore(csv_path=None)
    store.load_events([
        Event(id="late", title="Late", date=TODAY + timedelta(days=9)),
        Event(id="old", title="Old", date=TODAY - timedelta(days=1)),
        Event(id="soon", title="Soon", date=TODAY + timedelta(days=1)),
        Event(id="today", title="Today", date=TODAY),
    ])
    return store


def test_upcoming_filters_and_orders_by_date():
    assert [e.id for e in _store().upcoming(TODAY)] == ["today", "soon", "late"]


def test_recent_has_no_date_filter():
    assert [e.id for e in _store().recent(2)] == ["late", "old"]


def test_get_unknown_event():
    with pytest.raises(EventNotFoundError):
        _store().get("nope")


def test_get_many():
    assert {e.id for e in _store().get_many(["old", "soon", "nope"])} == {"old", "soon"}
    assert _store().get_many([]) == []


def test_create_event():
    store = _store()
    event = store.create(
        EventCreate(
            title="Food Drive",
            description="Sort cans",
            location="Hall",
            date=TODAY + timedelta(days=2),
            category="Community",
        ),
        organization_id="org-1",
    )
    assert store.get(event.id).organization_id == "org-1"
    assert [e.id for e in store.upcoming(TODAY)] == ["today", "soon", event.id, "late"]


def test_unreadable_csv_raises_store_error(tmp_path):
    path = tmp_path / "events.csv"
    path.write_bytes(b"")
    with pytest.raises(StoreError):
        EventStore(csv_path=path).upcoming(TODAY)


def test_history_most_recent_first_and_capped():
    history = SearchHistoryStore()
    for q in ["one", "two", "two", "three", "four", "five", "six"]:
        history.add("u1", q)
    history.add("u2", "other")
    assert history.recent("u1") == ["six", "five", "four", "three", "two"]
    assert history.recent("u2") == ["other"]


def test_history_requires_user():
    with pytest.raises(StoreError):
        SearchHistoryStore().add("", "beach")


def test_duplicate_registration_rejected():
    registrations = RegistrationStore()
    registrations.register("e1", "u1")
    with pytest.raises(AlreadyRegisteredError):
        registrations.register("e1", "u1")
    registrations.register("e2", "u1")
    assert registrations.event_ids_for("u1") == ["e1", "e2"]
    assert [r.user_id for r in registrations.for_event("e1")] == ["u1"]


def _capacity_store(needed=2, current=0):
    store = EventStore(csv_path=None)
    store.load_events([
        Event(id="open", title="Open", date=TODAY + timedelta(days=1),
              volunteers_needed=needed, current_volunteers=current, organization_id="org-1"),
        Event(id="old", title="Old", date=TODAY - timedelta(days=1),
              volunteers_needed=needed, organization_id="org-1"),
        Event(id="other", title="Other", date=TODAY, organization_id="org-2"),
    ])
    return store


def test_reserve_spot_counts_volunteers():
    store = _capacity_store(needed=2)
    assert store.reserve_spot("open", TODAY).current_volunteers == 1
    store.reserve_spot("open", TODAY)
    with pytest.raises(EventFullError):
        store.reserve_spot("open", TODAY)
    assert store.get("open").current_volunteers == 2


def test_reserve_spot_refuses_past_events():
    with pytest.raises(EventPastError):
        _capacity_store().reserve_spot("old", TODAY)


def test_reserve_spot_unknown_event():
    with pytest.raises(EventNotFoundError):
        _capacity_store().reserve_spot("nope", TODAY)


def test_release_spot():
    store = _capacity_store(needed=2, current=1)
    store.release_spot("open")
    store.release_spot("open")
    assert store.get("open").current_volunteers == 0


def test_concurrent_reservations_never_overbook():
    store = _capacity_store(needed=20)

    def attempt(_):
        try:
            store.reserve_spot("open", TODAY)
            return True
        except EventFullError:
            return False

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(attempt, range(50)))
    assert sum(results) == 20
    assert store.get("open").current_volunteers == 20


def test_update_keeps_owner_and_head_count():
    store = _capacity_store(needed=5, current=3)
    updated = store.update("open", EventCreate(
        title="Open Day",
        description="Renamed",
        location="Hall",
        date=TODAY + timedelta(days=4),
        volunteers_needed=8,
    ))
    assert updated.organization_id == "org-1"
    event = store.get("open")
    assert (event.title, event.current_volunteers, event.volunteers_needed) == ("Open Day", 3, 8)
    assert [e.id for e in store.upcoming(TODAY)] == ["other", "open"]


def test_update_unknown_event():
    with pytest.raises(EventNotFoundError):
        _capacity_store().update("nope", EventCreate(
            title="X", description="Y", location="Z", date=TODAY,
        ))


def test_for_organization_includes_past_events():
    assert [e.id for e in _capacity_store().for_organization("org-1")] == ["old", "open"]
    assert _capacity_store().for_organization("org-9") == []


def test_profile_update_respects_role_fields():
    profiles = ProfileStore()
    assert profiles.get("u1", "volunteer").full_name is None
    profiles.update("u1", "volunteer", ProfileUpdate(full_name="Sam", bio="Likes beaches"))
    assert profiles.get("u1", "volunteer").bio == "Likes beaches"
    with pytest.raises(ProfileFieldError):
        profiles.update("u1", "volunteer", ProfileUpdate(organization_name="Org"))
    profiles.update("o1", "organization", ProfileUpdate(organization_name="Helping Hands"))
    assert profiles.get("o1", "organization").organization_name == "Helping Hands"
