from __future__ import annotations

import logging
import threading
import uuid
from datetime import date
from pathlib import Path
from typing import Any, Iterable

import pandas as pd

from ..recommendations.models import Event, EventCreate
from ..seeding.config import DEFAULT_SEED_CONFIG
from ..seeding.ingest import CANONICAL_COLUMNS, build_events_frame
from .errors import EventFullError, EventNotFoundError, EventPastError, StoreError

logger = logging.getLogger(__name__)


def _clean(value: Any) -> Any:
    if value is None:
        return None
    try:
        if pd.isna(value):
            return None
    except (TypeError, ValueError):
        pass
    return value


def _row_to_event(row: pd.Series) -> Event:
    data = {col: _clean(row.get(col)) for col in CANONICAL_COLUMNS}
    data["id"] = str(data["id"])
    for col in ("description", "location"):
        data[col] = data[col] or ""
    for col in ("volunteers_needed", "current_volunteers"):
        data[col] = int(data[col] or 0)
    return Event(**data)


class EventStore:
    """Events table backed by an in-memory DataFrame, loaded from CSV on first use."""

    def __init__(self, csv_path: Path | None = DEFAULT_SEED_CONFIG.processed_path) -> None:
        self._csv_path = csv_path
        self._df: pd.DataFrame | None = None
        # Guards the read-modify-write mutations below
        self._lock = threading.RLock()

    def _load(self) -> pd.DataFrame:
        if self._csv_path is not None and self._csv_path.exists():
            try:
                df = pd.read_csv(self._csv_path, dtype={"id": str})
            except (OSError, ValueError) as exc:
                raise StoreError(f"Could not read events from {self._csv_path}") from exc
            df["date"] = pd.to_datetime(df["date"]).dt.date
        else:
            logger.info("No events file at %s, seeding sample events in memory", self._csv_path)
            df = build_events_frame()
        return df

    def frame(self) -> pd.DataFrame:
        with self._lock:
            if self._df is None:
                self._df = self._load()
            return self._df

    def load_events(self, events: Iterable[Event]) -> None:
        """Replace the table contents with *events*."""
        rows = [e.model_dump() for e in events]
        with self._lock:
            self._df = pd.DataFrame(rows, columns=CANONICAL_COLUMNS)

    def upcoming(self, today: date | None = None) -> list[Event]:
        """Events dated today or later, soonest first."""
        today = today or date.today()
        df = self.frame()
        selected = df.loc[df["date"] >= today].sort_values("date", kind="stable")
        return [_row_to_event(row) for _, row in selected.iterrows()]

    def recent(self, limit: int = 3) -> list[Event]:
        """Reduced-scope fetch with no date filter or ordering."""
        df = self.frame()
        return [_row_to_event(row) for _, row in df.head(limit).iterrows()]

    def get(self, event_id: str) -> Event:
        df = self.frame()
        match = df.loc[df["id"] == event_id]
        if match.empty:
            raise EventNotFoundError(event_id)
        return _row_to_event(match.iloc[0])

    def get_many(self, event_ids: Iterable[str]) -> list[Event]:
        ids = set(event_ids)
        if not ids:
            return []
        df = self.frame()
        return [_row_to_event(row) for _, row in df.loc[df["id"].isin(ids)].iterrows()]

    def create(self, payload: EventCreate, organization_id: str) -> Event:
        event = Event(
            id=uuid.uuid4().hex,
            organization_id=organization_id,
            current_volunteers=0,
            **payload.model_dump(),
        )
        row = pd.DataFrame([event.model_dump()], columns=CANONICAL_COLUMNS)
        with self._lock:
            df = self.frame()
            self._df = row if df.empty else pd.concat([df, row], ignore_index=True)
        return event

    def update(self, event_id: str, payload: EventCreate) -> Event:
        """Replace the editable fields of an event, keeping its owner and head count."""
        with self._lock:
            current = self.get(event_id)
            event = Event(
                id=current.id,
                organization_id=current.organization_id,
                current_volunteers=current.current_volunteers,
                **payload.model_dump(),
            )
            df = self.frame()
            position = df.index[df["id"] == event_id][0]
            row = pd.DataFrame([event.model_dump()], columns=CANONICAL_COLUMNS, index=[position])
            self._df = pd.concat([df.drop(index=position), row]).sort_index()
        return event

    def for_organization(self, organization_id: str) -> list[Event]:
        """All events owned by *organization_id*, past included, soonest first."""
        df = self.frame()
        selected = df.loc[df["organization_id"] == organization_id].sort_values("date", kind="stable")
        return [_row_to_event(row) for _, row in selected.iterrows()]

    def reserve_spot(self, event_id: str, today: date | None = None) -> Event:
        """Take one volunteer spot, refusing past or full events."""
        today = today or date.today()
        with self._lock:
            event = self.get(event_id)
            if event.date < today:
                raise EventPastError(event_id)
            if event.current_volunteers >= event.volunteers_needed:
                raise EventFullError(event_id)
            df = self.frame()
            df.loc[df["id"] == event_id, "current_volunteers"] = event.current_volunteers + 1
        return event.model_copy(update={"current_volunteers": event.current_volunteers + 1})

    def release_spot(self, event_id: str) -> None:
        with self._lock:
            event = self.get(event_id)
            df = self.frame()
            df.loc[df["id"] == event_id, "current_volunteers"] = max(event.current_volunteers - 1, 0)
