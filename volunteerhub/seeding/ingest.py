from __future__ import annotations

from datetime import date, timedelta
from pathlib import Path
from typing import Any, List

import pandas as pd

from .config import DEFAULT_SEED_CONFIG, SeedConfig
from .samples import SAMPLE_EVENTS, SAMPLE_ORGANIZATION_ID


CANONICAL_COLUMNS: List[str] = [
    "id",
    "title",
    "description",
    "date",
    "time",
    "location",
    "category",
    "image_url",
    "requirements",
    "volunteers_needed",
    "current_volunteers",
    "organization_id",
    "organization_contact",
]


def build_events_frame(
    samples: list[dict[str, Any]] = SAMPLE_EVENTS,
    today: date | None = None,
) -> pd.DataFrame:
    """Normalize raw sample dicts into the canonical event columns."""
    today = today or date.today()
    raw = pd.DataFrame(samples)

    canonical = pd.DataFrame()
    canonical["id"] = [f"evt-{i + 1}" for i in range(len(raw))]
    for col in ("title", "description", "location"):
        canonical[col] = raw[col].fillna("").astype(str).str.strip()

    offsets = raw.get("days_from_now", pd.Series(0, index=raw.index)).fillna(0).astype(int)
    canonical["date"] = [today + timedelta(days=int(d)) for d in offsets]

    for col in ("time", "category", "image_url", "requirements", "organization_contact"):
        canonical[col] = raw[col] if col in raw.columns else None

    if "volunteers_needed" in raw.columns:
        needed = pd.to_numeric(raw["volunteers_needed"], errors="coerce").fillna(1)
        canonical["volunteers_needed"] = needed.astype(int)
    else:
        canonical["volunteers_needed"] = 1
    canonical["current_volunteers"] = 0
    canonical["organization_id"] = SAMPLE_ORGANIZATION_ID

    # Ordered by date so ties in ranking favour the soonest event
    canonical = canonical[CANONICAL_COLUMNS].sort_values("date", kind="stable")
    return canonical.reset_index(drop=True)


def run_seed(config: SeedConfig = DEFAULT_SEED_CONFIG, today: date | None = None) -> Path:
    """
    Write the sample events to the processed CSV.

    Steps:
    - Resolve sample day offsets against *today*.
    - Map samples into the canonical event schema.
    - Persist the events as CSV for the event store.
    """
    config.processed_data_dir.mkdir(parents=True, exist_ok=True)

    frame = build_events_frame(today=today)
    frame["date"] = frame["date"].map(lambda d: d.isoformat())

    output_path = config.processed_path
    frame.to_csv(output_path, index=False)
    return output_path


if __name__ == "__main__":
    path = run_seed()
    print(f"Seeding complete. Events saved to: {path}")
