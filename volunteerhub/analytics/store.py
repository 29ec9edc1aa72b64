from __future__ import annotations

import time
from typing import Any

# Usage records, kept apart from the volunteer events table
_records: list[dict[str, Any]] = []


def record_usage(kind: str, data: dict[str, Any] | None = None) -> None:
    _records.append({
        "type": kind,
        "timestamp": time.time(),
        **(data or {}),
    })


def get_usage() -> list[dict[str, Any]]:
    return list(_records)


def clear_usage() -> None:
    _records.clear()
