from __future__ import annotations

import time
from typing import Any

from .errors import StoreError


class SearchHistoryStore:
    """Append-only log of interest queries keyed by user."""

    def __init__(self) -> None:
        self._entries: list[dict[str, Any]] = []

    def add(self, user_id: str, query: str) -> None:
        if not user_id:
            raise StoreError("Cannot record search history without a user id")
        self._entries.append({
            "user_id": user_id,
            "search_query": query,
            "created_at": time.time(),
        })

    def recent(self, user_id: str, limit: int = 5) -> list[str]:
        """Return the user's latest queries, most recent first."""
        rows = [e for e in self._entries if e["user_id"] == user_id]
        rows.reverse()
        return [r["search_query"] for r in rows[:limit]]

    def clear(self) -> None:
        self._entries.clear()
