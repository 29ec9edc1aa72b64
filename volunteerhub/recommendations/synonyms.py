"""
Category synonym table used to infer an event's category from everyday phrasing.

The table is plain data so it can be versioned, extended and shared by every
caller of the engine. Category names are matched case-insensitively as
substrings of an event's category (``"animal"`` matches ``"Animal Welfare"``).
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping


@dataclass(frozen=True)
class CategorySynonyms:
    version: str
    mapping: Mapping[str, tuple[str, ...]] = field(default_factory=dict)

    def items(self):
        return self.mapping.items()

    def extended(self, version: str, extra: Mapping[str, tuple[str, ...]]) -> "CategorySynonyms":
        """Return a new table with *extra* synonyms appended per category."""
        merged: dict[str, tuple[str, ...]] = dict(self.mapping)
        for name, words in extra.items():
            existing = merged.get(name, ())
            merged[name] = existing + tuple(w for w in words if w not in existing)
        return CategorySynonyms(version=version, mapping=merged)


DEFAULT_CATEGORY_SYNONYMS = CategorySynonyms(
    version="2",
    mapping={
        "environment": (
            "nature", "clean", "green", "plant", "garden", "eco", "recycle",
            "litter", "beach", "park", "tree", "climate", "conservation", "trash",
        ),
        "education": (
            "teach", "learn", "school", "tutor", "mentor", "student", "literacy",
            "reading", "homework", "math", "science",
        ),
        "community": (
            "neighborhood", "local", "city", "town", "service", "food", "pantry",
            "meal", "church", "festival",
        ),
        "animal": (
            "pet", "dog", "cat", "wildlife", "rescue", "shelter", "puppy",
            "kitten", "horse", "adopt",
        ),
        "health": (
            "medical", "wellness", "fitness", "care", "hospital", "clinic",
            "blood", "nurse", "mental", "nutrition",
        ),
        "art": (
            "music", "paint", "creative", "dance", "culture", "theater",
            "museum", "craft", "mural", "concert",
        ),
        "elderly": (
            "senior", "elder", "aging", "retirement", "nursing", "grandparent",
            "companionship",
        ),
        "disaster": (
            "relief", "emergency", "flood", "hurricane", "earthquake", "fire",
            "storm", "evacuation",
        ),
        "clothing": (
            "clothes", "coat", "donation", "donate", "apparel", "shoes",
            "jacket", "wardrobe",
        ),
        "homeless": (
            "homelessness", "housing", "soup", "kitchen", "unhoused", "outreach",
            "blanket",
        ),
        "youth": (
            "kids", "children", "child", "teen", "young", "camp", "scout",
            "after-school",
        ),
        "sports": (
            "sport", "soccer", "basketball", "football", "baseball", "coach",
            "tournament", "marathon",
        ),
    },
)
