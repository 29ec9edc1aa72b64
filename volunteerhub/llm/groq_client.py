from __future__ import annotations

import json
import logging
import re
from typing import Any, Sequence

from groq import Groq

from ..recommendations.models import Event
from .config import DEFAULT_LLM_CONFIG, LLMConfig

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a recommendation system that suggests volunteer events based on "
    "a user's interests and search history. "
    "Always provide recommendations even if the match is not perfect; when "
    "there are no clear matches, prefer popular events or diverse categories.\n\n"
    "Return ONLY valid JSON in this exact format:\n"
    '{"recommendations": [{"id": "<event_id>", "reason": "<one sentence>"}]}\n'
    "Include only events from the provided list. "
    "Order from best match to worst."
)

_JSON_BLOCK_RE = re.compile(r"\{[\s\S]*\}")


def _build_user_message(
    interests: str,
    search_history: Sequence[str],
    candidates: Sequence[Event],
    max_picks: int,
) -> str:
    lines = ["## User"]
    lines.append(f"- Interests: {interests or 'Not specified'}")
    lines.append(f"- Recent searches: {', '.join(search_history) if search_history else 'None'}")

    lines.append("\n## Available Events")
    lines.append("| ID | Title | Date | Location | Category | Description |")
    lines.append("|---|---|---|---|---|---|")
    for e in candidates:
        lines.append(
            f"| {e.id} | {e.title} | {e.date.isoformat()} | {e.location} "
            f"| {e.category or 'Not specified'} | {e.description} |"
        )

    lines.append(f"\nRecommend up to {max_picks} events, {max_picks} if possible.")
    return "\n".join(lines)


def _parse_content(content: str) -> dict[str, Any]:
    try:
        return json.loads(content)
    except json.JSONDecodeError:
        # Models sometimes wrap the JSON in prose or code fences
        match = _JSON_BLOCK_RE.search(content)
        if not match:
            raise
        return json.loads(match.group(0))


def rank_and_explain(
    interests: str,
    search_history: Sequence[str],
    candidates: Sequence[Event],
    config: LLMConfig = DEFAULT_LLM_CONFIG,
) -> list[tuple[str, str]]:
    """
    Ask the Groq LLM to pick events for the user and explain each pick.

    Returns ``(event_id, reason)`` pairs, best first.
    Returns an empty list on any failure (timeout, bad JSON, API error).
    """
    if not config.enabled or not config.api_key:
        return []

    if not candidates:
        return []

    try:
        client = Groq(api_key=config.api_key, timeout=config.timeout)
        response = client.chat.completions.create(
            model=config.model,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {
                    "role": "user",
                    "content": _build_user_message(
                        interests, search_history, candidates, config.max_picks,
                    ),
                },
            ],
            max_tokens=config.max_tokens,
            temperature=config.temperature,
            response_format={"type": "json_object"},
        )

        content = response.choices[0].message.content or ""
        parsed = _parse_content(content)

        results: list[tuple[str, str]] = []
        seen: set[str] = set()
        for item in parsed.get("recommendations", []):
            eid = str(item.get("id", ""))
            reason = str(item.get("reason", "")).strip()
            if eid and reason and eid not in seen:
                seen.add(eid)
                results.append((eid, reason))

        return results

    except Exception:
        logger.warning("Groq LLM call failed, falling back to keyword ranking", exc_info=True)
        return []
