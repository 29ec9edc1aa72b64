from __future__ import annotations

import re
from typing import Iterable

_SPLIT_RE = re.compile(r"[,\s]+")


def tokenize(text: str | None, min_length: int = 3) -> list[str]:
    """Split *text* into lowercase keywords, dropping short tokens and repeats."""
    if not text:
        return []
    seen: list[str] = []
    for token in _SPLIT_RE.split(text.lower()):
        if len(token) >= min_length and token not in seen:
            seen.append(token)
    return seen


def pooled_tokens(texts: Iterable[str], min_length: int = 3) -> list[str]:
    """Tokenize each text and pool the results into one ordered keyword list."""
    pooled: list[str] = []
    for text in texts:
        for token in tokenize(text, min_length):
            if token not in pooled:
                pooled.append(token)
    return pooled
