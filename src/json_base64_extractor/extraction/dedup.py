"""Order-preserving deduplication of extracted payloads."""
from __future__ import annotations

from typing import Iterable, List

__all__ = ["dedupe_preserving_order"]


def dedupe_preserving_order(values: Iterable[str]) -> List[str]:
    """Return first occurrences in original order using exact string equality."""
    seen: set[str] = set()
    uniq: List[str] = []
    for v in values:
        if v not in seen:
            seen.add(v)
            uniq.append(v)
    return uniq
