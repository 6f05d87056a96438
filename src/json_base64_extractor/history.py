"""Bounded, newest-first history of cleaned documents.

Each successful run appends the serialized cleaned document. Only the most
recent `limit` entries are kept; older entries are evicted on overflow. The
history is in-memory only and owned by a single `ExtractionSession`.
"""
from __future__ import annotations

from datetime import datetime
from typing import Iterator, List, Optional

from .config import DEFAULT_HISTORY_LIMIT
from .models.extraction import HistoryEntry

__all__ = ["RunHistory"]


class RunHistory:
    def __init__(self, limit: int = DEFAULT_HISTORY_LIMIT) -> None:
        if limit < 1:
            raise ValueError("history limit must be >= 1")
        self.limit = limit
        self._entries: List[HistoryEntry] = []

    def add(self, cleaned_json: str, now: Optional[datetime] = None) -> HistoryEntry:
        """Insert a new entry at the front, evicting the oldest beyond the limit."""
        created = now or datetime.now()
        entry_id = int(created.timestamp() * 1000)
        # Identifiers must stay unique even for runs within the same millisecond.
        if self._entries and entry_id <= self._entries[0].id:
            entry_id = self._entries[0].id + 1
        entry = HistoryEntry(
            id=entry_id,
            cleaned_json=cleaned_json,
            timestamp=created.strftime("%Y-%m-%d %H:%M:%S"),
        )
        self._entries.insert(0, entry)
        del self._entries[self.limit:]
        return entry

    def get(self, entry_id: int) -> Optional[HistoryEntry]:
        for entry in self._entries:
            if entry.id == entry_id:
                return entry
        return None

    @property
    def entries(self) -> List[HistoryEntry]:
        return list(self._entries)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[HistoryEntry]:
        return iter(list(self._entries))
