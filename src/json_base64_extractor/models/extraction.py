"""Pydantic models for extraction run results and history.

These models give the session and the CLI a typed, validated view of what a
run produced: the deduplicated payload items, the cleaned document, the run
status and the bounded history of cleaned documents.
"""
from __future__ import annotations

from enum import Enum
from typing import List

from pydantic import BaseModel, Field


class RunStatus(str, Enum):
    """Outcome of the most recent extraction attempt."""

    IDLE = "idle"
    SUCCESS = "success"
    ERROR = "error"


class ExtractedItem(BaseModel):
    """A single distinct payload, positioned after deduplication."""

    id: int = Field(ge=0)
    value: str
    # Transient UI feedback only; never part of equality-relevant output.
    copied: bool = False


class HistoryEntry(BaseModel):
    """Cleaned document from one successful run."""

    id: int  # creation timestamp in milliseconds
    cleaned_json: str
    copied: bool = False
    timestamp: str


class RunOutcome(BaseModel):
    """Well-typed result handed back to the caller for every run."""

    status: RunStatus
    message: str = ""
    items: List[ExtractedItem] = Field(default_factory=list)
    cleaned_json: str = ""

    @property
    def ok(self) -> bool:
        return self.status is RunStatus.SUCCESS

    @property
    def payloads(self) -> List[str]:
        return [item.value for item in self.items]


__all__ = ["RunStatus", "ExtractedItem", "HistoryEntry", "RunOutcome"]
