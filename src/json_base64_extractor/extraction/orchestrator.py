"""Extraction run pipeline and the session state machine around it.

Pipeline order for one run:
    empty check -> sanitize -> parse -> find payloads -> dedupe -> redact -> serialize

`extract_and_clean` is the pure pipeline; it raises `EmptyInputError` or
`ParseError`. `ExtractionSession` owns everything that outlives a single call
(status, published items, cleaned text, history, copy feedback) and converts
errors into a `RunOutcome` so callers always receive a typed result.

State machine:
    idle/success/error -> running           new run requested
    running -> error                        empty input, or sanitize+parse failure
    running -> success                      parse succeeded; results + history published

Every transition replaces the previous run's data products wholesale; an error
clears items and cleaned text from the prior success.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, List, Optional, Tuple

from ..clipboard import CopyFeedback, Scheduler, copy_text
from ..config import (
    DEFAULT_COPY_FEEDBACK_SECONDS,
    DEFAULT_HISTORY_LIMIT,
    DEFAULT_JSON_INDENT,
    Settings,
)
from ..errors import ClipboardError, EmptyInputError, ParseError
from ..history import RunHistory
from ..models.extraction import ExtractedItem, HistoryEntry, RunOutcome, RunStatus
from .dedup import dedupe_preserving_order
from .matching import DEFAULT_MATCHER, PayloadMatcher
from .parsing import parse_json_text
from .sanitizer import sanitize_json_text
from .serializer import serialize_json
from .traversal import find_payloads, redact_payloads

__all__ = [
    "EMPTY_INPUT_MESSAGE",
    "INVALID_JSON_MESSAGE",
    "ExtractionSession",
    "extract_and_clean",
    "success_message",
]

logger = logging.getLogger(__name__)

EMPTY_INPUT_MESSAGE = "JSON input cannot be empty."
INVALID_JSON_MESSAGE = "Invalid JSON format. Please check your input."


def success_message(count: int) -> str:
    return f"Extracted {count} unique payload(s)."


def extract_and_clean(
    text: str,
    *,
    matcher: PayloadMatcher = DEFAULT_MATCHER,
    indent: int = DEFAULT_JSON_INDENT,
) -> Tuple[List[str], str]:
    """Run the full pipeline on `text`.

    Returns:
        (distinct payloads in first-seen order, cleaned JSON text)

    Raises:
        EmptyInputError: `text` is empty or whitespace only
        ParseError: sanitized text is not valid JSON
    """
    if not text or not text.strip():
        raise EmptyInputError("input text is empty")
    parsed: Any = parse_json_text(sanitize_json_text(text))
    payloads = dedupe_preserving_order(find_payloads(parsed, matcher))
    cleaned = redact_payloads(parsed, matcher)
    try:
        cleaned_text = serialize_json(cleaned, indent=indent)
    except RecursionError as e:
        raise ParseError("document nesting exceeds serializer capacity", e) from e
    except ValueError as e:
        raise ParseError(f"value has no JSON representation: {e}", e) from e
    return payloads, cleaned_text


class ExtractionSession:
    """Owns the state of successive extraction runs for one caller."""

    def __init__(
        self,
        *,
        matcher: PayloadMatcher = DEFAULT_MATCHER,
        indent: int = DEFAULT_JSON_INDENT,
        history_limit: int = DEFAULT_HISTORY_LIMIT,
        copy_feedback_seconds: float = DEFAULT_COPY_FEEDBACK_SECONDS,
        scheduler: Optional[Scheduler] = None,
        clipboard_writer: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.matcher = matcher
        self.indent = indent
        self.history = RunHistory(limit=history_limit)
        self.copy_feedback_seconds = copy_feedback_seconds
        self._scheduler = scheduler
        self._clipboard_writer = clipboard_writer
        self.status = RunStatus.IDLE
        self.message = ""
        self.items: List[ExtractedItem] = []
        self.cleaned_json = ""
        self.json_copied = False

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs: Any) -> "ExtractionSession":
        return cls(
            matcher=PayloadMatcher(settings.PAYLOAD_KEYS, settings.PAYLOAD_PREFIX),
            indent=settings.JSON_INDENT,
            history_limit=settings.HISTORY_LIMIT,
            copy_feedback_seconds=settings.COPY_FEEDBACK_SECONDS,
            **kwargs,
        )

    # ------------------------------------------------------------------ runs
    def run(self, text: str) -> RunOutcome:
        """Execute one run and publish its outcome, replacing prior state."""
        self._clear()
        try:
            payloads, cleaned_text = extract_and_clean(
                text, matcher=self.matcher, indent=self.indent
            )
        except EmptyInputError:
            logger.info("Extraction rejected: empty input")
            return self._fail(EMPTY_INPUT_MESSAGE)
        except ParseError as e:
            logger.warning("Extraction failed: invalid JSON (%s)", e.reason)
            return self._fail(INVALID_JSON_MESSAGE)

        self.items = [ExtractedItem(id=i, value=v) for i, v in enumerate(payloads)]
        self.cleaned_json = cleaned_text
        self.status = RunStatus.SUCCESS
        self.message = success_message(len(self.items))
        self.history.add(cleaned_text)
        logger.info(
            "Extraction succeeded: %d distinct payload(s), cleaned length=%d",
            len(self.items),
            len(cleaned_text),
        )
        return self.outcome()

    def reset(self) -> None:
        """Return to idle without touching history."""
        self._clear()
        self.status = RunStatus.IDLE

    def outcome(self) -> RunOutcome:
        return RunOutcome(
            status=self.status,
            message=self.message,
            items=[item.model_copy() for item in self.items],
            cleaned_json=self.cleaned_json,
        )

    def _clear(self) -> None:
        self.message = ""
        self.items = []
        self.cleaned_json = ""

    def _fail(self, message: str) -> RunOutcome:
        self.status = RunStatus.ERROR
        self.message = message
        return self.outcome()

    # ------------------------------------------------------------- lookups
    def get_item(self, item_id: int) -> Optional[ExtractedItem]:
        if 0 <= item_id < len(self.items):
            return self.items[item_id]
        return None

    # --------------------------------------------------------------- copy
    def _feedback(self, on_change: Callable[[bool], None]) -> CopyFeedback:
        return CopyFeedback(
            delay=self.copy_feedback_seconds,
            scheduler=self._scheduler,
            on_change=on_change,
        )

    def _copy(self, text: str, what: str) -> bool:
        try:
            copy_text(text, writer=self._clipboard_writer)
        except ClipboardError as e:
            logger.warning("Failed to copy %s: %s", what, e)
            return False
        return True

    def copy_item(self, item_id: int) -> bool:
        """Copy one extracted payload; sets the item's transient copied flag."""
        item = self.get_item(item_id)
        if item is None:
            logger.warning("No extracted item with id %s", item_id)
            return False
        if not self._copy(item.value, f"payload {item_id}"):
            return False
        self._feedback(lambda v: setattr(item, "copied", v)).trigger()
        return True

    def copy_cleaned_json(self) -> bool:
        if not self.cleaned_json:
            logger.warning("No cleaned JSON to copy")
            return False
        if not self._copy(self.cleaned_json, "cleaned JSON"):
            return False
        self._feedback(lambda v: setattr(self, "json_copied", v)).trigger()
        return True

    def copy_history_entry(self, entry_id: int) -> bool:
        entry: Optional[HistoryEntry] = self.history.get(entry_id)
        if entry is None:
            logger.warning("No history entry with id %s", entry_id)
            return False
        if not self._copy(entry.cleaned_json, f"history entry {entry_id}"):
            return False
        self._feedback(lambda v: setattr(entry, "copied", v)).trigger()
        return True
