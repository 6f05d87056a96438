"""Error taxonomy for extraction runs and their edge operations.

Core errors (`EmptyInputError`, `ParseError`) are raised internally by the
pipeline and converted into a `RunOutcome` by the session; they never cross
the public boundary. Edge errors (`ClipboardError`, `FileReadError`) are
reported via logging and do not affect run state.
"""
from __future__ import annotations

from typing import Optional

__all__ = [
    "ExtractorError",
    "EmptyInputError",
    "ParseError",
    "ClipboardError",
    "FileReadError",
]


class ExtractorError(Exception):
    """Base class for all errors raised by this package."""


class EmptyInputError(ExtractorError):
    """Input text is empty or whitespace only."""


class ParseError(ExtractorError):
    """Sanitized text could not be parsed as JSON.

    `reason` carries the underlying parser diagnostic for logging only.
    """

    def __init__(self, reason: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(reason)
        self.reason = reason
        self.cause = cause


class ClipboardError(ExtractorError):
    """Writing to the platform clipboard failed."""


class FileReadError(ExtractorError):
    """A user supplied file could not be read."""
