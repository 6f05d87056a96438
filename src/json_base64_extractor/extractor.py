"""Public facade for payload extraction and image encoding.

Callers import from here rather than from the `extraction` subpackage so the
internal module split can change without breaking imports.

Public Functions:
    run_extraction: One-shot run returning a RunOutcome (never raises)
    extract_and_clean: Raw pipeline (raises EmptyInputError / ParseError)
    find_payloads / redact_payloads: Individual traversal passes
    encode_image_file: Image file -> base64 data URL
"""
from __future__ import annotations

from typing import Optional

from .config import Settings
from .extraction.dedup import dedupe_preserving_order
from .extraction.matching import DEFAULT_MATCHER, PayloadMatcher, is_payload_entry
from .extraction.orchestrator import (
    EMPTY_INPUT_MESSAGE,
    INVALID_JSON_MESSAGE,
    ExtractionSession,
    extract_and_clean,
)
from .extraction.parsing import parse_json_text
from .extraction.sanitizer import sanitize_json_text
from .extraction.serializer import serialize_json
from .extraction.traversal import find_payloads, redact_payloads
from .image_encoder import encode_image_file, strip_data_url_prefix
from .models.extraction import RunOutcome

__all__ = [
    "run_extraction",
    "extract_and_clean",
    "ExtractionSession",
    "PayloadMatcher",
    "DEFAULT_MATCHER",
    "is_payload_entry",
    "sanitize_json_text",
    "parse_json_text",
    "find_payloads",
    "dedupe_preserving_order",
    "redact_payloads",
    "serialize_json",
    "encode_image_file",
    "strip_data_url_prefix",
    "EMPTY_INPUT_MESSAGE",
    "INVALID_JSON_MESSAGE",
]


def run_extraction(text: str, settings: Optional[Settings] = None) -> RunOutcome:
    """Run a single extraction on a throwaway session.

    Args:
        text: Raw, possibly malformed JSON text
        settings: Optional settings; built-in defaults apply when omitted

    Returns:
        RunOutcome with status success or error. Errors are never raised.
    """
    session = ExtractionSession.from_settings(settings) if settings else ExtractionSession()
    return session.run(text)
