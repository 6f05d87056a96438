"""Render a JSON value as deterministic, pretty-printed text."""
from __future__ import annotations

import json
import re
from typing import Any

from ..config import DEFAULT_JSON_INDENT

__all__ = ["serialize_json"]

# Paired surrogates are combined by the parser, so any left in a str are lone.
_LONE_SURROGATE_RE = re.compile("[\ud800-\udfff]")


def _escape_surrogate(m: re.Match[str]) -> str:
    return "\\u%04x" % ord(m.group())


def serialize_json(value: Any, indent: int = DEFAULT_JSON_INDENT) -> str:
    """Serialize with fixed indentation, insertion key order and no ASCII escaping.

    Lone surrogates are written as `\\uXXXX` escapes so the text stays
    encodable as UTF-8. Non-finite floats raise `ValueError`.
    """
    text = json.dumps(value, indent=indent, ensure_ascii=False, allow_nan=False)
    return _LONE_SURROGATE_RE.sub(_escape_surrogate, text)
