"""Best-effort repair of trailing commas before JSON parsing.

Removes a comma that is followed (across optional whitespace) by `}` or `]`,
and a single comma at the very end of the trimmed text. The rule is textual:
commas inside string literals that happen to precede a closing bracket are
stripped as well. That limitation is kept on purpose (see DESIGN.md).
"""
from __future__ import annotations

import re

__all__ = ["sanitize_json_text"]

_TRAILING_COMMA_RE = re.compile(r",\s*([}\]])")


def sanitize_json_text(text: str) -> str:
    cleaned = _TRAILING_COMMA_RE.sub(r"\1", text)
    trimmed = cleaned.strip()
    if trimmed.endswith(","):
        return trimmed[:-1]
    return cleaned
