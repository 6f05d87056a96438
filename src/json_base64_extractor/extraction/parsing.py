"""Strict JSON parsing of sanitized text.

`json.loads` accepts `NaN`, `Infinity` and `-Infinity` by default; those are
rejected here so only standard JSON parses. Number literals that overflow a
float (e.g. `1e400`) are valid JSON but have no finite value; they become
null, the same result a browser's `JSON.stringify` gives for them. Excessive
nesting that exhausts the interpreter's recursion capacity is reported as a
parse failure rather than escaping as `RecursionError`.
"""
from __future__ import annotations

import json
import math
from typing import Any, Optional

from ..errors import ParseError

__all__ = ["parse_json_text"]


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant {name!r}")


def _finite_float(literal: str) -> Optional[float]:
    value = float(literal)
    return value if math.isfinite(value) else None


def parse_json_text(text: str) -> Any:
    try:
        return json.loads(text, parse_constant=_reject_constant, parse_float=_finite_float)
    except json.JSONDecodeError as e:
        raise ParseError(f"{e.msg} (line {e.lineno} column {e.colno})", e) from e
    except ValueError as e:
        raise ParseError(str(e), e) from e
    except RecursionError as e:
        raise ParseError("document nesting exceeds recursion capacity", e) from e
