"""Internal extraction subpackage for the payload pipeline.

All functions within this package are pure (no I/O) and deterministic, with
the exception of `orchestrator.ExtractionSession`, which holds per-caller run
state. The public API lives in the top-level `extractor.py` facade.

Modules:
    sanitizer: Trailing-comma repair before parsing
    parsing: Strict JSON parse with typed failure
    matching: Shared payload key/prefix predicate
    traversal: Payload extraction and redaction passes
    dedup: First-seen order deduplication
    serializer: Deterministic pretty-printed output
    orchestrator: Pipeline sequencing and session state machine

Design Invariants:
    - Redaction output is isomorphic to the input except matched values become ""
    - Extraction order is depth-first pre-order, arrays by index, mappings by insertion
    - Parsed input is never mutated
"""
from __future__ import annotations

from . import matching as matching  # noqa: F401
from . import sanitizer as sanitizer  # noqa: F401
from . import traversal as traversal  # noqa: F401

__all__ = ["matching", "sanitizer", "traversal"]
