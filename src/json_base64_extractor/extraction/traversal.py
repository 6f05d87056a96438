"""Extractor and redactor passes over a parsed JSON value.

Both passes walk depth-first, pre-order: array elements in index order,
mapping entries in insertion order. They use an explicit work stack instead
of recursion so nesting depth is bounded by memory, not by the interpreter's
recursion limit. Neither pass mutates its input; the redactor always builds
fresh containers.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple, Union, cast

from .matching import DEFAULT_MATCHER, PayloadMatcher

__all__ = ["find_payloads", "redact_payloads", "REDACTED_VALUE"]

REDACTED_VALUE = ""

_Container = Union[Dict[str, Any], List[Any]]


def find_payloads(value: Any, matcher: PayloadMatcher = DEFAULT_MATCHER) -> List[str]:
    """Collect every matching payload string in traversal order (duplicates kept)."""
    results: List[str] = []
    # (key, value) work items; key is None for array elements and the root.
    stack: List[Tuple[Optional[str], Any]] = [(None, value)]
    while stack:
        key, node = stack.pop()
        if key is not None and matcher(key, node):
            results.append(node)
        elif isinstance(node, list):
            stack.extend((None, item) for item in reversed(node))
        elif isinstance(node, dict):
            stack.extend(reversed(list(node.items())))
    return results


def _empty_like(node: _Container) -> _Container:
    return [] if isinstance(node, list) else {}


def redact_payloads(value: Any, matcher: PayloadMatcher = DEFAULT_MATCHER) -> Any:
    """Return a structural copy of `value` with matching payloads replaced by ``""``.

    Scalars and null are returned as-is. Key order and all non-matching
    values are preserved.
    """
    if not isinstance(value, (dict, list)):
        return value
    root = _empty_like(value)
    stack: List[Tuple[_Container, _Container]] = [(value, root)]
    while stack:
        src, dst = stack.pop()
        if isinstance(src, list):
            out_list = cast(List[Any], dst)
            for item in src:
                if isinstance(item, (dict, list)):
                    child = _empty_like(item)
                    stack.append((item, child))
                    out_list.append(child)
                else:
                    out_list.append(item)
        else:
            new_d = cast(Dict[str, Any], dst)
            for k, v in src.items():
                if matcher(k, v):
                    new_d[k] = REDACTED_VALUE
                elif isinstance(v, (dict, list)):
                    child = _empty_like(v)
                    stack.append((v, child))
                    new_d[k] = child
                else:
                    new_d[k] = v
    return root
