"""Payload match predicate shared by the extractor and the redactor.

A mapping entry matches when its key is one of the recognised payload keys
(exact string equality) and its value is a string starting with the payload
prefix. Both traversal passes call `is_payload_entry`; there is no second
definition to drift from.
"""
from __future__ import annotations

from typing import AbstractSet, Any, Iterable

from ..config import DEFAULT_PAYLOAD_KEYS, DEFAULT_PAYLOAD_PREFIX

__all__ = ["PayloadMatcher", "DEFAULT_MATCHER", "is_payload_entry"]


class PayloadMatcher:
    """Immutable key/prefix rule for recognising embedded payloads."""

    __slots__ = ("keys", "prefix")

    def __init__(
        self,
        keys: Iterable[str] = DEFAULT_PAYLOAD_KEYS,
        prefix: str = DEFAULT_PAYLOAD_PREFIX,
    ) -> None:
        if not prefix:
            raise ValueError("payload prefix must be non-empty")
        self.keys: AbstractSet[str] = frozenset(keys)
        self.prefix = prefix

    def __call__(self, key: str, value: Any) -> bool:
        return key in self.keys and isinstance(value, str) and value.startswith(self.prefix)

    def __repr__(self) -> str:
        return f"PayloadMatcher(keys={sorted(self.keys)!r}, prefix={self.prefix!r})"


DEFAULT_MATCHER = PayloadMatcher()


def is_payload_entry(key: str, value: Any) -> bool:
    """Default predicate: key `src` or `image` holding a `/9j/` string."""
    return DEFAULT_MATCHER(key, value)
