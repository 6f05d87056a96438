from __future__ import annotations

import pytest

from json_base64_extractor.extraction.dedup import dedupe_preserving_order
from json_base64_extractor.extraction.serializer import serialize_json


def test_dedupe_keeps_first_occurrence_order():
    xs = ["/9j/B", "/9j/A", "/9j/B", "/9j/C", "/9j/A"]
    assert dedupe_preserving_order(xs) == ["/9j/B", "/9j/A", "/9j/C"]


def test_dedupe_uses_exact_equality():
    xs = ["/9j/abc", "/9j/ABC", "/9j/abc ", "/9j/abc"]
    assert dedupe_preserving_order(xs) == ["/9j/abc", "/9j/ABC", "/9j/abc "]


def test_dedupe_is_idempotent():
    xs = ["a", "b", "a", "c", "b"]
    once = dedupe_preserving_order(xs)
    assert dedupe_preserving_order(once) == once
    assert dedupe_preserving_order([]) == []


def test_serializer_two_space_indent_and_insertion_order():
    value = {"b": 1, "a": [1, 2], "e": {}, "l": []}
    assert serialize_json(value) == (
        '{\n  "b": 1,\n  "a": [\n    1,\n    2\n  ],\n  "e": {},\n  "l": []\n}'
    )


def test_serializer_keeps_non_ascii_and_escapes_controls():
    out = serialize_json({"name": "café", "s": 'quote " and\nnewline'})
    assert "café" in out
    assert '"quote \\" and\\nnewline"' in out


def test_serializer_scalars():
    assert serialize_json(None) == "null"
    assert serialize_json(42) == "42"
    assert serialize_json("") == '""'


def test_serializer_escapes_lone_surrogates():
    assert serialize_json({"s": "a\ud800b"}) == '{\n  "s": "a\\ud800b"\n}'
    assert serialize_json(["\udfff"], indent=0) == '[\n"\\udfff"\n]'


def test_serializer_refuses_non_finite_floats():
    with pytest.raises(ValueError):
        serialize_json({"n": float("inf")})
