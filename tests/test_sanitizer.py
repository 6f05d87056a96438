from __future__ import annotations

import json

from json_base64_extractor.extraction.sanitizer import sanitize_json_text


def test_trailing_comma_before_brace_removed():
    assert sanitize_json_text('{"x":1,}') == '{"x":1}'


def test_trailing_comma_before_bracket_across_whitespace():
    assert sanitize_json_text("[1, 2 ,\n  ]") == "[1, 2 ]"


def test_nested_trailing_commas_all_removed():
    raw = '{"a": [1, 2,], "b": {"c": 3,},}'
    cleaned = sanitize_json_text(raw)
    assert json.loads(cleaned) == {"a": [1, 2], "b": {"c": 3}}


def test_single_trailing_comma_at_end_of_text_removed():
    assert sanitize_json_text('{"a":1},') == '{"a":1}'
    assert json.loads(sanitize_json_text('  {"a":1} ,  ')) == {"a": 1}


def test_valid_json_passes_through_unchanged():
    raw = '{"a": [1, 2], "s": "x, y"}'
    assert sanitize_json_text(raw) == raw


def test_incomplete_json_is_not_repaired():
    assert sanitize_json_text('{"x":') == '{"x":'


def test_comma_inside_string_before_bracket_is_stripped():
    # Textual rule: string contents are not protected.
    assert sanitize_json_text('{"s": "a,]"}') == '{"s": "a]"}'
