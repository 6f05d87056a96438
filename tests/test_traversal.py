from __future__ import annotations

import copy
import json
import re

from json_base64_extractor.extraction.matching import PayloadMatcher, is_payload_entry
from json_base64_extractor.extraction.traversal import find_payloads, redact_payloads

SPEC_DOC = {
    "a": {"src": "/9j/AAA"},
    "b": [{"image": "/9j/AAA"}, {"src": "/9j/BBB"}],
}


def test_predicate_requires_recognised_key_and_prefix():
    assert is_payload_entry("src", "/9j/abc")
    assert is_payload_entry("image", "/9j/")
    assert not is_payload_entry("SRC", "/9j/abc")
    assert not is_payload_entry("thumbnail", "/9j/abc")
    assert not is_payload_entry("src", "iVBORw0KGgo")
    assert not is_payload_entry("src", " /9j/abc")
    assert not is_payload_entry("src", None)
    assert not is_payload_entry("src", ["/9j/abc"])


def test_custom_matcher_keys_and_prefix():
    matcher = PayloadMatcher(keys=["thumb"], prefix="iVBOR")
    assert matcher("thumb", "iVBORw0KGgo")
    assert not matcher("src", "/9j/abc")


def test_find_payloads_keeps_duplicates_in_traversal_order():
    assert find_payloads(SPEC_DOC) == ["/9j/AAA", "/9j/AAA", "/9j/BBB"]


def test_find_payloads_is_preorder_over_mapping_entries():
    doc = {
        "first": {"src": "/9j/X"},
        "src": "/9j/Y",
        "rest": [[{"image": "/9j/Z"}], {"src": "/9j/W"}],
    }
    assert find_payloads(doc) == ["/9j/X", "/9j/Y", "/9j/Z", "/9j/W"]


def test_array_elements_and_scalars_never_match():
    assert find_payloads(["/9j/A", "/9j/B"]) == []
    assert find_payloads("/9j/A") == []
    assert find_payloads(None) == []
    assert find_payloads(3.5) == []


def test_recognised_key_with_container_value_is_descended():
    doc = {"src": {"src": "/9j/inner"}}
    assert find_payloads(doc) == ["/9j/inner"]
    assert redact_payloads(doc) == {"src": {"src": ""}}


def test_redact_replaces_matches_and_preserves_everything_else():
    doc = {
        "id": 7,
        "ok": True,
        "none": None,
        "src": "/9j/AAA",
        "image": "http://example.com/a.jpg",
        "items": [{"image": "/9j/BBB", "caption": "c"}, 1, "two"],
    }
    assert redact_payloads(doc) == {
        "id": 7,
        "ok": True,
        "none": None,
        "src": "",
        "image": "http://example.com/a.jpg",
        "items": [{"image": "", "caption": "c"}, 1, "two"],
    }


def test_redact_preserves_key_order():
    doc = {"z": 1, "src": "/9j/A", "a": {"y": 2, "image": "/9j/B", "b": 3}}
    out = redact_payloads(doc)
    assert list(out) == ["z", "src", "a"]
    assert list(out["a"]) == ["y", "image", "b"]


def test_redact_does_not_mutate_and_builds_new_containers():
    original = copy.deepcopy(SPEC_DOC)
    out = redact_payloads(SPEC_DOC)
    assert SPEC_DOC == original
    assert out is not SPEC_DOC
    assert out["a"] is not SPEC_DOC["a"]
    assert out["b"] is not SPEC_DOC["b"]
    assert out["b"][1] is not SPEC_DOC["b"][1]


def test_no_matches_yields_empty_list_and_equal_copy():
    doc = {"a": [1, {"b": "c"}, None], "src": "data:image/png;base64,xyz"}
    assert find_payloads(doc) == []
    assert redact_payloads(doc) == doc


def test_scalar_roots_pass_through_redaction():
    assert redact_payloads("/9j/A") == "/9j/A"
    assert redact_payloads(None) is None
    assert redact_payloads(False) is False


def test_redaction_is_exhaustive_in_serialized_output():
    text = json.dumps(redact_payloads(SPEC_DOC))
    assert not re.search(r'"(src|image)":\s*"/9j/', text)


def test_deep_nesting_beyond_recursion_limit():
    node = {"src": "/9j/deep"}
    for _ in range(5000):
        node = {"child": [node]}
    assert find_payloads(node) == ["/9j/deep"]
    out = redact_payloads(node)
    cursor = out
    for _ in range(5000):
        cursor = cursor["child"][0]
    assert cursor == {"src": ""}
