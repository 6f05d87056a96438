"""Extract embedded base64 image payloads from JSON documents.

`extractor` is the public entry point; `python -m json_base64_extractor`
runs the command-line interface.
"""

__all__ = []
