"""Image file to base64 data URL conversion (secondary, pass-through path).

No decoding or transcoding happens here: the file's bytes are base64-encoded
verbatim and prefixed with a `data:` URL header carrying the guessed mime type.
"""
from __future__ import annotations

import base64
import binascii
import logging
import mimetypes
import re
from pathlib import Path
from typing import Optional, Union

from .errors import FileReadError

__all__ = ["encode_image_bytes", "encode_image_file", "strip_data_url_prefix"]

logger = logging.getLogger(__name__)

_FALLBACK_MIME = "application/octet-stream"
_DATA_URL_RE = re.compile(r"^data:(?P<mime>[^;,]*)(?:;[^,]*)?;base64,", re.IGNORECASE)


def encode_image_bytes(content: bytes, mime_type: Optional[str] = None) -> str:
    payload = base64.b64encode(content).decode("ascii")
    return f"data:{mime_type or _FALLBACK_MIME};base64,{payload}"


def encode_image_file(path: Union[str, Path]) -> str:
    """Read `path` and return it as a `data:<mime>;base64,<payload>` string.

    Raises:
        FileReadError: the file does not exist or could not be read
    """
    p = Path(path)
    try:
        content = p.read_bytes()
    except OSError as e:
        logger.error("Failed reading image file %s: %s", p, e)
        raise FileReadError(f"cannot read {p}: {e.strerror or e}") from e
    mime, _ = mimetypes.guess_type(p.name)
    logger.debug("Encoded %s (%d bytes, mime=%s)", p, len(content), mime)
    return encode_image_bytes(content, mime)


def strip_data_url_prefix(data_url: str) -> str:
    """Return the bare base64 portion of a data URL.

    Strings without a data URL header are returned unchanged. The remainder is
    validated as base64 so a truncated paste is caught early.
    """
    m = _DATA_URL_RE.match(data_url)
    if not m:
        return data_url
    payload = data_url[m.end():]
    try:
        base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ValueError(f"data URL does not carry valid base64: {e}") from e
    return payload
