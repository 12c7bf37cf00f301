"""Helpers for safe debug logging.

Settings documents carry the map-provider key and base64 logo images, and
the storage adapter wraps every document as a JSON *string* in the
envelope's ``Data`` field.  This module redacts sensitive fields (also
inside those embedded documents) before emitting DEBUG logs.
"""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from typing import Any

_SENSITIVE_VALUE_KEYS: frozenset[str] = frozenset(
    {
        "bingmapkey",
        "authorization",
        "cookie",
        "password",
        "token",
        # Base64 logo payloads
        "image",
    }
)

# Envelope fields whose string value is itself a JSON document.
_EMBEDDED_JSON_KEYS: frozenset[str] = frozenset({"data"})


def _redact_embedded(text: str, *, max_string: int, depth: int) -> Any:
    try:
        decoded = json.loads(text)
    except ValueError:
        return redact_for_log(text, max_string=max_string, _depth=depth)
    if not isinstance(decoded, (Mapping, list)):
        return redact_for_log(text, max_string=max_string, _depth=depth)
    return redact_for_log(decoded, max_string=max_string, _depth=depth)


def redact_for_log(value: Any, *, max_string: int = 256, _depth: int = 0) -> Any:
    """Return a redacted copy of *value* suitable for debug logs.

    Embedded ``Data`` documents are decoded and redacted recursively so
    the map key or a logo image never leaks through the envelope.
    """
    if _depth > 20:
        return "<max-depth>"

    if value is None or isinstance(value, (int, float, bool)):
        return value

    if isinstance(value, str):
        if len(value) > max_string:
            return f"{value[:max_string]}…<truncated>"
        return value

    if isinstance(value, bytes):
        return f"<bytes:{len(value)}b>"

    if isinstance(value, Mapping):
        redacted: dict[str, Any] = {}
        for k, v in value.items():
            key = str(k)
            lowered = key.lower()
            if lowered in _SENSITIVE_VALUE_KEYS:
                redacted[key] = "<redacted>" if v is not None else None
            elif lowered in _EMBEDDED_JSON_KEYS and isinstance(v, str):
                redacted[key] = _redact_embedded(v, max_string=max_string, depth=_depth + 1)
            else:
                redacted[key] = redact_for_log(v, max_string=max_string, _depth=_depth + 1)
        return redacted

    if isinstance(value, Sequence) and not isinstance(value, bytearray):
        return [redact_for_log(v, max_string=max_string, _depth=_depth + 1) for v in value]

    return repr(value)
