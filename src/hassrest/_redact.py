"""Helpers for safe debug logging.

Home Assistant access tokens are JWTs and travel in the
``Authorization`` header; entity attributes and service data set by
users may hold passwords.  :func:`redact_for_log` masks both before a
request or response is written to a DEBUG log.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from typing import Any

_SENSITIVE_VALUE_KEYS: frozenset[str] = frozenset(
    {
        "authorization",
        "access_token",
        "refresh_token",
        "token",
        "api_password",
        "password",
        "cookie",
        "x-ha-access",
    }
)

_MAX_DEPTH = 20

# "Bearer <token>" and bare JWTs (three base64url segments).
_BEARER_RE = re.compile(r"(?i)\bbearer\s+\S+")
_JWT_RE = re.compile(r"\beyJ[\w-]+\.[\w-]+\.[\w-]+")


def _redact_text(text: str, max_string: int) -> str:
    text = _BEARER_RE.sub("Bearer <redacted>", text)
    text = _JWT_RE.sub("<redacted-jwt>", text)
    if len(text) > max_string:
        return f"{text[:max_string]}…<truncated>"
    return text


def redact_for_log(value: Any, *, max_string: int = 512, _depth: int = 0) -> Any:
    """Return a redacted copy of *value* suitable for debug logs.

    Mapping values under a sensitive key are replaced wholesale; tokens
    embedded in free text are masked in place.
    """
    if _depth > _MAX_DEPTH:
        return "<max-depth>"

    match value:
        case None | bool() | int() | float():
            return value
        case str():
            return _redact_text(value, max_string)
        case bytes() | bytearray():
            return f"<bytes:{len(value)}b>"
        case Mapping():
            return {
                str(k): "<redacted>"
                if str(k).lower() in _SENSITIVE_VALUE_KEYS
                else redact_for_log(v, max_string=max_string, _depth=_depth + 1)
                for k, v in value.items()
            }
        case Sequence():
            return [redact_for_log(v, max_string=max_string, _depth=_depth + 1) for v in value]
    return repr(value)


def preview_body(body: bytes, limit: int = 200) -> str:
    """Decode the first *limit* bytes of a response body for logging."""
    return redact_for_log(body[:limit].decode("utf-8", errors="replace"), max_string=limit)
