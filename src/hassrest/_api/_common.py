"""Shared helpers for Home Assistant endpoint modules.

This module centralizes the repeated patterns:
- issuing a request through the transport
- decoding a JSON body into a typed model via a pydantic ``TypeAdapter``
- turning validation failures into :class:`HassDeserializeError`

It is internal to hassrest and may change at any time.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from hassrest._transport import Transport
from hassrest.config import HassClientConfig
from hassrest.exceptions import HassDeserializeError

_logger = logging.getLogger(__name__)

T = TypeVar("T")


def format_error_path(loc: tuple[int | str, ...]) -> str | None:
    """Render a pydantic error location as ``"3.last_changed"``."""
    if not loc:
        return None
    return ".".join(str(part) for part in loc)


def decode_body(
    adapter: TypeAdapter[T],
    body: bytes,
    *,
    endpoint: str,
    debug: bool = False,
) -> T:
    """Validate a JSON *body* against *adapter*.

    Raises
    ------
    HassDeserializeError
        If the body is not JSON or does not match the expected shape.
        With *debug* enabled the error carries the path of the first
        failing field.
    """
    try:
        return adapter.validate_json(body)
    except ValidationError as exc:
        first = exc.errors(include_url=False)[0]
        reason = first.get("msg", "invalid value")
        if not debug:
            raise HassDeserializeError(
                f"Unable to deserialize the response from {endpoint}: {reason}",
                endpoint=endpoint,
            ) from exc

        path = format_error_path(tuple(first.get("loc", ())))
        _logger.debug("Decode of %s failed at %s: %s", endpoint, path or "<root>", reason)
        where = f" at {path}" if path else ""
        raise HassDeserializeError(
            f"Unable to deserialize the response from {endpoint}{where}: {reason} "
            f"({exc.error_count()} error(s))",
            endpoint=endpoint,
            path=path,
        ) from exc


def decode_text(body: bytes) -> str:
    return body.decode("utf-8", errors="replace")


async def get_json(
    *,
    endpoint: str,
    config: HassClientConfig,
    transport: Transport,
    adapter: TypeAdapter[T],
    params: Mapping[str, str] | None = None,
) -> T:
    """GET *endpoint* and decode the JSON body."""
    body = await transport.request("GET", endpoint, params=params)
    return decode_body(adapter, body, endpoint=endpoint, debug=config.debug_deserialize)


async def post_json(
    *,
    endpoint: str,
    config: HassClientConfig,
    transport: Transport,
    adapter: TypeAdapter[T],
    json_body: Any = None,
) -> T:
    """POST *json_body* to *endpoint* and decode the JSON body."""
    body = await transport.request("POST", endpoint, json_body=json_body)
    return decode_body(adapter, body, endpoint=endpoint, debug=config.debug_deserialize)
