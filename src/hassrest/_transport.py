"""HTTP transport: bearer authentication and status-code mapping."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any, Protocol

import aiohttp

from hassrest._constants import ERROR_BODY_PREVIEW
from hassrest._redact import preview_body, redact_for_log
from hassrest.config import HassClientConfig
from hassrest.exceptions import (
    HassApiError,
    HassAuthenticationError,
    HassNotFoundError,
    HassTransportError,
)

_logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Structural transport interface used by endpoint modules.

    Having a protocol here makes it easy to pass test doubles while
    keeping the production implementation (`HttpTransport`) concrete.
    """

    async def request(
        self,
        method: str,
        endpoint: str,
        *,
        params: Mapping[str, str] | None = None,
        json_body: Any = None,
    ) -> bytes:
        ...


def _upstream_message(body: bytes) -> str | None:
    """Extract ``message`` from a JSON error payload, if there is one."""
    try:
        payload = json.loads(body)
    except (UnicodeDecodeError, json.JSONDecodeError):
        return None
    if isinstance(payload, dict) and isinstance(payload.get("message"), str):
        return payload["message"]
    return None


def raise_for_status(status: int, body: bytes, endpoint: str) -> None:
    """Raise the matching :class:`HassApiError` for a non-2xx *status*."""
    if 200 <= status < 300:
        return

    upstream = _upstream_message(body)
    detail = upstream if upstream is not None else preview_body(body, ERROR_BODY_PREVIEW)
    message = f"HTTP {status} from {endpoint}: {detail}"

    error_cls: type[HassApiError] = HassApiError
    if status in (401, 403):
        error_cls = HassAuthenticationError
    elif status == 404:
        error_cls = HassNotFoundError
    raise error_cls(message, status_code=status, endpoint=endpoint, upstream_message=upstream)


class HttpTransport:
    """aiohttp transport that authenticates every request with the access token."""

    def __init__(self, config: HassClientConfig, http_session: aiohttp.ClientSession) -> None:
        self._config = config
        self._http = http_session
        self._base_url = str(config.url).rstrip("/")
        self._timeout = aiohttp.ClientTimeout(total=config.timeout or None)
        self._headers: dict[str, str] = {
            "authorization": f"Bearer {config.token}",
            "content-type": "application/json",
            "user-agent": config.user_agent,
        }

    async def request(
        self,
        method: str,
        endpoint: str,
        *,
        params: Mapping[str, str] | None = None,
        json_body: Any = None,
    ) -> bytes:
        """Send one request and return the raw response body.

        Raises
        ------
        HassTransportError
            Connection failure or timeout.
        HassApiError
            Non-2xx status (:class:`HassAuthenticationError` for 401/403,
            :class:`HassNotFoundError` for 404).
        """
        url = f"{self._base_url}{endpoint}"
        data = None if json_body is None else json.dumps(json_body, separators=(",", ":"))

        _logger.debug(
            "%s %s params=%s body=%s",
            method,
            url,
            dict(params) if params else {},
            redact_for_log(json_body),
        )

        kwargs: dict[str, Any] = {}
        if not self._config.verify_ssl:
            kwargs["ssl"] = False

        try:
            async with self._http.request(
                method,
                url,
                params=params,
                data=data,
                headers=self._headers,
                timeout=self._timeout,
                **kwargs,
            ) as resp:
                status = resp.status
                body = await resp.read()
        except aiohttp.ClientError as exc:
            raise HassTransportError(f"Request to {endpoint} failed: {exc}", endpoint=endpoint) from exc
        except TimeoutError as exc:
            raise HassTransportError(f"Request to {endpoint} timed out", endpoint=endpoint) from exc

        _logger.debug("%s %s -> HTTP %d (%d bytes)", method, endpoint, status, len(body))
        raise_for_status(status, body, endpoint)
        return body
