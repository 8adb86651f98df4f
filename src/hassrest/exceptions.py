"""Custom exception hierarchy for hassrest."""

from __future__ import annotations


class HassError(Exception):
    """Base exception for all hassrest errors."""


class HassConfigError(HassError):
    """Invalid or missing configuration (bad base URL, empty token)."""


class HassTransportError(HassError):
    """HTTP-level failure (connection refused, DNS, timeout)."""

    def __init__(self, message: str, *, endpoint: str = "") -> None:
        self.endpoint = endpoint
        super().__init__(message)


class HassApiError(HassError):
    """Home Assistant answered with a non-2xx status."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        endpoint: str = "",
        upstream_message: str | None = None,
    ) -> None:
        self.status_code = status_code
        self.endpoint = endpoint
        self.upstream_message = upstream_message
        super().__init__(message)


class HassAuthenticationError(HassApiError):
    """Access token missing, invalid or revoked (HTTP 401/403)."""


class HassNotFoundError(HassApiError):
    """Unknown entity, calendar, camera or endpoint (HTTP 404)."""


class HassDeserializeError(HassError):
    """Response body does not match the expected shape.

    ``path`` is the dotted location of the first offending field
    (e.g. ``"3.last_changed"``).  It is only populated when the client
    runs with ``debug_deserialize`` enabled, so the default error stays
    cheap to build and short to log.
    """

    def __init__(
        self,
        message: str,
        *,
        endpoint: str = "",
        path: str | None = None,
    ) -> None:
        self.endpoint = endpoint
        self.path = path
        super().__init__(message)
