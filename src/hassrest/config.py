"""Client configuration for hassrest."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from yarl import URL

from hassrest._constants import DEFAULT_TIMEOUT, USER_AGENT
from hassrest.exceptions import HassConfigError

_ALLOWED_SCHEMES = frozenset({"http", "https"})


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


def parse_base_url(raw: str) -> URL:
    """Parse and validate the Home Assistant base URL.

    Raises :class:`HassConfigError` when the URL cannot be parsed, uses
    a scheme other than ``http``/``https``, has no host, or carries a
    query string or fragment.
    """
    text = raw.strip() if isinstance(raw, str) else ""
    if not text:
        raise HassConfigError("base_url must be a non-empty URL")
    try:
        url = URL(text)
    except (TypeError, ValueError) as exc:
        raise HassConfigError(f"Unable to parse the URL {raw!r}: {exc}") from exc
    if url.scheme not in _ALLOWED_SCHEMES:
        raise HassConfigError(f"Unable to parse the URL {raw!r}: scheme must be http or https")
    if not url.host:
        raise HassConfigError(f"Unable to parse the URL {raw!r}: missing host")
    if url.query_string or url.fragment:
        raise HassConfigError(f"Unable to parse the URL {raw!r}: query and fragment are not allowed")
    return url


@dataclasses.dataclass(frozen=True)
class HassClientConfig:
    """Client configuration.

    Parameters
    ----------
    base_url : str
        Base URL of the Home Assistant instance, e.g.
        ``"http://homeassistant.local:8123"``.  A path prefix is kept
        (useful behind a reverse proxy).
    token : str
        Long-lived access token, sent as ``Authorization: Bearer``.
    timeout : float
        Total per-request timeout in seconds, handed to aiohttp.
        ``0`` disables the timeout.
    verify_ssl : bool
        Verify TLS certificates.  Disable for self-signed instances.
    debug_deserialize : bool
        Attach the field path of the first failing field to
        :class:`~hassrest.exceptions.HassDeserializeError`.
    user_agent : str
        ``User-Agent`` header value.
    """

    base_url: str
    token: str
    timeout: float = DEFAULT_TIMEOUT
    verify_ssl: bool = True
    debug_deserialize: bool = False
    user_agent: str = USER_AGENT

    def __post_init__(self) -> None:
        parse_base_url(self.base_url)
        if not isinstance(self.token, str) or not self.token.strip():
            raise HassConfigError("token must be a non-empty string")
        if self.timeout < 0:
            raise HassConfigError(f"timeout must be >= 0, got {self.timeout}")

    @property
    def url(self) -> URL:
        """Validated base URL."""
        return parse_base_url(self.base_url)

    @classmethod
    def from_env(cls, **overrides: Any) -> HassClientConfig:
        """Create configuration from environment variables.

        Reads ``HASS_URL`` and ``HASS_TOKEN`` plus the optional
        ``HASS_TIMEOUT``, ``HASS_VERIFY_SSL`` and
        ``HASS_DEBUG_DESERIALIZE``.  Explicit keyword arguments
        override environment values.

        Raises
        ------
        HassConfigError
            If the URL or token is missing or invalid.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        for env_key, field_name in (("HASS_URL", "base_url"), ("HASS_TOKEN", "token")):
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        timeout_env = env.get("HASS_TIMEOUT")
        if timeout_env is not None and "timeout" not in overrides:
            try:
                config_kwargs["timeout"] = float(timeout_env)
            except ValueError as exc:
                raise HassConfigError(f"HASS_TIMEOUT is not a number: {timeout_env!r}") from exc

        if "verify_ssl" not in overrides:
            config_kwargs["verify_ssl"] = _env_bool(env.get("HASS_VERIFY_SSL"), True)

        if "debug_deserialize" not in overrides:
            config_kwargs["debug_deserialize"] = _env_bool(env.get("HASS_DEBUG_DESERIALIZE"), False)

        config_kwargs.update(overrides)

        for required, env_key in (("base_url", "HASS_URL"), ("token", "HASS_TOKEN")):
            if required not in config_kwargs:
                raise HassConfigError(f"{env_key} is not set")

        return cls(**config_kwargs)
