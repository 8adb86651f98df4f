"""Instance-level endpoints.

Endpoints:
  - GET  /api/                        (API status)
  - GET  /api/config                  (core configuration)
  - GET  /api/error_log               (plain text)
  - POST /api/config/core/check_config
  - POST /api/template                (plain text)
"""

from __future__ import annotations

from pydantic import TypeAdapter

from hassrest import _constants as ep
from hassrest._api._common import decode_text, get_json, post_json
from hassrest._transport import Transport
from hassrest.config import HassClientConfig
from hassrest.models.requests import TemplateRequest
from hassrest.models.system import ApiStatus, ConfigCheckResult, CoreConfig

_API_STATUS = TypeAdapter(ApiStatus)
_CORE_CONFIG = TypeAdapter(CoreConfig)
_CONFIG_CHECK = TypeAdapter(ConfigCheckResult)


async def fetch_api_status(config: HassClientConfig, transport: Transport) -> ApiStatus:
    return await get_json(endpoint=ep.API_STATUS, config=config, transport=transport, adapter=_API_STATUS)


async def fetch_core_config(config: HassClientConfig, transport: Transport) -> CoreConfig:
    return await get_json(endpoint=ep.CONFIG, config=config, transport=transport, adapter=_CORE_CONFIG)


async def fetch_error_log(transport: Transport) -> str:
    """Errors logged during the current session, as plain text."""
    return decode_text(await transport.request("GET", ep.ERROR_LOG))


async def check_config(config: HassClientConfig, transport: Transport) -> ConfigCheckResult:
    """Trigger a configuration check.  Requires the ``config`` integration."""
    return await post_json(endpoint=ep.CHECK_CONFIG, config=config, transport=transport, adapter=_CONFIG_CHECK)


async def render_template(transport: Transport, request: TemplateRequest) -> str:
    """Render a template; the response is the rendered plain text."""
    body = await transport.request("POST", request.endpoint, json_body=request.to_body())
    return decode_text(body)
