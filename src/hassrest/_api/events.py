"""Event and service endpoints.

Endpoints:
  - GET  /api/events
  - POST /api/events/<event_type>
  - GET  /api/services
  - POST /api/services/<domain>/<service>
"""

from __future__ import annotations

import logging

from pydantic import TypeAdapter

from hassrest import _constants as ep
from hassrest._api._common import get_json, post_json
from hassrest._transport import Transport
from hassrest.config import HassClientConfig
from hassrest.models.entity import EntityState
from hassrest.models.events import EventListener, MessageResponse, ServiceDomain
from hassrest.models.requests import FireEventRequest, ServiceCallRequest

_logger = logging.getLogger(__name__)

_EVENT_LISTENERS = TypeAdapter(list[EventListener])
_SERVICE_DOMAINS = TypeAdapter(list[ServiceDomain])
_MESSAGE = TypeAdapter(MessageResponse)
_CHANGED_STATES = TypeAdapter(list[EntityState])


async def fetch_events(config: HassClientConfig, transport: Transport) -> list[EventListener]:
    return await get_json(endpoint=ep.EVENTS, config=config, transport=transport, adapter=_EVENT_LISTENERS)


async def fetch_services(config: HassClientConfig, transport: Transport) -> list[ServiceDomain]:
    return await get_json(endpoint=ep.SERVICES, config=config, transport=transport, adapter=_SERVICE_DOMAINS)


async def fire_event(
    config: HassClientConfig,
    transport: Transport,
    request: FireEventRequest,
) -> MessageResponse:
    _logger.debug("Firing event %s", request.event_type)
    return await post_json(
        endpoint=request.endpoint,
        config=config,
        transport=transport,
        adapter=_MESSAGE,
        json_body=request.to_body(),
    )


async def call_service(
    config: HassClientConfig,
    transport: Transport,
    request: ServiceCallRequest,
) -> list[EntityState]:
    """Call a service and return the states that changed while it ran."""
    _logger.debug("Calling service %s.%s", request.domain, request.service)
    return await post_json(
        endpoint=request.endpoint,
        config=config,
        transport=transport,
        adapter=_CHANGED_STATES,
        json_body=request.to_body(),
    )
