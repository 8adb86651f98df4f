"""Entity state endpoints.

Endpoints:
  - GET  /api/states
  - GET  /api/states/<entity_id>
  - POST /api/states/<entity_id>
  - GET  /api/camera_proxy/<entity_id>   (binary)
"""

from __future__ import annotations

import logging

from pydantic import TypeAdapter

from hassrest import _constants as ep
from hassrest._api._common import get_json, post_json
from hassrest._transport import Transport
from hassrest.config import HassClientConfig
from hassrest.models.entity import EntityState
from hassrest.models.requests import EntityRequest, StateUpdateRequest

_logger = logging.getLogger(__name__)

_ENTITY_STATE = TypeAdapter(EntityState)
_ENTITY_STATES = TypeAdapter(list[EntityState])


async def fetch_states(config: HassClientConfig, transport: Transport) -> list[EntityState]:
    states = await get_json(endpoint=ep.STATES, config=config, transport=transport, adapter=_ENTITY_STATES)
    _logger.debug("Fetched %d entity states", len(states))
    return states


async def fetch_state(
    config: HassClientConfig,
    transport: Transport,
    request: EntityRequest,
) -> EntityState:
    """State of one entity.  Unknown entities raise :class:`HassNotFoundError`."""
    return await get_json(
        endpoint=f"{ep.STATES}/{request.entity_id}",
        config=config,
        transport=transport,
        adapter=_ENTITY_STATE,
    )


async def update_state(
    config: HassClientConfig,
    transport: Transport,
    request: StateUpdateRequest,
) -> EntityState:
    """Create or update an entity state and return the stored state."""
    return await post_json(
        endpoint=request.endpoint,
        config=config,
        transport=transport,
        adapter=_ENTITY_STATE,
        json_body=request.to_body(),
    )


async def fetch_camera_image(transport: Transport, request: EntityRequest) -> bytes:
    """Current image of a camera entity, as returned (usually JPEG)."""
    return await transport.request("GET", f"{ep.CAMERA_PROXY}/{request.entity_id}")
