"""Calendar endpoints.

Endpoints:
  - GET /api/calendars
  - GET /api/calendars/<entity_id>?start=...&end=...
"""

from __future__ import annotations

from pydantic import TypeAdapter

from hassrest import _constants as ep
from hassrest._api._common import get_json
from hassrest._transport import Transport
from hassrest.config import HassClientConfig
from hassrest.models.calendar import Calendar, CalendarEvent
from hassrest.models.requests import CalendarEventsRequest

_CALENDARS = TypeAdapter(list[Calendar])
_CALENDAR_EVENTS = TypeAdapter(list[CalendarEvent])


async def fetch_calendars(config: HassClientConfig, transport: Transport) -> list[Calendar]:
    return await get_json(endpoint=ep.CALENDARS, config=config, transport=transport, adapter=_CALENDARS)


async def fetch_calendar_events(
    config: HassClientConfig,
    transport: Transport,
    request: CalendarEventsRequest,
) -> list[CalendarEvent]:
    return await get_json(
        endpoint=request.endpoint,
        config=config,
        transport=transport,
        adapter=_CALENDAR_EVENTS,
        params=request.to_query(),
    )
