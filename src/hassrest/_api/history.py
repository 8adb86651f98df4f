"""History and logbook endpoints.

Endpoints:
  - GET /api/history/period[/<start_time>]
  - GET /api/logbook[/<start_time>]
"""

from __future__ import annotations

from pydantic import TypeAdapter

from hassrest._api._common import get_json
from hassrest._transport import Transport
from hassrest.config import HassClientConfig
from hassrest.models.entity import HistoryEntry, LogbookEntry
from hassrest.models.requests import HistoryRequest, LogbookRequest

_HISTORY = TypeAdapter(list[list[HistoryEntry]])
_LOGBOOK = TypeAdapter(list[LogbookEntry])


async def fetch_history(
    config: HassClientConfig,
    transport: Transport,
    request: HistoryRequest,
) -> list[list[HistoryEntry]]:
    """State changes in the requested period, one list per entity."""
    return await get_json(
        endpoint=request.endpoint,
        config=config,
        transport=transport,
        adapter=_HISTORY,
        params=request.to_query(),
    )


async def fetch_logbook(
    config: HassClientConfig,
    transport: Transport,
    request: LogbookRequest,
) -> list[LogbookEntry]:
    return await get_json(
        endpoint=request.endpoint,
        config=config,
        transport=transport,
        adapter=_LOGBOOK,
        params=request.to_query(),
    )
