"""High-level async client for the Home Assistant REST API."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

import aiohttp

from hassrest._api import calendars as _calendars_api
from hassrest._api import events as _events_api
from hassrest._api import history as _history_api
from hassrest._api import states as _states_api
from hassrest._api import system as _system_api
from hassrest._transport import HttpTransport, Transport
from hassrest.config import HassClientConfig
from hassrest.exceptions import HassError
from hassrest.models.calendar import Calendar, CalendarEvent
from hassrest.models.entity import EntityState, HistoryEntry, LogbookEntry
from hassrest.models.events import EventListener, MessageResponse, ServiceDomain
from hassrest.models.requests import (
    CalendarEventsRequest,
    EntityRequest,
    FireEventRequest,
    HistoryRequest,
    LogbookRequest,
    ServiceCallRequest,
    StateUpdateRequest,
    TemplateRequest,
)
from hassrest.models.system import ApiStatus, ConfigCheckResult, CoreConfig

_logger = logging.getLogger(__name__)


class HassClient:
    """Async client for the Home Assistant REST API.

    Constructing the client does not contact Home Assistant; it only
    validates the configuration.  Call :meth:`get_api_status` to check
    the API is reachable.

    Usage::

        config = HassClientConfig(base_url="http://homeassistant.local:8123", token="...")
        async with HassClient(config) as client:
            status = await client.get_api_status()
            sun = await client.get_state("sun.sun")

    Every call is an independent request/response round trip; calls may
    run concurrently and nothing is retried.
    """

    def __init__(
        self,
        config: HassClientConfig,
        *,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        self._config = config
        self._external_session = session is not None
        self._http_session = session
        self._transport: Transport | None = None

    @classmethod
    def from_url(
        cls,
        base_url: str,
        token: str,
        *,
        session: aiohttp.ClientSession | None = None,
        **options: Any,
    ) -> HassClient:
        """Build a client from a base URL and access token.

        Raises :class:`~hassrest.exceptions.HassConfigError` for an
        invalid URL or empty token.
        """
        return cls(HassClientConfig(base_url=base_url, token=token, **options), session=session)

    @property
    def config(self) -> HassClientConfig:
        return self._config

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> HassClient:
        if self._http_session is None:
            self._http_session = aiohttp.ClientSession()
        self._transport = HttpTransport(self._config, self._http_session)
        return self

    async def __aexit__(self, *exc: Any) -> None:
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
        self._transport = None

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _require_transport(self) -> Transport:
        if self._transport is None:
            raise HassError("Client not initialized. Use 'async with HassClient(...) as client:'")
        return self._transport

    # ------------------------------------------------------------------
    # Instance
    # ------------------------------------------------------------------

    async def get_api_status(self) -> ApiStatus:
        """Call ``GET /api/``.

        ``message`` is ``"API running."`` on a healthy instance; see
        :attr:`ApiStatus.is_running`.
        """
        return await _system_api.fetch_api_status(self._config, self._require_transport())

    async def get_config(self) -> CoreConfig:
        """Call ``GET /api/config`` (current core configuration)."""
        return await _system_api.fetch_core_config(self._config, self._require_transport())

    async def get_error_log(self) -> str:
        """Call ``GET /api/error_log``; errors of the current session as plain text."""
        return await _system_api.fetch_error_log(self._require_transport())

    async def check_config(self) -> ConfigCheckResult:
        """Call ``POST /api/config/core/check_config``."""
        return await _system_api.check_config(self._config, self._require_transport())

    async def render_template(self, template: str | TemplateRequest) -> str:
        """Call ``POST /api/template`` and return the rendered text."""
        request = template if isinstance(template, TemplateRequest) else TemplateRequest(template=template)
        return await _system_api.render_template(self._require_transport(), request)

    # ------------------------------------------------------------------
    # Events and services
    # ------------------------------------------------------------------

    async def get_events(self) -> list[EventListener]:
        """Call ``GET /api/events`` (event types and listener counts)."""
        return await _events_api.fetch_events(self._config, self._require_transport())

    async def get_services(self) -> list[ServiceDomain]:
        """Call ``GET /api/services`` (services per domain)."""
        return await _events_api.fetch_services(self._config, self._require_transport())

    async def fire_event(
        self,
        event_type: str | FireEventRequest,
        event_data: dict[str, Any] | None = None,
    ) -> MessageResponse:
        """Call ``POST /api/events/<event_type>``."""
        if isinstance(event_type, FireEventRequest):
            request = event_type
        else:
            request = FireEventRequest(event_type=event_type, event_data=event_data)
        return await _events_api.fire_event(self._config, self._require_transport(), request)

    async def call_service(
        self,
        domain: str | ServiceCallRequest,
        service: str | None = None,
        service_data: dict[str, Any] | None = None,
    ) -> list[EntityState]:
        """Call ``POST /api/services/<domain>/<service>``.

        Returns the states that changed while the service was executing.
        """
        if isinstance(domain, ServiceCallRequest):
            request = domain
        else:
            if service is None:
                raise ValueError("service is required when domain is a string")
            request = ServiceCallRequest(domain=domain, service=service, service_data=service_data or {})
        return await _events_api.call_service(self._config, self._require_transport(), request)

    # ------------------------------------------------------------------
    # States
    # ------------------------------------------------------------------

    async def get_states(self) -> list[EntityState]:
        """Call ``GET /api/states`` (all entity states)."""
        return await _states_api.fetch_states(self._config, self._require_transport())

    async def get_state(self, entity_id: str) -> EntityState:
        """Call ``GET /api/states/<entity_id>``.

        Raises :class:`~hassrest.exceptions.HassNotFoundError` for an
        unknown entity.
        """
        request = EntityRequest(entity_id=entity_id)
        return await _states_api.fetch_state(self._config, self._require_transport(), request)

    async def set_state(
        self,
        entity_id: str | StateUpdateRequest,
        state: str | None = None,
        attributes: dict[str, Any] | None = None,
    ) -> EntityState:
        """Call ``POST /api/states/<entity_id>`` to create or update a state."""
        if isinstance(entity_id, StateUpdateRequest):
            request = entity_id
        else:
            if state is None:
                raise ValueError("state is required when entity_id is a string")
            request = StateUpdateRequest(entity_id=entity_id, state=state, attributes=attributes or {})
        return await _states_api.update_state(self._config, self._require_transport(), request)

    async def get_camera_proxy(self, entity_id: str) -> bytes:
        """Call ``GET /api/camera_proxy/<entity_id>`` and return the image bytes."""
        request = EntityRequest(entity_id=entity_id)
        return await _states_api.fetch_camera_image(self._require_transport(), request)

    # ------------------------------------------------------------------
    # History, logbook, calendars
    # ------------------------------------------------------------------

    async def get_history(self, request: HistoryRequest | None = None) -> list[list[HistoryEntry]]:
        """Call ``GET /api/history/period[/<start_time>]``."""
        return await _history_api.fetch_history(
            self._config,
            self._require_transport(),
            request or HistoryRequest(),
        )

    async def get_logbook(self, request: LogbookRequest | None = None) -> list[LogbookEntry]:
        """Call ``GET /api/logbook[/<start_time>]``."""
        return await _history_api.fetch_logbook(
            self._config,
            self._require_transport(),
            request or LogbookRequest(),
        )

    async def get_calendars(self) -> list[Calendar]:
        """Call ``GET /api/calendars`` (calendar entities)."""
        return await _calendars_api.fetch_calendars(self._config, self._require_transport())

    async def get_calendar_events(
        self,
        entity_id: str | CalendarEventsRequest,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> list[CalendarEvent]:
        """Call ``GET /api/calendars/<entity_id>`` for events between *start* and *end*."""
        if isinstance(entity_id, CalendarEventsRequest):
            request = entity_id
        else:
            if start is None or end is None:
                raise ValueError("start and end are required when entity_id is a string")
            request = CalendarEventsRequest(entity_id=entity_id, start=start, end=end)
        _logger.debug("Fetching events of %s", request.entity_id)
        return await _calendars_api.fetch_calendar_events(self._config, self._require_transport(), request)
