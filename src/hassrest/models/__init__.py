"""Data models for Home Assistant REST requests and responses."""

from hassrest.models._base import HassBaseModel, JsonObject
from hassrest.models.calendar import Calendar, CalendarDate, CalendarEvent
from hassrest.models.entity import EntityState, HistoryEntry, LogbookEntry, StateContext
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
from hassrest.models.state import (
    BooleanState,
    DecimalState,
    IntegerState,
    StateField,
    StateValue,
    StringState,
    decode_state,
    decode_state_text,
)
from hassrest.models.system import ApiStatus, ConfigCheckResult, CoreConfig, UnitSystem

__all__ = [
    "ApiStatus",
    "BooleanState",
    "Calendar",
    "CalendarDate",
    "CalendarEvent",
    "CalendarEventsRequest",
    "ConfigCheckResult",
    "CoreConfig",
    "DecimalState",
    "EntityRequest",
    "EntityState",
    "EventListener",
    "FireEventRequest",
    "HassBaseModel",
    "HistoryEntry",
    "HistoryRequest",
    "IntegerState",
    "JsonObject",
    "LogbookEntry",
    "LogbookRequest",
    "MessageResponse",
    "ServiceCallRequest",
    "ServiceDomain",
    "StateContext",
    "StateField",
    "StateUpdateRequest",
    "StateValue",
    "StringState",
    "TemplateRequest",
    "UnitSystem",
    "decode_state",
    "decode_state_text",
]
