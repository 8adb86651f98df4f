"""hassrest - Async Python client for the Home Assistant REST API."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("hassrest")
except PackageNotFoundError:
    __version__ = "0+local"
from hassrest.client import HassClient
from hassrest.config import HassClientConfig
from hassrest.exceptions import (
    HassApiError,
    HassAuthenticationError,
    HassConfigError,
    HassDeserializeError,
    HassError,
    HassNotFoundError,
    HassTransportError,
)
from hassrest.models import (
    ApiStatus,
    BooleanState,
    Calendar,
    CalendarDate,
    CalendarEvent,
    CalendarEventsRequest,
    ConfigCheckResult,
    CoreConfig,
    DecimalState,
    EntityState,
    EventListener,
    FireEventRequest,
    HistoryEntry,
    HistoryRequest,
    IntegerState,
    LogbookEntry,
    LogbookRequest,
    MessageResponse,
    ServiceCallRequest,
    ServiceDomain,
    StateContext,
    StateUpdateRequest,
    StateValue,
    StringState,
    TemplateRequest,
    UnitSystem,
    decode_state,
    decode_state_text,
)

__all__ = [
    "__version__",
    "ApiStatus",
    "BooleanState",
    "Calendar",
    "CalendarDate",
    "CalendarEvent",
    "CalendarEventsRequest",
    "ConfigCheckResult",
    "CoreConfig",
    "DecimalState",
    "EntityState",
    "EventListener",
    "FireEventRequest",
    "HassApiError",
    "HassAuthenticationError",
    "HassClient",
    "HassClientConfig",
    "HassConfigError",
    "HassDeserializeError",
    "HassError",
    "HassNotFoundError",
    "HassTransportError",
    "HistoryEntry",
    "HistoryRequest",
    "IntegerState",
    "LogbookEntry",
    "LogbookRequest",
    "MessageResponse",
    "ServiceCallRequest",
    "ServiceDomain",
    "StateContext",
    "StateUpdateRequest",
    "StateValue",
    "StringState",
    "TemplateRequest",
    "UnitSystem",
    "decode_state",
    "decode_state_text",
]
