"""Pydantic request models for client entrypoints.

These models provide a consistent "validate → build → execute" flow:
each one checks its inputs at construction and knows the endpoint it
targets plus the query parameters or JSON body it sends.  They are
used by :class:`hassrest.client.HassClient`.
"""

from __future__ import annotations

from datetime import UTC
from typing import Any

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field, field_validator, model_validator

from hassrest import _constants as ep


# Characters that would end the path or be read as an escape.
_RESERVED_IN_SEGMENT = frozenset("/?#%\\")


def _path_segment(value: str, name: str) -> str:
    segment = value.strip()
    if not segment:
        raise ValueError(f"{name} must be non-empty")
    if segment in (".", ".."):
        raise ValueError(f"{name} must not be a dot segment, got {value!r}")
    if any(ch in _RESERVED_IN_SEGMENT or ch.isspace() for ch in segment):
        raise ValueError(f"{name} must not contain whitespace or any of '/?#%\\', got {value!r}")
    return segment


def format_query_time(value: AwareDatetime) -> str:
    """RFC 3339 timestamp with the original offset, as used in history/logbook URLs."""
    return value.isoformat()


def format_calendar_time(value: AwareDatetime) -> str:
    """UTC timestamp with millisecond precision and a ``Z`` suffix."""
    return value.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class _Request(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        validate_default=True,
        str_strip_whitespace=True,
    )


class EntityRequest(_Request):
    """Request addressing a single entity."""

    entity_id: str

    @field_validator("entity_id")
    @classmethod
    def _entity_id_segment(cls, value: str) -> str:
        return _path_segment(value, "entity_id")


# ------------------------------------------------------------------
# Query requests
# ------------------------------------------------------------------


class HistoryRequest(_Request):
    """Parameters of ``GET /api/history/period[/<start_time>]``.

    Parameters
    ----------
    start_time : datetime or None
        Start of the period; Home Assistant defaults to one day ago.
    end_time : datetime or None
        End of the period; defaults to one day after ``start_time``.
    filter_entity_ids : list[str] or None
        Only return these entities.
    minimal_response : bool
        Only return ``last_changed`` and ``state`` after the first entry.
    no_attributes : bool
        Skip attributes.
    significant_changes_only : bool or None
        ``None`` keeps the server default (significant changes only).
    """

    start_time: AwareDatetime | None = None
    end_time: AwareDatetime | None = None
    filter_entity_ids: list[str] | None = None
    minimal_response: bool = False
    no_attributes: bool = False
    significant_changes_only: bool | None = None

    @field_validator("filter_entity_ids")
    @classmethod
    def _entity_ids(cls, value: list[str] | None) -> list[str] | None:
        if value is None:
            return None
        return [_path_segment(entity_id, "filter_entity_ids") for entity_id in value]

    @property
    def endpoint(self) -> str:
        if self.start_time is None:
            return ep.HISTORY_PERIOD
        return f"{ep.HISTORY_PERIOD}/{format_query_time(self.start_time)}"

    def to_query(self) -> dict[str, str]:
        query: dict[str, str] = {}
        if self.filter_entity_ids:
            query["filter_entity_id"] = ",".join(self.filter_entity_ids)
        if self.end_time is not None:
            query["end_time"] = format_query_time(self.end_time)
        if self.minimal_response:
            query["minimal_response"] = "true"
        if self.no_attributes:
            query["no_attributes"] = "true"
        if self.significant_changes_only is not None:
            query["significant_changes_only"] = "1" if self.significant_changes_only else "0"
        return query


class LogbookRequest(_Request):
    """Parameters of ``GET /api/logbook[/<start_time>]``."""

    start_time: AwareDatetime | None = None
    end_time: AwareDatetime | None = None
    entity: str | None = None

    @field_validator("entity")
    @classmethod
    def _entity_segment(cls, value: str | None) -> str | None:
        return None if value is None else _path_segment(value, "entity")

    @property
    def endpoint(self) -> str:
        if self.start_time is None:
            return ep.LOGBOOK
        return f"{ep.LOGBOOK}/{format_query_time(self.start_time)}"

    def to_query(self) -> dict[str, str]:
        query: dict[str, str] = {}
        if self.entity is not None:
            query["entity"] = self.entity
        if self.end_time is not None:
            query["end_time"] = format_query_time(self.end_time)
        return query


class CalendarEventsRequest(EntityRequest):
    """Parameters of ``GET /api/calendars/<entity_id>``."""

    start: AwareDatetime
    end: AwareDatetime

    @model_validator(mode="after")
    def _ordered(self) -> CalendarEventsRequest:
        if self.end <= self.start:
            raise ValueError("end must be after start")
        return self

    @property
    def endpoint(self) -> str:
        return f"{ep.CALENDARS}/{self.entity_id}"

    def to_query(self) -> dict[str, str]:
        return {
            "start": format_calendar_time(self.start),
            "end": format_calendar_time(self.end),
        }


# ------------------------------------------------------------------
# Body requests
# ------------------------------------------------------------------


class StateUpdateRequest(EntityRequest):
    """Body of ``POST /api/states/<entity_id>`` (create or update a state).

    Only the state machine representation changes; no device is
    controlled.  Use :class:`ServiceCallRequest` for that.
    """

    state: str
    attributes: dict[str, Any] = Field(default_factory=dict)

    @property
    def endpoint(self) -> str:
        return f"{ep.STATES}/{self.entity_id}"

    def to_body(self) -> dict[str, Any]:
        return {"state": self.state, "attributes": dict(self.attributes)}


class TemplateRequest(_Request):
    """Body of ``POST /api/template``."""

    # Templates are sent verbatim; leading/trailing whitespace is rendered.
    model_config = ConfigDict(str_strip_whitespace=False)

    template: str

    @field_validator("template")
    @classmethod
    def _template_non_empty(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("template must be non-empty")
        return value

    @property
    def endpoint(self) -> str:
        return ep.TEMPLATE

    def to_body(self) -> dict[str, Any]:
        return {"template": self.template}


class FireEventRequest(_Request):
    """Body of ``POST /api/events/<event_type>``."""

    event_type: str
    event_data: dict[str, Any] | None = None

    @field_validator("event_type")
    @classmethod
    def _event_type_segment(cls, value: str) -> str:
        return _path_segment(value, "event_type")

    @property
    def endpoint(self) -> str:
        return f"{ep.EVENTS}/{self.event_type}"

    def to_body(self) -> dict[str, Any] | None:
        return None if self.event_data is None else dict(self.event_data)


class ServiceCallRequest(_Request):
    """Body of ``POST /api/services/<domain>/<service>``."""

    domain: str
    service: str
    service_data: dict[str, Any] = Field(default_factory=dict)

    @field_validator("domain", "service")
    @classmethod
    def _segments(cls, value: str) -> str:
        return _path_segment(value, "domain/service")

    @property
    def endpoint(self) -> str:
        return f"{ep.SERVICES}/{self.domain}/{self.service}"

    def to_body(self) -> dict[str, Any]:
        return dict(self.service_data)
