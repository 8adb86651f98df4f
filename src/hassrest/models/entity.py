"""Entity state, history and logbook models."""

from __future__ import annotations

from pydantic import AwareDatetime, Field

from hassrest.models._base import HassBaseModel, JsonObject
from hassrest.models.state import StateField


class StateContext(HassBaseModel):
    """Context that caused a state change.

    Parameters
    ----------
    id : str
        Context ULID.
    parent_id : str or None
        Parent context, set when the change was triggered by an automation.
    user_id : str or None
        User that caused the change; ``None`` for system changes.
    """

    id: str
    parent_id: str | None = None
    user_id: str | None = None


class EntityState(HassBaseModel):
    """Reported status of one entity.

    Returned by ``GET /api/states``, ``GET /api/states/<entity_id>``,
    ``POST /api/states/<entity_id>`` and service calls.  A fresh
    instance is built for every decoded payload.

    Parameters
    ----------
    entity_id : str
        Domain-qualified id, e.g. ``"sun.sun"``.
    state : StateValue or None
        Adaptively decoded state, see :mod:`hassrest.models.state`.
    attributes : dict
        Attribute name to arbitrary JSON value.
    last_changed : datetime
        When the state itself last changed.
    last_updated : datetime
        When the state or any attribute last changed.
    last_reported : datetime or None
        When the state was last written, even if unchanged.  Only sent
        by recent Home Assistant versions.
    context : StateContext or None
        Context of the last change.
    """

    entity_id: str
    state: StateField = None
    attributes: JsonObject = Field(default_factory=dict)
    last_changed: AwareDatetime
    last_updated: AwareDatetime
    last_reported: AwareDatetime | None = None
    context: StateContext | None = None

    @property
    def domain(self) -> str:
        """Domain part of :attr:`entity_id` (``"sun"`` for ``"sun.sun"``)."""
        return self.entity_id.partition(".")[0]

    @property
    def friendly_name(self) -> str | None:
        name = self.attributes.get("friendly_name")
        return name if isinstance(name, str) else None


class HistoryEntry(HassBaseModel):
    """One state change returned by ``/api/history/period``.

    With ``minimal_response`` only the first entry of every entity list
    carries ``entity_id`` and ``attributes``; the rest hold just the
    state and ``last_changed``.
    """

    entity_id: str | None = None
    state: StateField
    attributes: JsonObject | None = None
    last_changed: AwareDatetime | None = None
    last_updated: AwareDatetime | None = None


class LogbookEntry(HassBaseModel):
    """One entry returned by ``/api/logbook``."""

    when: AwareDatetime | None = None
    name: str | None = None
    message: str | None = None
    domain: str | None = None
    entity_id: str | None = None
    state: StateField = None
    context_id: str | None = None
    context_user_id: str | None = None
