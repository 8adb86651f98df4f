"""Calendar models."""

from __future__ import annotations

import datetime as dt

from pydantic import AwareDatetime, Field, model_validator

from hassrest.models._base import HassBaseModel


class Calendar(HassBaseModel):
    """One entry of ``GET /api/calendars``."""

    entity_id: str
    name: str


class CalendarDate(HassBaseModel):
    """Start or end of a calendar event.

    Timed events carry ``{"dateTime": ...}``, all-day events
    ``{"date": "YYYY-MM-DD"}``.  Exactly one of the two is set.
    """

    date_time: AwareDatetime | None = Field(default=None, alias="dateTime")
    date: dt.date | None = None

    @model_validator(mode="after")
    def _exactly_one(self) -> CalendarDate:
        if (self.date_time is None) == (self.date is None):
            raise ValueError("calendar date needs exactly one of 'dateTime' or 'date'")
        return self

    @property
    def is_all_day(self) -> bool:
        return self.date is not None

    @property
    def value(self) -> dt.datetime | dt.date:
        """The populated variant."""
        if self.date_time is not None:
            return self.date_time
        assert self.date is not None  # noqa: S101
        return self.date


class CalendarEvent(HassBaseModel):
    """One event of ``GET /api/calendars/<entity_id>``."""

    summary: str
    start: CalendarDate
    end: CalendarDate
    location: str | None = None
    description: str | None = None
    uid: str | None = None
    recurrence_id: str | None = None
    rrule: str | None = None
