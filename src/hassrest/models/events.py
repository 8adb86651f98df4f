"""Event and service catalog models."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from hassrest.models._base import HassBaseModel


class EventListener(HassBaseModel):
    """One entry of ``GET /api/events``."""

    event: str
    listener_count: int


class ServiceDomain(HassBaseModel):
    """One entry of ``GET /api/services``.

    The upstream documentation shows ``services`` as a list of names.
    The API actually sends a mapping of service name to its description
    (``name``, ``description``, ``fields``, ``target`` ...), which is
    what this model keeps.
    """

    domain: str
    services: dict[str, dict[str, Any]] = Field(default_factory=dict)

    @property
    def service_names(self) -> list[str]:
        return list(self.services)


class MessageResponse(HassBaseModel):
    """Plain ``{"message": ...}`` acknowledgement (event firing)."""

    message: str
