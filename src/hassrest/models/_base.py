"""Base model for Home Assistant REST responses.

Every response model inherits from :class:`HassBaseModel`, which makes
instances immutable and ignores keys this library does not map yet so
that new upstream fields never break decoding.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict

JsonObject = dict[str, Any]
"""A JSON object with arbitrary values (entity attributes, event data)."""


class HassBaseModel(BaseModel):
    """Base for Home Assistant response models."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )
