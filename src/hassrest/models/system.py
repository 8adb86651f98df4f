"""Instance-level models: API status, core configuration, config check."""

from __future__ import annotations

from pydantic import Field

from hassrest._constants import API_RUNNING_MESSAGE
from hassrest.models._base import HassBaseModel


class ApiStatus(HassBaseModel):
    """Response of ``GET /api/``."""

    message: str

    @property
    def is_running(self) -> bool:
        return self.message == API_RUNNING_MESSAGE


class UnitSystem(HassBaseModel):
    """Units configured on the instance."""

    length: str
    mass: str
    temperature: str
    volume: str
    accumulated_precipitation: str | None = None
    area: str | None = None
    pressure: str | None = None
    wind_speed: str | None = None


class CoreConfig(HassBaseModel):
    """Response of ``GET /api/config``.

    Parameters
    ----------
    components : list[str]
        Loaded integrations and platforms (``"sensor.template"``).
    config_dir : str
        Configuration directory on the host.
    elevation : int
        Elevation in meters.
    latitude, longitude : float
        Home location.
    location_name : str
        Name of the home.
    time_zone : str
        IANA time zone.
    unit_system : UnitSystem
        Configured units.
    version : str
        Home Assistant version.
    whitelist_external_dirs : list[str]
        Legacy name of ``allowlist_external_dirs``; still sent.
    """

    components: list[str]
    config_dir: str
    elevation: int
    latitude: float
    longitude: float
    location_name: str
    time_zone: str
    unit_system: UnitSystem
    version: str
    whitelist_external_dirs: list[str] = Field(default_factory=list)
    allowlist_external_dirs: list[str] = Field(default_factory=list)
    allowlist_external_urls: list[str] = Field(default_factory=list)
    currency: str | None = None
    country: str | None = None
    language: str | None = None
    state: str | None = None
    external_url: str | None = None
    internal_url: str | None = None
    safe_mode: bool = False
    recovery_mode: bool = False


class ConfigCheckResult(HassBaseModel):
    """Response of ``POST /api/config/core/check_config``."""

    result: str
    errors: str | None = None
    warnings: str | None = None

    @property
    def is_valid(self) -> bool:
        return self.result == "valid"
