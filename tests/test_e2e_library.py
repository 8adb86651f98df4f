from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any

import aiohttp
import pytest

from hassrest._transport import raise_for_status
from hassrest.client import HassClient
from hassrest.config import HassClientConfig
from hassrest.exceptions import (
    HassAuthenticationError,
    HassDeserializeError,
    HassError,
    HassNotFoundError,
)
from hassrest.models.requests import HistoryRequest, LogbookRequest
from hassrest.models.state import BooleanState, DecimalState, IntegerState, StringState

_TS = "2023-04-25T23:49:34.728773+00:00"


def _state_payload(entity_id: str, state: Any, **extra: Any) -> dict[str, Any]:
    return {
        "entity_id": entity_id,
        "state": state,
        "attributes": extra.pop("attributes", {}),
        "last_changed": _TS,
        "last_updated": _TS,
        "context": {"id": "01GYXD54C8D0YFJ6ASFDGJBJR9", "parent_id": None, "user_id": None},
        **extra,
    }


@dataclass
class FakeHassBackend:
    token: str = "test_token"
    states: dict[str, Any] = field(
        default_factory=lambda: {
            "sensor.temperature": "21.5",
            "input_boolean.guest_mode": "true",
            "light.kitchen": "on",
            "counter.visits": "42",
            "sensor.nothing": None,
        }
    )
    calls: list[tuple[str, str, dict[str, str], Any]] = field(default_factory=list)
    presented_token: str = "test_token"
    broken_endpoints: set[str] = field(default_factory=set)

    def _reply(self, status: int, payload: Any, endpoint: str) -> bytes:
        body = payload if isinstance(payload, bytes) else json.dumps(payload).encode()
        raise_for_status(status, body, endpoint)
        return body

    async def request(
        self,
        method: str,
        endpoint: str,
        *,
        params: Mapping[str, str] | None = None,
        json_body: Any = None,
    ) -> bytes:
        self.calls.append((method, endpoint, dict(params or {}), json_body))

        if self.presented_token != self.token:
            return self._reply(401, {"message": "Invalid authentication"}, endpoint)

        if endpoint in self.broken_endpoints:
            return self._reply(200, b'[{"entity_id": "sensor.x"}]', endpoint)

        if method == "GET" and endpoint == "/api/":
            return self._reply(200, {"message": "API running."}, endpoint)

        if method == "GET" and endpoint == "/api/config":
            return self._reply(
                200,
                {
                    "components": ["sensor.cpuspeed", "frontend"],
                    "config_dir": "/home/ha/.homeassistant",
                    "elevation": 510,
                    "latitude": 45.8781529,
                    "location_name": "Home",
                    "longitude": 8.458853651,
                    "time_zone": "Europe/Zurich",
                    "unit_system": {"length": "km", "mass": "g", "temperature": "°C", "volume": "L"},
                    "version": "0.56.2",
                    "whitelist_external_dirs": ["/home/ha/.homeassistant/www"],
                },
                endpoint,
            )

        if method == "GET" and endpoint == "/api/states":
            return self._reply(200, [_state_payload(k, v) for k, v in self.states.items()], endpoint)

        if endpoint.startswith("/api/states/"):
            entity_id = endpoint.removeprefix("/api/states/")
            if method == "POST":
                self.states[entity_id] = json_body["state"]
                return self._reply(
                    200, _state_payload(entity_id, json_body["state"], attributes=json_body["attributes"]), endpoint
                )
            if entity_id not in self.states:
                return self._reply(404, {"message": "Entity not found."}, endpoint)
            return self._reply(200, _state_payload(entity_id, self.states[entity_id]), endpoint)

        if method == "GET" and endpoint == "/api/services":
            return self._reply(
                200,
                [{"domain": "light", "services": {"turn_on": {"name": "Turn on", "fields": {}}}}],
                endpoint,
            )

        if method == "POST" and endpoint == "/api/services/light/turn_on":
            self.states["light.kitchen"] = "on"
            return self._reply(200, [_state_payload("light.kitchen", "on")], endpoint)

        if method == "GET" and endpoint == "/api/events":
            return self._reply(200, [{"event": "state_changed", "listener_count": 5}], endpoint)

        if method == "POST" and endpoint.startswith("/api/events/"):
            event_type = endpoint.removeprefix("/api/events/")
            return self._reply(200, {"message": f"Event {event_type} fired."}, endpoint)

        if method == "GET" and endpoint.startswith("/api/history/period"):
            return self._reply(
                200,
                [
                    [
                        _state_payload("sensor.temperature", "20.0"),
                        {"state": "20.5", "last_changed": "2016-12-29T11:22:33+02:00"},
                    ]
                ],
                endpoint,
            )

        if method == "GET" and endpoint.startswith("/api/logbook"):
            return self._reply(
                200,
                [{"when": _TS, "name": "Kitchen", "entity_id": "light.kitchen", "state": "on", "domain": "light"}],
                endpoint,
            )

        if method == "GET" and endpoint == "/api/calendars":
            return self._reply(200, [{"entity_id": "calendar.holidays", "name": "Holidays"}], endpoint)

        if method == "GET" and endpoint.startswith("/api/calendars/"):
            return self._reply(
                200,
                [{"summary": "Christmas", "start": {"date": "2016-12-25"}, "end": {"date": "2016-12-26"}}],
                endpoint,
            )

        if method == "GET" and endpoint == "/api/error_log":
            log = b"15-12-20 11:02:50 homeassistant.components.recorder: Found unfinished sessions"
            return self._reply(200, log, endpoint)

        if method == "GET" and endpoint.startswith("/api/camera_proxy/"):
            return self._reply(200, b"\xff\xd8\xff\xe0JPEG", endpoint)

        if method == "POST" and endpoint == "/api/template":
            return self._reply(200, f"rendered: {json_body['template']}".encode(), endpoint)

        if method == "POST" and endpoint == "/api/config/core/check_config":
            return self._reply(200, {"result": "valid", "errors": None}, endpoint)

        return self._reply(404, {"message": "Not found"}, endpoint)


@pytest.fixture
def config() -> HassClientConfig:
    return HassClientConfig(base_url="http://homeassistant.local:8123", token="test_token")


@pytest.fixture
def backend(monkeypatch: pytest.MonkeyPatch) -> FakeHassBackend:
    fake_backend = FakeHassBackend()

    async def fake_request(_self: Any, method: str, endpoint: str, **kwargs: Any) -> bytes:
        return await fake_backend.request(method, endpoint, **kwargs)

    monkeypatch.setattr("hassrest._transport.HttpTransport.request", fake_request)
    return fake_backend


@pytest.mark.asyncio
@pytest.mark.e2e
async def test_e2e_state_values_are_decoded(config: HassClientConfig, backend: FakeHassBackend) -> None:
    async with HassClient(config) as client:
        assert (await client.get_api_status()).is_running is True

        assert (await client.get_state("sensor.temperature")).state == DecimalState(21.5)
        assert (await client.get_state("input_boolean.guest_mode")).state == BooleanState(True)
        assert (await client.get_state("light.kitchen")).state == StringState("on")
        assert (await client.get_state("counter.visits")).state == IntegerState(42)
        assert (await client.get_state("sensor.nothing")).state is None

        states = await client.get_states()
        assert {s.entity_id: s.state for s in states}["sensor.temperature"] == DecimalState(21.5)


@pytest.mark.asyncio
@pytest.mark.e2e
async def test_e2e_happy_path_exercises_every_endpoint(config: HassClientConfig, backend: FakeHassBackend) -> None:
    start = datetime(2016, 12, 29, 11, 22, 33, tzinfo=timezone(timedelta(hours=2)))

    async with HassClient(config) as client:
        core = await client.get_config()
        assert core.location_name == "Home"
        assert core.unit_system.temperature == "°C"

        events = await client.get_events()
        assert events[0].event == "state_changed"

        services = await client.get_services()
        assert services[0].service_names == ["turn_on"]

        history = await client.get_history(HistoryRequest(start_time=start, filter_entity_ids=["sensor.temperature"]))
        assert history[0][0].state == DecimalState(20.0)
        assert history[0][1].entity_id is None

        logbook = await client.get_logbook(LogbookRequest(start_time=start))
        assert logbook[0].state == StringState("on")

        calendars = await client.get_calendars()
        assert calendars[0].entity_id == "calendar.holidays"
        holiday = await client.get_calendar_events("calendar.holidays", start, start + timedelta(days=30))
        assert holiday[0].start.is_all_day is True

        assert "recorder" in await client.get_error_log()
        assert (await client.get_camera_proxy("camera.front_door")).startswith(b"\xff\xd8")
        assert await client.render_template("It is {{ now() }}!") == "rendered: It is {{ now() }}!"
        assert (await client.check_config()).is_valid is True

        fired = await client.fire_event("my_event", {"answer": 42})
        assert fired.message == "Event my_event fired."

        changed = await client.call_service("light", "turn_on", {"entity_id": "light.kitchen"})
        assert changed[0].entity_id == "light.kitchen"

        updated = await client.set_state("sensor.test", "create_new", {"friendly_name": "Test"})
        assert updated.state == StringState("create_new")
        assert updated.attributes == {"friendly_name": "Test"}

    history_call = next(c for c in backend.calls if c[1].startswith("/api/history/period"))
    assert history_call[1] == "/api/history/period/2016-12-29T11:22:33+02:00"
    assert history_call[2] == {"filter_entity_id": "sensor.temperature"}

    calendar_call = next(c for c in backend.calls if c[1] == "/api/calendars/calendar.holidays")
    assert calendar_call[2] == {"start": "2016-12-29T09:22:33.000Z", "end": "2017-01-28T09:22:33.000Z"}

    state_post = next(c for c in backend.calls if c[0] == "POST" and c[1] == "/api/states/sensor.test")
    assert state_post[3] == {"state": "create_new", "attributes": {"friendly_name": "Test"}}


@pytest.mark.asyncio
@pytest.mark.e2e
async def test_e2e_unauthorized_raises_authentication_error(
    config: HassClientConfig,
    backend: FakeHassBackend,
) -> None:
    backend.presented_token = "wrong"

    async with HassClient(config) as client:
        with pytest.raises(HassAuthenticationError) as exc_info:
            await client.get_state("sensor.temperature")

    exc = exc_info.value
    assert exc.status_code == 401
    assert exc.endpoint == "/api/states/sensor.temperature"
    assert exc.upstream_message == "Invalid authentication"


@pytest.mark.asyncio
@pytest.mark.e2e
async def test_e2e_unknown_entity_raises_not_found(config: HassClientConfig, backend: FakeHassBackend) -> None:
    async with HassClient(config) as client:
        with pytest.raises(HassNotFoundError, match="Entity not found"):
            await client.get_state("sensor.missing")


@pytest.mark.asyncio
@pytest.mark.e2e
async def test_e2e_schema_drift_reports_path_with_debugging(backend: FakeHassBackend) -> None:
    backend.broken_endpoints.add("/api/states")
    debug_config = HassClientConfig(
        base_url="http://homeassistant.local:8123",
        token="test_token",
        debug_deserialize=True,
    )

    async with HassClient(debug_config) as client:
        with pytest.raises(HassDeserializeError) as exc_info:
            await client.get_states()

    assert exc_info.value.endpoint == "/api/states"
    assert exc_info.value.path == "0.last_changed"


@pytest.mark.asyncio
@pytest.mark.e2e
async def test_e2e_schema_drift_without_debugging_has_no_path(
    config: HassClientConfig,
    backend: FakeHassBackend,
) -> None:
    backend.broken_endpoints.add("/api/states")

    async with HassClient(config) as client:
        with pytest.raises(HassDeserializeError) as exc_info:
            await client.get_states()

    assert exc_info.value.path is None


@pytest.mark.asyncio
async def test_client_outside_context_manager_raises(config: HassClientConfig) -> None:
    client = HassClient(config)
    with pytest.raises(HassError, match="not initialized"):
        await client.get_api_status()


@pytest.mark.asyncio
async def test_string_shortcuts_require_their_arguments(config: HassClientConfig, backend: FakeHassBackend) -> None:
    async with HassClient(config) as client:
        with pytest.raises(ValueError, match="state is required"):
            await client.set_state("sensor.test")
        with pytest.raises(ValueError, match="service is required"):
            await client.call_service("light")
        with pytest.raises(ValueError, match="start and end"):
            await client.get_calendar_events("calendar.holidays")
    assert backend.calls == []


@pytest.mark.asyncio
async def test_external_session_is_not_closed(config: HassClientConfig, backend: FakeHassBackend) -> None:
    async with aiohttp.ClientSession() as session:
        async with HassClient(config, session=session) as client:
            await client.get_api_status()
        assert session.closed is False

