"""
Pytest configuration and shared fixtures.
"""

import json
from pathlib import Path
from typing import Any

import httpx
import pytest
from yaml import dump

from itinerary import configuration
from itinerary.client import api as api_module
from itinerary.repository.active_trip import ACTIVE_TRIP_REPO
from itinerary.repository.configuration import CONFIGURATION_REPO
from itinerary.terminal import activity, guest, link, trip
from itinerary.view import state as view_state


@pytest.fixture(autouse=True)
def app_paths(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point config and data files at a temporary directory."""
    config_path = tmp_path / "config"
    data_path = tmp_path / "data"
    config_path.mkdir()
    data_path.mkdir()

    monkeypatch.setattr(configuration, "CONFIG_PATH", config_path)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_path / "config.yaml")
    monkeypatch.setattr(configuration, "DATA_PATH", data_path)
    monkeypatch.setattr(
        configuration, "DATA_ACTIVE_TRIP_PATH", data_path / "active_trip.yaml"
    )

    config = configuration.get_default_config()
    config["api_url"] = "http://trips.test"
    (config_path / "config.yaml").write_text(dump(config))

    monkeypatch.setattr(CONFIGURATION_REPO, "_config", None)
    monkeypatch.setattr(CONFIGURATION_REPO, "is_dirty", False)
    monkeypatch.setattr(ACTIVE_TRIP_REPO, "_active_trip", None)
    monkeypatch.setattr(ACTIVE_TRIP_REPO, "is_dirty", False)
    view_state.set_show_header(True)
    return tmp_path


class FakeTripApi:
    """Routes requests to canned JSON responses and records what was sent."""

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], tuple[int, Any]] = {}
        self.requests: list[httpx.Request] = []

    def add(
        self, method: str, path: str, body: Any = None, status_code: int = 200
    ) -> None:
        self.routes[(method, path)] = (status_code, body)

    def sent_json(self, method: str, path: str) -> Any:
        for request in self.requests:
            if request.method == method and request.url.path == path:
                return json.loads(request.content)
        raise AssertionError(f"no {method} {path} request was sent")

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, json={"message": "not found"})
        status_code, body = route
        if body is None:
            return httpx.Response(status_code)
        return httpx.Response(status_code, json=body)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def fake_api(monkeypatch: pytest.MonkeyPatch) -> FakeTripApi:
    """Replace the API client used by every command with a mock transport."""
    fake = FakeTripApi()

    def get_fake_client() -> api_module.ApiClient:
        return api_module.get_api_client(transport=fake.transport())

    for module in (trip, activity, link, guest):
        monkeypatch.setattr(module, "get_api_client", get_fake_client)
    return fake


@pytest.fixture
def trip_payload() -> dict[str, Any]:
    return {
        "id": "trip-1",
        "destination": "Florianópolis",
        "starts_at": "2024-03-05T12:00:00.000Z",
        "ends_at": "2024-03-10T12:00:00.000Z",
        "is_confirmed": True,
    }


@pytest.fixture
def activities_payload() -> dict[str, Any]:
    return {
        "activities": [
            {
                "date": "2024-03-10T00:00:00.000Z",
                "activities": [
                    {
                        "id": "a-1",
                        "title": "Café da manhã",
                        "occurs_at": "2024-03-10T08:00:00.000Z",
                    },
                    {
                        "id": "a-2",
                        "title": "Passeio de barco",
                        "occurs_at": "2024-03-10T15:30:00.000Z",
                    },
                ],
            },
            {"date": "2024-03-11T00:00:00.000Z", "activities": []},
        ]
    }

