from __future__ import annotations

from typing import Any
from urllib.parse import parse_qs, urlparse

import pytest

from weathercache.adapters.weather import WeatherError

WINDOW_START = 1_546_300_800
WINDOW_END = 1_546_387_200


def history_payload(temp: float = 271.5, *, count: int = 1) -> dict[str, Any]:
    return {
        "message": "Count: 1",
        "cod": "200",
        "city_id": 0,
        "calctime": 0.0042,
        "cnt": count,
        "list": [
            {
                "dt": WINDOW_START + index * 3600,
                "main": {"temp": temp, "pressure": 1012, "humidity": 81, "temp_min": 270.1, "temp_max": 273.0},
                "wind": {"speed": 3.6, "deg": 240},
                "clouds": {"all": 75},
                "weather": [{"id": 803, "main": "Clouds", "description": "broken clouds", "icon": "04n"}],
            }
            for index in range(count)
        ],
    }


class FakeTransport:
    def __init__(self, outcome: dict[str, Any] | Exception | None = None) -> None:
        self.outcome = history_payload() if outcome is None else outcome
        self.urls: list[str] = []
        self.timeouts: list[float] = []

    @property
    def calls(self) -> int:
        return len(self.urls)

    def query(self, index: int = -1) -> dict[str, list[str]]:
        return parse_qs(urlparse(self.urls[index]).query)

    def perform_request(self, url: str, *, timeout: float) -> dict[str, Any]:
        self.urls.append(url)
        self.timeouts.append(timeout)
        if isinstance(self.outcome, Exception):
            raise self.outcome
        return self.outcome


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def failing_transport() -> FakeTransport:
    return FakeTransport(WeatherError("upstream unavailable"))
