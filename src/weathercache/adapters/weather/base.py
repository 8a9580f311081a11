from __future__ import annotations

from typing import Any, Protocol

from ...domain.errors import (
    AuthorizationError,
    HttpError,
    InternalError,
    ParseError,
    RequestTimeoutError,
    WeatherError,
)
from ...domain.models import HistoryResponse, Timestamp

__all__ = [
    "AuthorizationError",
    "HistoryClient",
    "HttpError",
    "InternalError",
    "ParseError",
    "RequestTimeoutError",
    "Transport",
    "WeatherError",
]


class Transport(Protocol):
    def perform_request(self, url: str, *, timeout: float) -> dict[str, Any]:
        """Fetch ``url`` and return the decoded JSON object, raising ``WeatherError`` on failure."""


class HistoryClient(Protocol):
    def history_by_coords(
        self,
        latitude: float,
        longitude: float,
        start: Timestamp,
        end: Timestamp,
    ) -> HistoryResponse:
        """Fetch hourly history around the provided coordinates for a time window."""

    def history_by_id(
        self,
        city_id: int,
        *,
        start: Timestamp | None = None,
        end: Timestamp | None = None,
    ) -> HistoryResponse:
        """Fetch hourly history for an OpenWeatherMap city id."""

    def history_by_name(
        self,
        name: str,
        *,
        start: Timestamp | None = None,
        end: Timestamp | None = None,
    ) -> HistoryResponse:
        """Fetch hourly history for a city name such as ``"London,UK"``."""
