from __future__ import annotations

import json
import logging
from http.client import HTTPException
from typing import Any
from urllib.error import HTTPError, URLError
from urllib.parse import urlencode
from urllib.request import Request, urlopen

from pydantic import ValidationError

from ...domain.models import HistoryResponse, Timestamp, to_unix_seconds
from .base import (
    AuthorizationError,
    HttpError,
    InternalError,
    ParseError,
    RequestTimeoutError,
    Transport,
)

LOGGER = logging.getLogger(__name__)

HISTORY_PATH = "data/2.5/history/city"
DEFAULT_TIMEOUT_SECONDS = 10.0
USER_AGENT = "weathercache/0.1"


def _redact(url: str) -> str:
    head, sep, _ = url.partition("appid=")
    return f"{head}{sep}***" if sep else url


def _error_message(body: bytes, fallback: str) -> str:
    try:
        payload = json.loads(body.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError):
        return fallback
    if isinstance(payload, dict) and isinstance(payload.get("message"), str):
        return payload["message"]
    return fallback


class UrllibTransport:
    """Blocking JSON transport that maps failures onto ``WeatherError`` kinds."""

    def __init__(self, *, user_agent: str = USER_AGENT) -> None:
        self._user_agent = user_agent

    def perform_request(self, url: str, *, timeout: float) -> dict[str, Any]:
        request = Request(url, headers={"User-Agent": self._user_agent, "Accept": "application/json"})
        try:
            with urlopen(request, timeout=timeout) as response:
                body = response.read()
        except HTTPError as exc:
            LOGGER.warning("History request to %s failed with HTTP %s", _redact(url), exc.code)
            if exc.code == 401:
                raise AuthorizationError() from exc
            message = _error_message(exc.read() or b"", f"HTTP {exc.code}: {exc.reason}")
            raise HttpError(message) from exc
        except TimeoutError as exc:
            LOGGER.warning("History request to %s timed out after %ss", _redact(url), timeout)
            raise RequestTimeoutError(f"Request timed out after {timeout}s") from exc
        except URLError as exc:
            if isinstance(exc.reason, TimeoutError):
                LOGGER.warning("History request to %s timed out after %ss", _redact(url), timeout)
                raise RequestTimeoutError(f"Request timed out after {timeout}s") from exc
            LOGGER.warning("History request to %s failed: %s", _redact(url), exc.reason)
            raise HttpError(f"Connection failed: {exc.reason}") from exc
        except (HTTPException, OSError) as exc:
            LOGGER.warning("History request to %s failed: %r", _redact(url), exc)
            raise HttpError(f"Connection failed: {exc!r}") from exc

        try:
            payload = json.loads(body.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise ParseError("Response body was not valid JSON") from exc

        if not isinstance(payload, dict):
            raise ParseError("Unexpected response shape, expected a JSON object")
        return payload


class OWMClient:
    """Uncached client for the OpenWeatherMap history API."""

    def __init__(
        self,
        *,
        api_host: str,
        api_key: str,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        use_ssl: bool = True,
        transport: Transport | None = None,
    ) -> None:
        self._api_host = api_host.strip().strip("/")
        self._api_key = api_key
        self._timeout = timeout
        self._use_ssl = use_ssl
        self._transport = transport or UrllibTransport()

    @property
    def api_host(self) -> str:
        return self._api_host

    @property
    def timeout(self) -> float:
        return self._timeout

    @property
    def use_ssl(self) -> bool:
        return self._use_ssl

    def history_by_coords(
        self,
        latitude: float,
        longitude: float,
        start: Timestamp,
        end: Timestamp,
    ) -> HistoryResponse:
        return self._history(
            {
                "lat": f"{latitude}",
                "lon": f"{longitude}",
                "start": to_unix_seconds(start),
                "end": to_unix_seconds(end),
            }
        )

    def history_by_id(
        self,
        city_id: int,
        *,
        start: Timestamp | None = None,
        end: Timestamp | None = None,
    ) -> HistoryResponse:
        return self._history({"id": city_id, **self._window(start, end)})

    def history_by_name(
        self,
        name: str,
        *,
        start: Timestamp | None = None,
        end: Timestamp | None = None,
    ) -> HistoryResponse:
        return self._history({"q": name, **self._window(start, end)})

    def build_url(self, params: dict[str, Any]) -> str:
        scheme = "https" if self._use_ssl else "http"
        query = urlencode({**params, "type": "hour", "appid": self._api_key})
        return f"{scheme}://{self._api_host}/{HISTORY_PATH}?{query}"

    @staticmethod
    def _window(start: Timestamp | None, end: Timestamp | None) -> dict[str, int]:
        window: dict[str, int] = {}
        if start is not None:
            window["start"] = to_unix_seconds(start)
        if end is not None:
            window["end"] = to_unix_seconds(end)
        return window

    def _history(self, params: dict[str, Any]) -> HistoryResponse:
        payload = self._transport.perform_request(self.build_url(params), timeout=self._timeout)

        code = str(payload.get("cod", "200"))
        if code == "401":
            raise AuthorizationError()
        if code != "200":
            message = payload.get("message")
            raise InternalError(message if isinstance(message, str) and message else f"Error code {code}")

        try:
            return HistoryResponse.model_validate(payload)
        except ValidationError as exc:
            raise ParseError(f"Unexpected history payload: {exc.error_count()} invalid field(s)") from exc
