from __future__ import annotations

import copy

from ...domain.models import HistoryResponse, Position, Timestamp
from ...storage.cache import CachedOutcome, CacheKey, LruCache, make_cache_key
from .base import HistoryClient, WeatherError


class OWMCacheClient:
    """History client that memoizes coordinate lookups per geo bucket and time window.

    Both responses and ``WeatherError`` failures are stored, so a rejected API
    key or a failing endpoint is not queried again until the entry is evicted.
    Concurrent misses on the same key may each reach the upstream API; the
    last one to finish owns the cached entry.
    """

    def __init__(
        self,
        *,
        cache: LruCache[CacheKey, CachedOutcome],
        client: HistoryClient,
        geo_precision: int,
    ) -> None:
        self._cache = cache
        self._client = client
        self._geo_precision = geo_precision

    @property
    def geo_precision(self) -> int:
        return self._geo_precision

    @property
    def cache_size(self) -> int:
        return len(self._cache)

    def history_by_coords(
        self,
        latitude: float,
        longitude: float,
        start: Timestamp,
        end: Timestamp,
    ) -> HistoryResponse:
        key = make_cache_key(Position(latitude, longitude), self._geo_precision, start, end)
        cached = self._cache.get(key)
        if cached is None:
            cached = self._fetch(latitude, longitude, start, end)
            self._cache.put(key, cached)

        if isinstance(cached, WeatherError):
            # Raise a copy; the cached entry stays untouched.
            raise copy.copy(cached)
        return cached

    def history_by_id(
        self,
        city_id: int,
        *,
        start: Timestamp | None = None,
        end: Timestamp | None = None,
    ) -> HistoryResponse:
        return self._client.history_by_id(city_id, start=start, end=end)

    def history_by_name(
        self,
        name: str,
        *,
        start: Timestamp | None = None,
        end: Timestamp | None = None,
    ) -> HistoryResponse:
        return self._client.history_by_name(name, start=start, end=end)

    def _fetch(
        self,
        latitude: float,
        longitude: float,
        start: Timestamp,
        end: Timestamp,
    ) -> CachedOutcome:
        try:
            return self._client.history_by_coords(latitude, longitude, start, end)
        except WeatherError as exc:
            exc.__cause__ = None
            exc.__context__ = None
            return exc.with_traceback(None)
