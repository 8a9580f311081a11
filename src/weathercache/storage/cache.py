from __future__ import annotations

import math
import threading
from dataclasses import dataclass
from typing import Generic, Hashable, TypeVar, Union

from cachetools import LRUCache

from ..domain.errors import WeatherError
from ..domain.models import BucketedPosition, HistoryResponse, Position, Timestamp, to_unix_seconds

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

CachedOutcome = Union[HistoryResponse, WeatherError]


def _round_half_up(value: float, precision: int) -> float:
    return math.floor(value * precision + 0.5) / precision


def round_position(position: Position, precision: int) -> BucketedPosition:
    """Snap both axes to the nearest multiple of ``1/precision`` degrees.

    Ties round toward positive infinity, so 45.5 becomes 46.0 and -73.5
    becomes -73.0 at precision 1. No clamping to the geographic range is done.
    """
    return BucketedPosition(
        latitude=_round_half_up(position.latitude, precision),
        longitude=_round_half_up(position.longitude, precision),
    )


@dataclass(frozen=True, slots=True)
class CacheKey:
    center: BucketedPosition
    start: int
    end: int


def make_cache_key(
    position: Position,
    precision: int,
    start: Timestamp,
    end: Timestamp,
) -> CacheKey:
    return CacheKey(
        center=round_position(position, precision),
        start=to_unix_seconds(start),
        end=to_unix_seconds(end),
    )


class LruCache(Generic[K, V]):
    """Bounded least-recently-used map safe to share between threads."""

    def __init__(self, maxsize: int) -> None:
        if maxsize <= 0:
            raise ValueError("maxsize must be > 0")
        self._data: LRUCache[K, V] = LRUCache(maxsize=maxsize)
        self._lock = threading.Lock()

    def get(self, key: K) -> V | None:
        with self._lock:
            return self._data.get(key)

    def put(self, key: K, value: V) -> None:
        with self._lock:
            self._data[key] = value

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    @property
    def maxsize(self) -> int:
        return int(self._data.maxsize)
