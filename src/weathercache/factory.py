from __future__ import annotations

import logging

from .adapters.weather import OWMCacheClient, OWMClient, Transport
from .domain.errors import InvalidConfigurationError
from .settings import ClientSettings
from .storage.cache import CachedOutcome, CacheKey, LruCache

LOGGER = logging.getLogger(__name__)


def create_client(
    api_host: str,
    api_key: str,
    timeout: float,
    *,
    use_ssl: bool = True,
    transport: Transport | None = None,
) -> OWMClient:
    return OWMClient(
        api_host=api_host,
        api_key=api_key,
        timeout=timeout,
        use_ssl=use_ssl,
        transport=transport,
    )


def _validate(cache_size: int, geo_precision: int) -> None:
    if geo_precision <= 0:
        raise InvalidConfigurationError("geoPrecision must be greater than 0")
    if cache_size <= 0:
        raise InvalidConfigurationError("cacheSize must be greater than 0")


def create_cache_client(
    api_host: str,
    api_key: str,
    timeout: float,
    cache_size: int,
    geo_precision: int,
    *,
    use_ssl: bool = True,
    transport: Transport | None = None,
) -> OWMCacheClient:
    """Build a history client backed by an LRU cache of ``cache_size`` entries.

    ``geo_precision`` is the n-th part of a degree coordinates are rounded to
    before lookup: 45.678 becomes 46.0, 45.5, 45.7 and 45.68 for precisions
    1, 2, 10 and 100. Precision 1 can merge points up to ~60 km apart, 2 up
    to ~30 km. A size covering the expected request volume plus ~1% for
    cached errors is a reasonable starting point.

    Raises ``InvalidConfigurationError`` for a non-positive precision, then for
    a non-positive cache size; only the first failing check is reported.
    """
    try:
        _validate(cache_size, geo_precision)
    except InvalidConfigurationError as exc:
        LOGGER.warning("Rejected cache client configuration: %s", exc.message)
        raise

    cache: LruCache[CacheKey, CachedOutcome] = LruCache(cache_size)
    client = create_client(api_host, api_key, timeout, use_ssl=use_ssl, transport=transport)
    LOGGER.info(
        "Created cache client for %s (cache_size=%s, geo_precision=%s)",
        client.api_host,
        cache_size,
        geo_precision,
    )
    return OWMCacheClient(cache=cache, client=client, geo_precision=geo_precision)


def create_cache_client_from_settings(
    settings: ClientSettings,
    *,
    transport: Transport | None = None,
) -> OWMCacheClient:
    return create_cache_client(
        settings.api_host,
        settings.api_key,
        settings.timeout_seconds,
        settings.cache_size,
        settings.geo_precision,
        use_ssl=settings.use_ssl,
        transport=transport,
    )
