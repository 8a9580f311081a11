from .adapters.weather import (
    AuthorizationError,
    HistoryClient,
    HttpError,
    InternalError,
    OWMCacheClient,
    OWMClient,
    ParseError,
    RequestTimeoutError,
    Transport,
    UrllibTransport,
    WeatherError,
)
from .domain.errors import InvalidConfigurationError
from .domain.models import BucketedPosition, HistoryItem, HistoryResponse, Position
from .factory import create_cache_client, create_cache_client_from_settings, create_client
from .settings import ClientSettings, load_settings
from .storage import CacheKey, LruCache, make_cache_key, round_position

__all__ = [
    "AuthorizationError",
    "BucketedPosition",
    "CacheKey",
    "ClientSettings",
    "HistoryClient",
    "HistoryItem",
    "HistoryResponse",
    "HttpError",
    "InternalError",
    "InvalidConfigurationError",
    "LruCache",
    "OWMCacheClient",
    "OWMClient",
    "ParseError",
    "Position",
    "RequestTimeoutError",
    "Transport",
    "UrllibTransport",
    "WeatherError",
    "create_cache_client",
    "create_cache_client_from_settings",
    "create_client",
    "load_settings",
    "make_cache_key",
    "round_position",
]
