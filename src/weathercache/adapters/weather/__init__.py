from .base import (
    AuthorizationError,
    HistoryClient,
    HttpError,
    InternalError,
    ParseError,
    RequestTimeoutError,
    Transport,
    WeatherError,
)
from .cached import OWMCacheClient
from .openweather import OWMClient, UrllibTransport

__all__ = [
    "AuthorizationError",
    "HistoryClient",
    "HttpError",
    "InternalError",
    "OWMCacheClient",
    "OWMClient",
    "ParseError",
    "RequestTimeoutError",
    "Transport",
    "UrllibTransport",
    "WeatherError",
]
