from .cache import (
    CachedOutcome,
    CacheKey,
    LruCache,
    make_cache_key,
    round_position,
)

__all__ = [
    "CachedOutcome",
    "CacheKey",
    "LruCache",
    "make_cache_key",
    "round_position",
]
