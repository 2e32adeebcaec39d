"""Storage layer: key-value cache holding the current JHU snapshot."""

from data.storage.cache_store import (
    CacheGateway,
    InMemoryCacheStore,
    RedisCacheStore,
    load_locations,
    save_locations,
)

__all__ = [
    "CacheGateway",
    "InMemoryCacheStore",
    "RedisCacheStore",
    "load_locations",
    "save_locations",
]
