"""Key-value cache gateway for JHU snapshots.

The snapshot is stored as one JSON string under a fixed key and replaced
wholesale on every ingestion run.
"""

import json
from typing import List, Optional, Protocol

import redis
from loguru import logger

from data.schemas.location import LOCATION_LIST_ADAPTER, JhuLocation
from infra.settings import get_redis_client


class CacheGateway(Protocol):
    """Minimal get/set contract used by ingestion and the read-side views."""

    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...


class RedisCacheStore:
    """
    Redis-backed cache store.

    Errors from the client (redis.RedisError) are not caught here; there is
    no fallback storage, so callers see them.
    """

    def __init__(self, client: redis.Redis):
        """
        Initialize the store.

        Args:
            client: Redis client created with decode_responses=True.
        """
        self.client = client

    @classmethod
    def from_url(cls, url: str | None = None) -> "RedisCacheStore":
        """Build a store from a redis:// URL (defaults to REDIS_URL)."""
        return cls(get_redis_client(url))

    def get(self, key: str) -> Optional[str]:
        value = self.client.get(key)
        if isinstance(value, bytes):
            value = value.decode("utf-8")
        return value

    def set(self, key: str, value: str) -> None:
        self.client.set(key, value)
        logger.debug("Wrote {} bytes to cache key {}", len(value), key)


class InMemoryCacheStore:
    """Dict-backed store for tests, dry runs, and local development."""

    def __init__(self) -> None:
        self._data: dict[str, str] = {}

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


def dump_locations(locations: List[JhuLocation]) -> str:
    """Serialize locations to the cached JSON wire format (camelCase keys)."""
    payload = LOCATION_LIST_ADAPTER.dump_python(locations, mode="json", by_alias=True)
    return json.dumps(payload, ensure_ascii=False)


def save_locations(cache: CacheGateway, key: str, locations: List[JhuLocation]) -> None:
    """
    Write the full location collection under key with a single set call.

    Args:
        cache: Cache store.
        key: Snapshot key (e.g. JHU_V2_KEY).
        locations: Collection to store; replaces whatever was cached.
    """
    cache.set(key, dump_locations(locations))


def load_locations(cache: CacheGateway, key: str) -> Optional[List[JhuLocation]]:
    """
    Read the location collection stored under key.

    Returns:
        List of JhuLocation in stored order, or None if nothing is cached.
    """
    raw = cache.get(key)
    if raw is None:
        logger.debug("No cached snapshot under key {}", key)
        return None
    return LOCATION_LIST_ADAPTER.validate_json(raw)
