"""Redis implementation of CollectionStore.

Persists the collection under a single fixed key as a JSON document
``{"data": [...], "timestamp": <epoch seconds>}``. The payload is
self-invalidating: a read that finds a stale timestamp deletes the key
and reports a miss. Redis also expires the key on its own.

Redis is a best-effort layer behind the in-memory store, so connection
errors are logged and treated as misses.
"""

import json
import logging
import time
from collections.abc import Callable
from typing import Any

import redis

from pokemon_catalog.config import get_redis_client, settings
from pokemon_catalog.entities import Pokemon

logger = logging.getLogger(__name__)


def _serialize(pokemon: Pokemon) -> dict[str, Any]:
    return {
        "id": pokemon.id,
        "name": pokemon.name,
        "types": list(pokemon.types),
        "imageUrl": pokemon.image_url,
    }


def _deserialize(item: dict[str, Any]) -> Pokemon:
    return Pokemon(
        id=int(item["id"]),
        name=item["name"],
        types=tuple(item.get("types") or ()),
        image_url=item.get("imageUrl") or "",
    )


class RedisCollectionStore:
    """Redis-backed single-slot store.

    This class satisfies the CollectionStore protocol through structural
    typing - no explicit inheritance needed.
    """

    def __init__(
        self,
        redis_client: redis.Redis | None = None,
        key: str | None = None,
        ttl: int | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """Initialize the Redis collection store.

        Args:
            redis_client: Redis client instance. If None, creates default.
            key: Cache key. Defaults to settings.persistent_cache_key.
            ttl: Time-to-live in seconds. Defaults to settings.persistent_cache_ttl.
            clock: Time source returning epoch seconds (injectable for tests).
        """
        self._client = redis_client or get_redis_client()
        self._key = key or settings.persistent_cache_key
        self._ttl = ttl or settings.persistent_cache_ttl
        self._clock = clock

    @classmethod
    def create(
        cls,
        key: str | None = None,
        ttl: int | None = None,
    ) -> "RedisCollectionStore":
        """Factory method to create RedisCollectionStore with defaults.

        Args:
            key: Cache key. If None, uses settings.
            ttl: Entry TTL in seconds. If None, uses settings.

        Returns:
            Configured RedisCollectionStore
        """
        return cls(key=key, ttl=ttl)

    def get(self) -> list[Pokemon] | None:
        """Read the collection, deleting it if stale.

        Returns:
            The collection, or None when missing, stale, corrupt or unreachable
        """
        try:
            raw = self._client.get(self._key)
        except redis.RedisError as e:
            logger.warning("Persistent cache read failed: %s", e)
            return None

        if raw is None:
            return None

        try:
            payload = json.loads(raw)
            timestamp = float(payload["timestamp"])
            data = payload["data"]
        except (ValueError, KeyError, TypeError) as e:
            logger.warning("Discarding corrupt persistent cache entry %s: %s", self._key, e)
            self._delete()
            return None

        if self._clock() - timestamp >= self._ttl:
            logger.info("Persistent cache entry %s is stale, removing it", self._key)
            self._delete()
            return None

        try:
            return [_deserialize(item) for item in data]
        except (ValueError, KeyError, TypeError) as e:
            logger.warning("Discarding corrupt persistent cache entry %s: %s", self._key, e)
            self._delete()
            return None

    def put(self, pokemon: list[Pokemon]) -> None:
        """Store the collection with the current timestamp.

        Args:
            pokemon: The full collection
        """
        payload = json.dumps(
            {
                "data": [_serialize(p) for p in pokemon],
                "timestamp": self._clock(),
            }
        )
        try:
            self._client.set(self._key, payload, ex=self._ttl)
        except redis.RedisError as e:
            logger.warning("Persistent cache write failed: %s", e)

    def clear(self) -> None:
        """Remove the stored collection."""
        self._delete()

    def _delete(self) -> None:
        try:
            self._client.delete(self._key)
        except redis.RedisError as e:
            logger.warning("Persistent cache delete failed: %s", e)

    def health_check(self) -> bool:
        """Check if Redis is accessible.

        Returns:
            True if healthy, False otherwise
        """
        try:
            return bool(self._client.ping())
        except redis.RedisError:
            return False
