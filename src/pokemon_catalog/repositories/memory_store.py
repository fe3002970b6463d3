"""Process-local implementation of CollectionStore."""

import time
from collections.abc import Callable

from pokemon_catalog.config import settings
from pokemon_catalog.entities import Pokemon


class MemoryCollectionStore:
    """Single-slot in-memory cache for the Pokemon collection.

    Holds only the most recent collection. ``get`` returns it while
    ``now - last_put < ttl``; afterwards the caller must re-fetch.
    Nothing survives a process restart.
    """

    def __init__(
        self,
        ttl: int | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """Initialize the memory store.

        Args:
            ttl: Time-to-live in seconds. Defaults to settings.cache_ttl.
            clock: Time source returning seconds (injectable for tests).
        """
        self._ttl = ttl or settings.cache_ttl
        self._clock = clock
        self._pokemon: tuple[Pokemon, ...] | None = None
        self._stored_at = 0.0

    def get(self) -> list[Pokemon] | None:
        if self._pokemon is None:
            return None
        if self._clock() - self._stored_at >= self._ttl:
            return None
        return list(self._pokemon)

    def put(self, pokemon: list[Pokemon]) -> None:
        self._pokemon = tuple(pokemon)
        self._stored_at = self._clock()

    def clear(self) -> None:
        self._pokemon = None
        self._stored_at = 0.0

    def health_check(self) -> bool:
        return True

    @property
    def ttl(self) -> int:
        """Get the time-to-live in seconds."""
        return self._ttl
