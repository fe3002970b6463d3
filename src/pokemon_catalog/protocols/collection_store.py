"""Collection storage protocol.

Defines the interface for a single-slot store holding the fully
materialized Pokemon collection for a bounded time window.

Implementations include:
- Process-local memory (default, 1 hour TTL)
- Redis (optional, survives restarts, 24 hour TTL)
"""

from typing import Protocol, runtime_checkable

from pokemon_catalog.entities import Pokemon


@runtime_checkable
class CollectionStore(Protocol):
    """Protocol for collection cache backends.

    There is exactly one cache key (the whole collection), so no
    per-key eviction policy is involved: a put replaces the previous
    collection wholesale.
    """

    def get(self) -> list[Pokemon] | None:
        """Return the cached collection if it is still fresh.

        Returns:
            The collection, or None when absent or expired
        """
        ...

    def put(self, pokemon: list[Pokemon]) -> None:
        """Replace the cached collection and restart its TTL window.

        Args:
            pokemon: The full collection
        """
        ...

    def clear(self) -> None:
        """Drop the cached collection."""
        ...

    def health_check(self) -> bool:
        """Check if the store is accessible.

        Returns:
            True if healthy, False otherwise
        """
        ...
