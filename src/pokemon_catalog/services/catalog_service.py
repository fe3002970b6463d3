"""Catalog service for core business logic.

This service orchestrates the collection lifecycle by coordinating
the fetcher (upstream data) and the collection stores (caching), and
exposes the browsing pipeline over the cached collection.
"""

import logging

from pokemon_catalog.entities import CatalogSnapshot, Pokemon
from pokemon_catalog.protocols import CollectionStore

from . import pipeline
from .fetcher import PokemonFetcher
from .view_state import ViewStateController

logger = logging.getLogger(__name__)

FETCH_ERROR = "Failed to fetch Pokemon data"


class CatalogService:
    """Core catalog orchestration service.

    Lookup order for the collection:
    1. In-memory store (1 hour TTL)
    2. Persistent store, if configured (24 hour TTL); a hit warms memory
    3. A fresh fetch, stored in both layers when non-empty

    Example:
        ```python
        service = CatalogService.create(
            fetcher=PokemonFetcher.create(source=PokeApiClient.create()),
            memory_store=MemoryCollectionStore(),
            persistent_store=RedisCollectionStore.create(),
        )
        snapshot = await service.get_snapshot()
        print(snapshot.source, len(snapshot.pokemon))
        ```
    """

    def __init__(
        self,
        fetcher: PokemonFetcher,
        memory_store: CollectionStore,
        persistent_store: CollectionStore | None = None,
    ) -> None:
        """Initialize the catalog service.

        Args:
            fetcher: Fetcher for the full collection (required).
            memory_store: Process-local store (required).
            persistent_store: Optional store that survives restarts.
        """
        self._fetcher = fetcher
        self._memory = memory_store
        self._persistent = persistent_store

    @classmethod
    def create(
        cls,
        fetcher: PokemonFetcher,
        memory_store: CollectionStore,
        persistent_store: CollectionStore | None = None,
    ) -> "CatalogService":
        """Factory method to create CatalogService.

        Args:
            fetcher: Fetcher for the full collection (required).
            memory_store: Process-local store (required).
            persistent_store: Optional store that survives restarts.

        Returns:
            Configured CatalogService instance
        """
        return cls(
            fetcher=fetcher,
            memory_store=memory_store,
            persistent_store=persistent_store,
        )

    async def get_snapshot(self) -> CatalogSnapshot:
        """Return the collection from the nearest fresh layer.

        Returns:
            CatalogSnapshot; empty with ``error`` set if the fetch failed
        """
        cached = self._memory.get()
        if cached is not None:
            logger.info("Using in-memory cached Pokemon data")
            return CatalogSnapshot(pokemon=tuple(cached), source="memory")

        if self._persistent is not None:
            stored = self._persistent.get()
            if stored:
                logger.info("Using persistent cached Pokemon data (%d Pokemon)", len(stored))
                self._memory.put(stored)
                return CatalogSnapshot(pokemon=tuple(stored), source="persistent")

        return await self.refresh()

    async def refresh(self) -> CatalogSnapshot:
        """Fetch the collection from upstream and store it.

        A list failure is converted to an empty snapshot with an error;
        an empty result is never cached so the next call retries.

        Returns:
            CatalogSnapshot with source "fresh"
        """
        logger.info("Fetching fresh Pokemon data from PokeAPI...")
        try:
            pokemon: list[Pokemon] = await self._fetcher.fetch_all()
        except Exception:
            logger.exception("Critical error fetching Pokemon data")
            return CatalogSnapshot(pokemon=(), source="fresh", error=FETCH_ERROR)

        if pokemon:
            self._memory.put(pokemon)
            if self._persistent is not None:
                self._persistent.put(pokemon)
        logger.info("Fetched and cached %d Pokemon", len(pokemon))
        return CatalogSnapshot(pokemon=tuple(pokemon), source="fresh")

    async def browse(
        self,
        type_param: str | None = None,
        page_param: str | None = None,
        toggle: str | None = None,
        step: int = 0,
    ) -> tuple[CatalogSnapshot, ViewStateController]:
        """Restore browsing state from query values and apply one action.

        Args:
            type_param: Comma-separated selected types
            page_param: 1-based page number
            toggle: Type to toggle, if any
            step: Page delta to apply after the toggle (0 for none)

        Returns:
            The snapshot used and the resulting view state
        """
        snapshot = await self.get_snapshot()
        view = ViewStateController.from_query(
            snapshot.pokemon,
            {"type": type_param, "page": page_param},
        )
        if toggle:
            view.toggle_type(toggle)
        if step:
            view.go_to_page(step)
        return snapshot, view

    async def available_types(self) -> list[str]:
        """List the types present in the collection, or the default vocabulary."""
        snapshot = await self.get_snapshot()
        return pipeline.available_types(snapshot.pokemon)

    def clear(self) -> None:
        """Drop the collection from every cache layer."""
        self._memory.clear()
        if self._persistent is not None:
            self._persistent.clear()

    def persistent_status(self) -> str:
        """Describe the persistent layer: "disabled", "connected" or "unavailable"."""
        if self._persistent is None:
            return "disabled"
        return "connected" if self._persistent.health_check() else "unavailable"
