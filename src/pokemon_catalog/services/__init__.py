"""Service layer for business logic.

This layer contains the core business logic and orchestration.
Services depend on protocols (interfaces), not concrete implementations,
making them testable and flexible.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Data Access)

Usage:
    ```python
    from pokemon_catalog.services import CatalogService, PokemonFetcher

    fetcher = PokemonFetcher.create(source=PokeApiClient.create())
    catalog = CatalogService.create(fetcher=fetcher, memory_store=MemoryCollectionStore())
    ```
"""

from .catalog_service import CatalogService
from .fetcher import PokemonFetcher, extract_id_from_url
from .view_state import ViewStateController

__all__ = [
    "CatalogService",
    "PokemonFetcher",
    "ViewStateController",
    "extract_id_from_url",
]
