"""Pokemon Catalog - cached PokeAPI browsing with type filters.

This package provides a layered architecture for the catalog:

Layers:
    - protocols: Interface contracts (CollectionStore, PokemonSource)
    - repositories: Data access implementations (PokeAPI, memory, Redis)
    - services: Business logic (fetcher, pipeline, view state, catalog)
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (API contracts)
    - entities: Domain models (internal)

Usage:
    ```python
    from pokemon_catalog.services import pipeline

    page = pipeline.apply(pokemon, ["grass", "poison"], page=0)
    ```

For HTTP API:
    ```python
    from pokemon_catalog.api.app import app
    ```
"""

from pokemon_catalog.config import get_redis_client, settings
from pokemon_catalog.dto import BrowseRequest, BrowseResponse, PokemonItem
from pokemon_catalog.entities import CatalogSnapshot, EnrichedPokemon, PageResult, Pokemon, PokemonRef
from pokemon_catalog.handlers import CatalogHandler
from pokemon_catalog.protocols import CollectionStore, PokemonSource
from pokemon_catalog.repositories import MemoryCollectionStore, PokeApiClient, RedisCollectionStore
from pokemon_catalog.services import CatalogService, PokemonFetcher, ViewStateController

__all__ = [
    # Configuration
    "settings",
    "get_redis_client",
    # Protocols (interfaces)
    "CollectionStore",
    "PokemonSource",
    # Services (business logic)
    "CatalogService",
    "PokemonFetcher",
    "ViewStateController",
    # Handlers (HTTP)
    "CatalogHandler",
    # Repositories (data access)
    "MemoryCollectionStore",
    "PokeApiClient",
    "RedisCollectionStore",
    # Entities (domain models)
    "CatalogSnapshot",
    "EnrichedPokemon",
    "PageResult",
    "Pokemon",
    "PokemonRef",
    # DTOs (API contracts)
    "BrowseRequest",
    "BrowseResponse",
    "PokemonItem",
]
