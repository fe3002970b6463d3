"""Repository layer for data access.

This layer abstracts external dependencies (PokeAPI, Redis, process memory)
behind protocol-based interfaces. This enables:
- Easy swapping of implementations (memory → Redis, PokeAPI → local mirror, etc.)
- Unit testing with fake implementations
- Clear separation of concerns

The repositories are protocol-based (structural typing), not inheritance-based.
Any class implementing the required methods will satisfy the protocol.
"""

from pokemon_catalog.protocols import CollectionStore, PokemonSource

from .memory_store import MemoryCollectionStore
from .pokeapi_client import PokeApiClient
from .redis_store import RedisCollectionStore

__all__ = [
    "CollectionStore",
    "PokemonSource",
    "MemoryCollectionStore",
    "PokeApiClient",
    "RedisCollectionStore",
]
