"""Protocol interfaces for swappable implementations.

This package contains protocol definitions using structural typing.
Protocols enable:
- Easy swapping of implementations (in-memory → Redis, PokeAPI → local mirror, etc.)
- Unit testing with fake implementations
- Clear separation of concerns

Usage:
    ```python
    from pokemon_catalog.protocols import CollectionStore, PokemonSource

    # Type hints work with any implementation
    store: CollectionStore = MemoryCollectionStore(ttl=3600)  # works
    store: CollectionStore = RedisCollectionStore.create()     # also works
    ```
"""

from .collection_store import CollectionStore
from .pokemon_source import PokemonSource

__all__ = [
    "CollectionStore",
    "PokemonSource",
]
