"""Domain entities for internal representation.

These are pure dataclasses (frozen) used internally by services
and repositories. They are NOT used for API contracts - use DTOs
from the dto package for that.

Entities should have:
- No JSON serialization logic
- No Pydantic validation
- No external dependencies
- Pure domain logic only
"""

from .catalog import CatalogSnapshot, PageResult
from .pokemon import EnrichedPokemon, ListPage, Pokemon, PokemonRef

__all__ = [
    "CatalogSnapshot",
    "EnrichedPokemon",
    "ListPage",
    "PageResult",
    "Pokemon",
    "PokemonRef",
]
