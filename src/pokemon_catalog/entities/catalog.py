"""Catalog-level domain entities."""

from dataclasses import dataclass
from typing import Literal

from .pokemon import Pokemon

CacheSource = Literal["memory", "persistent", "fresh"]


@dataclass(frozen=True)
class PageResult:
    """One page of the filtered and sorted collection.

    Attributes:
        items: Pokemon on the requested page (enriched when a filter is active)
        total_pages: Number of pages for the filtered collection
        total_count: Number of Pokemon that passed the filter
    """

    items: tuple[Pokemon, ...]
    total_pages: int
    total_count: int


@dataclass(frozen=True)
class CatalogSnapshot:
    """The materialized collection together with where it came from.

    Attributes:
        pokemon: The full collection
        source: Cache layer that served it, or "fresh" after a fetch
        error: Set when the upstream fetch failed and the collection is empty
    """

    pokemon: tuple[Pokemon, ...]
    source: CacheSource
    error: str | None = None

    @property
    def is_empty(self) -> bool:
        return not self.pokemon
