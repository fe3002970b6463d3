"""Pokemon source protocol.

Defines the interface for the upstream API that lists Pokemon and
resolves their detail records. The default implementation talks to
the public PokeAPI over HTTP.
"""

from typing import Protocol, runtime_checkable

from pokemon_catalog.entities import ListPage, Pokemon


@runtime_checkable
class PokemonSource(Protocol):
    """Protocol for upstream Pokemon data sources."""

    async def fetch_list(self, limit: int, offset: int = 0) -> ListPage:
        """Fetch one page of Pokemon references.

        Args:
            limit: Page size
            offset: Index of the first reference

        Returns:
            The list page envelope

        Raises:
            Exception: Implementation-specific failure; callers treat it as "no data"
        """
        ...

    async def fetch_pokemon(self, id_or_name: int | str) -> Pokemon:
        """Fetch and map a single detail record.

        Args:
            id_or_name: Dex number or Pokemon name

        Returns:
            The mapped Pokemon

        Raises:
            Exception: Implementation-specific failure for this record
        """
        ...
