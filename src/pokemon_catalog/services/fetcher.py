"""Entity fetcher for the full Pokemon collection.

Resolves the reference list first, then the detail records in
bounded batches. The contract is best-effort (at-most-once):

- a failed detail request becomes a placeholder record
- a failed batch is skipped and logged
- a failed list request propagates; the caller treats it as "no data"
"""

import asyncio
import logging
import re
from collections.abc import Awaitable, Callable

from pokemon_catalog.config import settings
from pokemon_catalog.entities import Pokemon, PokemonRef
from pokemon_catalog.protocols import PokemonSource

logger = logging.getLogger(__name__)

POKEMON_ID_PATTERN = re.compile(r"/pokemon/(\d+)/")


def extract_id_from_url(url: str) -> int:
    """Extract the dex number from a reference URL.

    Args:
        url: A URL such as ``https://pokeapi.co/api/v2/pokemon/25/``

    Returns:
        The numeric id, or 0 when the URL does not contain one
    """
    match = POKEMON_ID_PATTERN.search(url or "")
    return int(match.group(1)) if match else 0


def placeholder_for(ref: PokemonRef) -> Pokemon:
    """Build the stand-in record used when a detail request fails."""
    return Pokemon(
        id=extract_id_from_url(ref.url),
        name=ref.name or "unknown",
        types=(),
        image_url="",
    )


class PokemonFetcher:
    """Fetches and materializes the whole Pokemon collection.

    Example:
        ```python
        fetcher = PokemonFetcher.create(source=PokeApiClient.create())
        pokemon = await fetcher.fetch_all()
        ```
    """

    def __init__(
        self,
        source: PokemonSource,
        batch_size: int | None = None,
        batch_delay: float | None = None,
        total_count: int | None = None,
        list_page_size: int | None = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        """Initialize the fetcher.

        Args:
            source: Upstream data source (required).
            batch_size: Detail requests per batch. Defaults to settings.batch_size.
            batch_delay: Seconds to wait between batches. Defaults to settings.batch_delay.
            total_count: List size requested in single-call mode. Defaults to settings.
            list_page_size: Page size for paged list fetching; 0 means a single call.
            sleep: Awaitable sleep function (injectable for tests).

        Raises:
            ValueError: If batch_size is outside 1..100 or batch_delay is negative
        """
        self._source = source
        self._batch_size = settings.batch_size if batch_size is None else batch_size
        if not 1 <= self._batch_size <= 100:
            raise ValueError(f"batch_size must be between 1 and 100, got {self._batch_size}")
        self._batch_delay = settings.batch_delay if batch_delay is None else batch_delay
        if self._batch_delay < 0:
            raise ValueError("batch_delay must not be negative")
        self._total_count = total_count or settings.pokemon_total_count
        self._list_page_size = settings.list_page_size if list_page_size is None else list_page_size
        self._sleep = sleep

    @classmethod
    def create(
        cls,
        source: PokemonSource,
        batch_size: int | None = None,
        batch_delay: float | None = None,
    ) -> "PokemonFetcher":
        """Factory method to create PokemonFetcher with defaults from settings.

        Args:
            source: Upstream data source (required).
            batch_size: Detail requests per batch. If None, uses settings.
            batch_delay: Delay between batches. If None, uses settings.

        Returns:
            Configured PokemonFetcher
        """
        return cls(source=source, batch_size=batch_size, batch_delay=batch_delay)

    async def fetch_references(self) -> list[PokemonRef]:
        """Fetch the reference list, in one call or page by page.

        In paged mode every request uses the same page size and the loop
        stops once the server-reported count is exhausted.

        Raises:
            Exception: Whatever the source raises for the list endpoint
        """
        if not self._list_page_size:
            page = await self._source.fetch_list(limit=self._total_count, offset=0)
            return list(page.results)

        refs: list[PokemonRef] = []
        offset = 0
        while True:
            page = await self._source.fetch_list(limit=self._list_page_size, offset=offset)
            refs.extend(page.results)
            offset += self._list_page_size
            if not page.results or offset >= page.count:
                break
        return refs

    async def _fetch_one(self, ref: PokemonRef) -> Pokemon:
        pokemon_id = extract_id_from_url(ref.url)
        identifier: int | str = pokemon_id or ref.name or 0
        try:
            return await self._source.fetch_pokemon(identifier)
        except Exception as e:
            logger.warning("Error fetching details for Pokemon %s: %s", identifier, e)
            return placeholder_for(ref)

    async def fetch_details(self, refs: list[PokemonRef]) -> list[Pokemon]:
        """Resolve detail records batch by batch.

        Requests inside a batch run concurrently and are joined before the
        next batch starts.

        Args:
            refs: References to resolve

        Returns:
            Resolved records in reference order, minus any skipped batch
        """
        if not refs:
            return []

        results: list[Pokemon] = []
        total = len(refs)
        processed = 0

        for start in range(0, total, self._batch_size):
            batch = refs[start : start + self._batch_size]
            try:
                details = await asyncio.gather(*(self._fetch_one(ref) for ref in batch))
            except Exception:
                logger.exception("Error processing batch %d to %d", start, start + len(batch))
            else:
                results.extend(details)
                processed += len(batch)
                logger.info(
                    "Processed %d/%d Pokemon (%d%%)", processed, total, round(processed / total * 100)
                )

            if start + self._batch_size < total and self._batch_delay > 0:
                await self._sleep(self._batch_delay)

        return results

    async def fetch_all(self) -> list[Pokemon]:
        """Fetch the reference list and resolve every detail record.

        Returns:
            The materialized collection, possibly shorter than the list

        Raises:
            Exception: Only when the list request itself fails
        """
        refs = await self.fetch_references()
        logger.info("Fetching details for %d Pokemon in batches of %d", len(refs), self._batch_size)
        return await self.fetch_details(refs)

    @property
    def batch_size(self) -> int:
        """Get the number of detail requests per batch."""
        return self._batch_size
