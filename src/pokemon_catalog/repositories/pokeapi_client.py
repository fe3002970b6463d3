"""PokeAPI implementation of PokemonSource.

Talks to the public PokeAPI (https://pokeapi.co/api/v2) through an
async httpx client:

- GET /pokemon?limit=L&offset=O -> {count, next, previous, results: [{name, url}]}
- GET /pokemon/{idOrName}       -> {id, name, types: [{slot, type: {name, url}}], sprites}

Only the fields the catalog needs are mapped; everything else in the
detail payload is ignored.
"""

from typing import Any

import httpx

from pokemon_catalog.config import settings
from pokemon_catalog.entities import ListPage, Pokemon, PokemonRef


def parse_list_page(data: dict[str, Any]) -> ListPage:
    """Map a list endpoint payload to a ListPage."""
    results = tuple(
        PokemonRef(name=item.get("name", ""), url=item.get("url", ""))
        for item in data.get("results") or []
        if isinstance(item, dict)
    )
    return ListPage(
        count=int(data.get("count") or 0),
        next=data.get("next"),
        previous=data.get("previous"),
        results=results,
    )


def resolve_image_url(sprites: dict[str, Any] | None) -> str:
    """Pick the sprite URL: animated showdown sprite, else the default one, else "".

    Args:
        sprites: The ``sprites`` object of a detail payload

    Returns:
        The first non-empty URL of the fallback chain
    """
    if not sprites:
        return ""
    showdown = ((sprites.get("other") or {}).get("showdown") or {}).get("front_default")
    if showdown:
        return showdown
    front_default = sprites.get("front_default")
    if front_default:
        return front_default
    return ""


def parse_pokemon(data: dict[str, Any]) -> Pokemon:
    """Map a detail endpoint payload to a Pokemon.

    Types are ordered by their upstream slot so that the primary type
    always comes first.

    Raises:
        KeyError: If ``id`` or ``name`` is missing
        ValueError: If ``id`` is not numeric
    """
    type_entries = sorted(
        (entry for entry in data.get("types") or [] if isinstance(entry, dict)),
        key=lambda entry: entry.get("slot", 0),
    )
    return Pokemon(
        id=int(data["id"]),
        name=data["name"],
        types=tuple(entry["type"]["name"] for entry in type_entries),
        image_url=resolve_image_url(data.get("sprites")),
    )


class PokeApiClient:
    """PokeAPI-based implementation of PokemonSource protocol.

    This class satisfies the PokemonSource protocol through structural
    typing - no explicit inheritance needed.

    Example:
        ```python
        client = PokeApiClient.create()

        page = await client.fetch_list(limit=20)
        bulbasaur = await client.fetch_pokemon(1)
        print(bulbasaur.types)  # ('grass', 'poison')

        await client.close()
        ```
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the PokeAPI client.

        Args:
            base_url: PokeAPI base URL. Defaults to settings.pokeapi_base_url.
            timeout: Request timeout in seconds. Defaults to settings.http_timeout.
            client: Pre-built httpx client (tests pass one with a mock transport).
        """
        self._base_url = (base_url or settings.pokeapi_base_url).rstrip("/")
        self._timeout = timeout or settings.http_timeout
        self._client = client

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy-load the async HTTP client.

        Returns:
            The httpx.AsyncClient instance
        """
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._timeout,
                headers={"Accept": "application/json"},
                limits=httpx.Limits(max_connections=100, max_keepalive_connections=20),
            )
        return self._client

    @classmethod
    def create(
        cls,
        base_url: str | None = None,
        timeout: float | None = None,
    ) -> "PokeApiClient":
        """Factory method to create PokeApiClient with defaults.

        Args:
            base_url: PokeAPI base URL. If None, uses settings.
            timeout: Request timeout. If None, uses settings.

        Returns:
            Configured PokeApiClient
        """
        return cls(base_url=base_url, timeout=timeout)

    @property
    def base_url(self) -> str:
        return self._base_url

    async def _get_json(self, path: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        response = await self.client.get(f"{self._base_url}{path}", params=params)
        response.raise_for_status()
        data = response.json()
        if not isinstance(data, dict):
            raise ValueError(f"Unexpected response format from {path}: {type(data).__name__}")
        return data

    async def fetch_list(self, limit: int, offset: int = 0) -> ListPage:
        """Fetch one page of Pokemon references.

        Args:
            limit: Page size
            offset: Index of the first reference

        Returns:
            The list page envelope

        Raises:
            httpx.HTTPError: If the request fails or returns a non-2xx status
            ValueError: If the response is not a JSON object
        """
        data = await self._get_json("/pokemon", params={"limit": limit, "offset": offset})
        return parse_list_page(data)

    async def fetch_pokemon(self, id_or_name: int | str) -> Pokemon:
        """Fetch and map a single detail record.

        Args:
            id_or_name: Dex number or Pokemon name

        Returns:
            The mapped Pokemon

        Raises:
            httpx.HTTPError: If the request fails or returns a non-2xx status
            ValueError: If the payload cannot be mapped
            KeyError: If required fields are missing
        """
        data = await self._get_json(f"/pokemon/{id_or_name}")
        return parse_pokemon(data)

    async def close(self) -> None:
        """Close the async HTTP client.

        Should be called when shutting down the application.
        """
        if self._client is not None:
            await self._client.aclose()
            self._client = None
