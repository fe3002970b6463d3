"""Response DTOs for API endpoints."""

from pydantic import BaseModel, ConfigDict, Field

from pokemon_catalog.entities import EnrichedPokemon, Pokemon


class PokemonItem(BaseModel):
    """Single Pokemon as rendered by the front-end.

    ``matchingTypes`` and ``slots`` are only present when a type filter
    is active.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(..., description="National dex number (0 for unresolved entries)")
    name: str = Field(..., description="Pokemon name")
    types: list[str] = Field(default_factory=list, description="Type names ordered by slot")
    image_url: str = Field("", alias="imageUrl", description="Sprite URL or empty string")
    matching_types: list[str] | None = Field(
        None,
        alias="matchingTypes",
        description="Selected types this Pokemon carries, in selection order",
    )
    slots: list[int] | None = Field(
        None,
        description="1-based selection position of each matching type",
    )

    @classmethod
    def from_entity(cls, pokemon: Pokemon) -> "PokemonItem":
        enriched = isinstance(pokemon, EnrichedPokemon)
        return cls(
            id=pokemon.id,
            name=pokemon.name,
            types=list(pokemon.types),
            image_url=pokemon.image_url,
            matching_types=list(pokemon.matching_types) if enriched else None,
            slots=list(pokemon.matching_slots) if enriched else None,
        )


class BrowseResponse(BaseModel):
    """Response DTO for one page of the browsing view."""

    model_config = ConfigDict(populate_by_name=True)

    items: list[PokemonItem] = Field(default_factory=list, description="Pokemon on this page")
    page: int = Field(..., description="Current page (1-based)", ge=1)
    total_pages: int = Field(..., alias="totalPages", description="Number of pages", ge=0)
    total_count: int = Field(..., alias="totalCount", description="Pokemon matching the filter", ge=0)
    selected_types: list[str] = Field(
        default_factory=list,
        alias="selectedTypes",
        description="Selected types, in selection order",
    )
    query: str = Field(..., description="Canonical query string for the browsing page URL")
    has_previous: bool = Field(..., alias="hasPrevious")
    has_next: bool = Field(..., alias="hasNext")
    cache_source: str = Field(..., alias="cacheSource", description="memory, persistent or fresh")
    error: str | None = Field(None, description="User-facing message when no data could be loaded")


class TypesResponse(BaseModel):
    """Response DTO for the filter bar types."""

    types: list[str] = Field(..., description="Available type names, sorted")


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    model_config = ConfigDict(populate_by_name=True)

    status: str = Field(..., description="Health status: 'healthy' or 'degraded'")
    persistent_cache: str = Field(
        ...,
        alias="persistentCache",
        description="Persistent cache state: 'connected', 'unavailable' or 'disabled'",
    )
