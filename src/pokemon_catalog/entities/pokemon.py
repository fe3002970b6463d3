"""Pokemon domain entities."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class PokemonRef:
    """Lightweight reference returned by the list endpoint.

    Attributes:
        name: The Pokemon name (e.g. "bulbasaur")
        url: Detail URL; the numeric id is its last path segment
    """

    name: str
    url: str


@dataclass(frozen=True)
class ListPage:
    """One page of the upstream list endpoint.

    Attributes:
        count: Total number of Pokemon reported by the server
        next: URL of the next page, if any
        previous: URL of the previous page, if any
        results: References on this page
    """

    count: int
    next: str | None = None
    previous: str | None = None
    results: tuple[PokemonRef, ...] = ()


@dataclass(frozen=True)
class Pokemon:
    """A fully resolved, UI-ready Pokemon record.

    Attributes:
        id: National dex number (0 for unresolved placeholders)
        name: The Pokemon name
        types: Type names ordered by slot (1 or 2 entries, empty for placeholders)
        image_url: Sprite URL, or an empty string when none is available
    """

    id: int
    name: str
    types: tuple[str, ...] = ()
    image_url: str = ""


@dataclass(frozen=True)
class EnrichedPokemon(Pokemon):
    """A Pokemon annotated against an active type filter.

    Attributes:
        matching_types: Types present in the filter, in filter order
        matching_slots: 1-based position of each matching type in the filter
    """

    matching_types: tuple[str, ...] = field(default=())
    matching_slots: tuple[int, ...] = field(default=())
