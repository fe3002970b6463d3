"""Filter, sort and paginate the in-memory Pokemon collection.

Filtering rules:
    - no type selected: everything passes, upstream order is kept
    - one type selected: a Pokemon passes if any of its types matches
    - two or more selected: a Pokemon passes only if it has exactly two
      types and both are selected (single-typed Pokemon are excluded)

Sorting rules:
    - one type selected: ascending id
    - two or more: position of the first matching type in the selection,
      then ascending id

All functions are pure; the input collection is never mutated.
"""

from collections.abc import Iterable, Sequence

from pokemon_catalog.entities import EnrichedPokemon, PageResult, Pokemon

ITEMS_PER_PAGE = 24

DEFAULT_TYPES = (
    "normal", "fighting", "flying", "poison", "ground",
    "rock", "bug", "ghost", "steel", "fire", "water",
    "grass", "electric", "psychic", "ice", "dragon",
    "dark", "fairy", "stellar", "unknown",
)


def normalize_selection(selected: Iterable[str]) -> tuple[str, ...]:
    """Drop empty and duplicate entries, keeping selection order."""
    return tuple(dict.fromkeys(t for t in selected if t))


def matches_types(pokemon: Pokemon, selected: Sequence[str]) -> bool:
    if not selected:
        return True
    if len(selected) == 1:
        return selected[0] in pokemon.types
    if len(pokemon.types) != 2:
        return False
    return all(t in selected for t in pokemon.types)


def enrich(pokemon: Pokemon, selected: Sequence[str]) -> EnrichedPokemon:
    """Annotate a Pokemon with the selected types it carries.

    ``matching_types`` follows selection order and ``matching_slots``
    holds the 1-based selection index of each of them.
    """
    position = {t: i for i, t in enumerate(selected)}
    matching = sorted((t for t in pokemon.types if t in position), key=position.__getitem__)
    return EnrichedPokemon(
        id=pokemon.id,
        name=pokemon.name,
        types=pokemon.types,
        image_url=pokemon.image_url,
        matching_types=tuple(matching),
        matching_slots=tuple(position[t] + 1 for t in matching),
    )


def filter_and_sort(collection: Sequence[Pokemon], selected: Iterable[str]) -> list[Pokemon]:
    """Apply the type filter and ordering to the whole collection."""
    selection = normalize_selection(selected)
    if not selection:
        return list(collection)

    enriched = [enrich(p, selection) for p in collection if matches_types(p, selection)]

    if len(selection) == 1:
        enriched.sort(key=lambda p: p.id)
    else:
        position = {t: i for i, t in enumerate(selection)}
        enriched.sort(key=lambda p: (position[p.matching_types[0]], p.id))
    return enriched


def count_pages(count: int, page_size: int = ITEMS_PER_PAGE) -> int:
    """Return ceil(count / page_size); 0 for an empty result."""
    return -(-count // page_size)


def paginate(items: Sequence[Pokemon], page: int, page_size: int = ITEMS_PER_PAGE) -> PageResult:
    """Slice one zero-based page out of ``items``.

    Out-of-range pages, negative ones included, yield an empty page.
    """
    if page < 0:
        page_items: Sequence[Pokemon] = ()
    else:
        start = page * page_size
        page_items = items[start : start + page_size]
    return PageResult(
        items=tuple(page_items),
        total_pages=count_pages(len(items), page_size),
        total_count=len(items),
    )


def apply(collection: Sequence[Pokemon], selected: Iterable[str], page: int) -> PageResult:
    """Filter, sort and paginate in one step.

    Args:
        collection: The full collection, in upstream order
        selected: Selected type names, in selection order
        page: Zero-based page number

    Returns:
        The requested page with total page and item counts
    """
    return paginate(filter_and_sort(collection, selected), page)


def available_types(collection: Iterable[Pokemon]) -> list[str]:
    """List the distinct types present in the collection.

    Falls back to the default type vocabulary when the collection
    carries no types at all (e.g. before the first successful fetch).
    """
    found = sorted({t for p in collection for t in p.types})
    return found or list(DEFAULT_TYPES)
