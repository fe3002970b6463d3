"""
Tests for the filter/sort/paginate pipeline.
"""

import math

from pokemon_catalog.entities import EnrichedPokemon, Pokemon
from pokemon_catalog.services import pipeline
from pokemon_catalog.services.pipeline import ITEMS_PER_PAGE


def ids(items):
    return [p.id for p in items]


def test_scenario_single_type(scenario):
    """Grass filter keeps single and dual grass types, ordered by id."""
    result = pipeline.apply(scenario, ["grass"], 0)
    assert ids(result.items) == [1, 2]
    assert result.total_pages == 1


def test_scenario_two_types(scenario):
    """Two-type filter only keeps dual-typed Pokemon with both types selected."""
    result = pipeline.apply(scenario, ["grass", "poison"], 0)
    assert ids(result.items) == [2]
    assert result.items[0].matching_slots == (1, 2)
    assert result.items[0].matching_types == ("grass", "poison")


def test_scenario_fire(scenario):
    result = pipeline.apply(scenario, ["fire"], 0)
    assert ids(result.items) == [3]


def test_empty_filter_keeps_upstream_order(large_collection):
    """Without a filter each page is the plain slice in original order."""
    shuffled = list(reversed(large_collection))
    for page in range(3):
        result = pipeline.apply(shuffled, [], page)
        assert list(result.items) == shuffled[page * ITEMS_PER_PAGE : page * ITEMS_PER_PAGE + ITEMS_PER_PAGE]
        assert not any(isinstance(p, EnrichedPokemon) for p in result.items)


def test_single_type_results_carry_type_and_ascend(large_collection):
    shuffled = list(reversed(large_collection))
    items = pipeline.filter_and_sort(shuffled, ["poison"])
    assert items
    assert all("poison" in p.types for p in items)
    assert ids(items) == sorted(ids(items))
    assert len(set(ids(items))) == len(items)


def test_two_types_exclude_single_typed(large_collection):
    items = pipeline.filter_and_sort(large_collection, ["grass", "poison"])
    assert items
    for p in items:
        assert len(p.types) == 2
        assert set(p.types) <= {"grass", "poison"}


def test_two_types_sort_by_first_matching_then_id(large_collection):
    """Selection order decides the group, id breaks ties inside a group."""
    items = pipeline.filter_and_sort(large_collection, ["poison", "grass"])
    keys = [(["poison", "grass"].index(p.matching_types[0]), p.id) for p in items]
    assert keys == sorted(keys)
    # Both ("grass", "poison") and ("poison", "grass") Pokemon list poison first
    assert all(p.matching_types == ("poison", "grass") for p in items)
    assert all(p.matching_slots == (1, 2) for p in items)


def test_three_types_use_multi_type_rule(large_collection):
    items = pipeline.filter_and_sort(large_collection, ["fire", "bug", "flying", "poison"])
    assert {tuple(sorted(p.types)) for p in items} == {("fire", "flying"), ("bug", "poison")}
    groups = [p.matching_types[0] for p in items]
    assert groups == sorted(groups, key=["fire", "bug", "flying", "poison"].index)


def test_enrich_orders_matching_types_by_selection():
    charizard = Pokemon(id=6, name="charizard", types=("fire", "flying"))
    enriched = pipeline.enrich(charizard, ("water", "flying", "fire"))
    assert enriched.matching_types == ("flying", "fire")
    assert enriched.matching_slots == (2, 3)


def test_duplicate_selection_is_ignored(scenario):
    assert ids(pipeline.apply(scenario, ["grass", "grass"], 0).items) == [1, 2]


def test_total_pages_is_ceiling(large_collection):
    for selected in ([], ["grass"], ["fire"], ["grass", "poison"], ["dragon"]):
        result = pipeline.apply(large_collection, selected, 0)
        assert result.total_pages == math.ceil(result.total_count / ITEMS_PER_PAGE)


def test_no_matches_yields_zero_pages(scenario):
    result = pipeline.apply(scenario, ["dragon"], 0)
    assert result.total_pages == 0
    assert result.total_count == 0
    assert result.items == ()


def test_out_of_range_pages_are_empty(large_collection):
    assert pipeline.apply(large_collection, [], 99).items == ()
    assert pipeline.apply(large_collection, [], -1).items == ()
    assert pipeline.apply(large_collection, [], 4).items == tuple(large_collection[96:])


def test_apply_is_idempotent_and_pure(large_collection):
    before = list(large_collection)
    first = pipeline.apply(large_collection, ["poison", "grass"], 0)
    second = pipeline.apply(large_collection, ["poison", "grass"], 0)
    assert first == second
    assert large_collection == before


def test_count_pages():
    assert pipeline.count_pages(0) == 0
    assert pipeline.count_pages(1) == 1
    assert pipeline.count_pages(24) == 1
    assert pipeline.count_pages(25) == 2


def test_available_types(scenario):
    assert pipeline.available_types(scenario) == ["fire", "grass", "poison"]
    assert pipeline.available_types([]) == list(pipeline.DEFAULT_TYPES)
