"""
Tests for the catalog service: cache layering and failure handling.
"""

import asyncio

import pytest

from pokemon_catalog.repositories import MemoryCollectionStore, RedisCollectionStore
from pokemon_catalog.services import CatalogService, PokemonFetcher


@pytest.fixture
def build_service(source_factory, fake_redis):
    def build(pokemon, persistent=True, **source_kwargs):
        source = source_factory(pokemon, **source_kwargs)
        fetcher = PokemonFetcher(source, batch_size=20, batch_delay=0, list_page_size=0)
        service = CatalogService.create(
            fetcher=fetcher,
            memory_store=MemoryCollectionStore(ttl=3600),
            persistent_store=RedisCollectionStore(redis_client=fake_redis, key="pokemon-data") if persistent else None,
        )
        return service, source

    return build


def test_fresh_then_memory(build_service, scenario):
    service, source = build_service(scenario)

    first = asyncio.run(service.get_snapshot())
    second = asyncio.run(service.get_snapshot())

    assert first.source == "fresh"
    assert second.source == "memory"
    assert list(second.pokemon) == scenario
    assert len(source.list_calls) == 1


def test_persistent_hit_warms_memory(build_service, scenario, fake_redis):
    RedisCollectionStore(redis_client=fake_redis, key="pokemon-data").put(scenario)
    service, source = build_service(scenario)

    first = asyncio.run(service.get_snapshot())
    second = asyncio.run(service.get_snapshot())

    assert first.source == "persistent"
    assert second.source == "memory"
    assert source.list_calls == []


def test_list_failure_yields_empty_uncached_snapshot(build_service, scenario, fake_redis):
    service, source = build_service(scenario, fail_list=True)

    snapshot = asyncio.run(service.get_snapshot())
    assert snapshot.is_empty
    assert snapshot.error == "Failed to fetch Pokemon data"
    assert fake_redis.data == {}

    source.fail_list = False
    recovered = asyncio.run(service.get_snapshot())
    assert recovered.source == "fresh"
    assert list(recovered.pokemon) == scenario


def test_empty_fetch_is_not_cached(build_service, fake_redis):
    service, source = build_service([])

    snapshot = asyncio.run(service.refresh())
    assert snapshot.is_empty
    assert snapshot.error is None
    assert fake_redis.data == {}

    assert asyncio.run(service.get_snapshot()).source == "fresh"
    assert len(source.list_calls) == 2


def test_clear_forces_refetch(build_service, scenario, fake_redis):
    service, source = build_service(scenario)
    asyncio.run(service.get_snapshot())

    service.clear()

    assert fake_redis.data == {}
    assert asyncio.run(service.get_snapshot()).source == "fresh"
    assert len(source.list_calls) == 2


def test_browse_applies_toggle_and_step(build_service, large_collection):
    service, _ = build_service(large_collection, persistent=False)

    _, view = asyncio.run(service.browse(type_param="grass", page_param="1", toggle="poison"))
    assert view.selected_types == ("grass", "poison")
    assert view.to_query() == "type=grass,poison&page=1"

    _, view = asyncio.run(service.browse(type_param=None, page_param="2", step=1))
    assert view.page == 2


def test_persistent_status(build_service, scenario):
    with_redis, _ = build_service(scenario)
    without_redis, _ = build_service(scenario, persistent=False)
    assert with_redis.persistent_status() == "connected"
    assert without_redis.persistent_status() == "disabled"
