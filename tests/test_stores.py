"""
Tests for the memory and Redis collection stores.
"""

import json

import pytest
import redis

from pokemon_catalog.protocols import CollectionStore
from pokemon_catalog.repositories import MemoryCollectionStore, RedisCollectionStore


class FakeClock:
    def __init__(self, now=1_000.0):
        self.now = now

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


def test_memory_round_trip(scenario, clock):
    store = MemoryCollectionStore(ttl=3600, clock=clock)
    assert store.get() is None
    store.put(scenario)
    assert store.get() == scenario


def test_memory_expires_after_ttl(scenario, clock):
    store = MemoryCollectionStore(ttl=3600, clock=clock)
    store.put(scenario)
    clock.now += 3599
    assert store.get() == scenario
    clock.now += 1
    assert store.get() is None


def test_memory_put_restarts_window(scenario, clock):
    store = MemoryCollectionStore(ttl=60, clock=clock)
    store.put(scenario)
    clock.now += 50
    store.put(scenario[:1])
    clock.now += 50
    assert store.get() == scenario[:1]


def test_memory_returns_copies(scenario, clock):
    store = MemoryCollectionStore(ttl=60, clock=clock)
    store.put(scenario)
    store.get().clear()
    assert store.get() == scenario


def test_memory_clear(scenario, clock):
    store = MemoryCollectionStore(ttl=60, clock=clock)
    store.put(scenario)
    store.clear()
    assert store.get() is None


def test_stores_satisfy_protocol(fake_redis):
    assert isinstance(MemoryCollectionStore(ttl=60), CollectionStore)
    assert isinstance(RedisCollectionStore(redis_client=fake_redis), CollectionStore)


def test_redis_round_trip(scenario, fake_redis, clock):
    store = RedisCollectionStore(redis_client=fake_redis, key="pokemon-data", ttl=86400, clock=clock)
    store.put(scenario)

    payload = json.loads(fake_redis.data["pokemon-data"])
    assert payload["timestamp"] == clock.now
    assert payload["data"][1] == {
        "id": 2,
        "name": "pokemon-2",
        "types": ["grass", "poison"],
        "imageUrl": "https://img.example/2.gif",
    }
    assert fake_redis.expirations["pokemon-data"] == 86400
    assert store.get() == scenario


def test_redis_stale_entry_is_deleted_on_read(scenario, fake_redis, clock):
    store = RedisCollectionStore(redis_client=fake_redis, key="pokemon-data", ttl=86400, clock=clock)
    store.put(scenario)
    clock.now += 86400
    assert store.get() is None
    assert "pokemon-data" not in fake_redis.data


def test_redis_corrupt_entry_is_discarded(fake_redis):
    fake_redis.data["pokemon-data"] = b"not json"
    store = RedisCollectionStore(redis_client=fake_redis, key="pokemon-data")
    assert store.get() is None
    assert "pokemon-data" not in fake_redis.data


def test_redis_errors_are_misses(scenario, fake_redis):
    def broken(*args, **kwargs):
        raise redis.ConnectionError("connection refused")

    fake_redis.get = broken
    fake_redis.set = broken
    fake_redis.ping = broken
    store = RedisCollectionStore(redis_client=fake_redis, key="pokemon-data")

    store.put(scenario)
    assert store.get() is None
    assert store.health_check() is False
