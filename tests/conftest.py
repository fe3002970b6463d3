"""
Shared fixtures: sample collections, a fake upstream source and a fake Redis client.
"""

import pytest

from pokemon_catalog.entities import ListPage, Pokemon, PokemonRef

TYPE_CYCLE = [
    ("grass",),
    ("grass", "poison"),
    ("fire",),
    ("water",),
    ("poison", "grass"),
    ("fire", "flying"),
    ("bug", "poison"),
]


def make_pokemon(pokemon_id: int, *types: str) -> Pokemon:
    return Pokemon(
        id=pokemon_id,
        name=f"pokemon-{pokemon_id}",
        types=tuple(types),
        image_url=f"https://img.example/{pokemon_id}.gif",
    )


def ref_for(pokemon_id: int) -> PokemonRef:
    return PokemonRef(
        name=f"pokemon-{pokemon_id}",
        url=f"https://pokeapi.co/api/v2/pokemon/{pokemon_id}/",
    )


@pytest.fixture
def scenario():
    """Three Pokemon: grass, grass/poison, fire."""
    return [
        make_pokemon(1, "grass"),
        make_pokemon(2, "grass", "poison"),
        make_pokemon(3, "fire"),
    ]


@pytest.fixture
def large_collection():
    """100 Pokemon cycling through single and dual type combinations."""
    return [make_pokemon(i, *TYPE_CYCLE[(i - 1) % len(TYPE_CYCLE)]) for i in range(1, 101)]


class FakeSource:
    """In-memory PokemonSource that records calls and can fail on demand."""

    def __init__(self, pokemon, failing_ids=(), fail_list=False):
        self._pokemon = {p.id: p for p in pokemon}
        self._order = [p.id for p in pokemon]
        self.failing_ids = set(failing_ids)
        self.fail_list = fail_list
        self.list_calls = []
        self.detail_calls = []

    async def fetch_list(self, limit, offset=0):
        self.list_calls.append((limit, offset))
        if self.fail_list:
            raise RuntimeError("list endpoint down")
        ids = self._order[offset : offset + limit]
        return ListPage(count=len(self._order), results=tuple(ref_for(i) for i in ids))

    async def fetch_pokemon(self, id_or_name):
        self.detail_calls.append(id_or_name)
        if id_or_name in self.failing_ids:
            raise RuntimeError(f"detail {id_or_name} down")
        return self._pokemon[id_or_name]


class FakeRedis:
    """Dict-backed stand-in for the handful of redis.Redis calls the store makes."""

    def __init__(self):
        self.data = {}
        self.expirations = {}

    def get(self, key):
        return self.data.get(key)

    def set(self, key, value, ex=None):
        self.data[key] = value.encode() if isinstance(value, str) else value
        self.expirations[key] = ex
        return True

    def delete(self, key):
        return 1 if self.data.pop(key, None) is not None else 0

    def ping(self):
        return True


@pytest.fixture
def fake_redis():
    return FakeRedis()


@pytest.fixture
def source_factory():
    """Build a FakeSource over a collection."""
    return FakeSource
