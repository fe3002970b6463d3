"""Data Transfer Objects for API contracts.

These Pydantic models define the external API contract.
They are used for request/response validation and serialization.

Internal domain logic should use entities from the entities package.
"""

from .requests import BrowseRequest
from .responses import (
    BrowseResponse,
    HealthCheckResponse,
    PokemonItem,
    TypesResponse,
)

__all__ = [
    "BrowseRequest",
    "BrowseResponse",
    "HealthCheckResponse",
    "PokemonItem",
    "TypesResponse",
]
