"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Services stored in app.state during lifespan
    - Dependency functions retrieve from request.app.state
    - Clean separation, no global mutable state
"""

import logging
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from pokemon_catalog.config import settings
from pokemon_catalog.handlers import CatalogHandler
from pokemon_catalog.repositories import (
    MemoryCollectionStore,
    PokeApiClient,
    RedisCollectionStore,
)
from pokemon_catalog.services import CatalogService, PokemonFetcher

logger = logging.getLogger(__name__)


def get_handler(request: Request) -> CatalogHandler:
    """Dependency injection for CatalogHandler from app.state.

    Args:
        request: FastAPI Request object

    Returns:
        The CatalogHandler instance from app.state

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "catalog_handler", None)
    if handler is None:
        raise RuntimeError("CatalogHandler not initialized. Check lifespan setup.")
    return handler


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app.

    Initializes all layers once per process and stores them in app.state:
    1. Repositories (PokeAPI client, memory store, optional Redis store)
    2. Service (fetcher + catalog) - stored in app.state.catalog_service
    3. Handler (HTTP endpoints) - stored in app.state.catalog_handler

    Args:
        app: The FastAPI application instance

    Yields:
        None

    Cleanup:
        Closes the HTTP client and removes all services from app.state
    """
    source = PokeApiClient.create()
    fetcher = PokemonFetcher.create(source=source)

    memory_store = MemoryCollectionStore(ttl=settings.cache_ttl)
    persistent_store = RedisCollectionStore.create() if settings.persistent_cache_enabled else None

    catalog_service = CatalogService.create(
        fetcher=fetcher,
        memory_store=memory_store,
        persistent_store=persistent_store,
    )
    catalog_handler = CatalogHandler(catalog_service=catalog_service)

    # Store in app.state (FastAPI pattern)
    app.state.pokemon_source = source
    app.state.catalog_service = catalog_service
    app.state.catalog_handler = catalog_handler

    logger.info("✓ Catalog service initialized")
    logger.info("✓ PokeAPI: %s (batch size %d)", source.base_url, fetcher.batch_size)
    logger.info("✓ Memory cache TTL: %ds", memory_store.ttl)
    logger.info("✓ Persistent cache: %s", catalog_service.persistent_status())

    yield

    # Cleanup - close the HTTP client and remove from app.state
    await source.close()
    del app.state.catalog_handler
    del app.state.catalog_service
    del app.state.pokemon_source
    logger.info("✓ Catalog service shut down")


# Type aliases for cleaner dependency injection
HandlerDep = Annotated[CatalogHandler, Depends(get_handler)]
