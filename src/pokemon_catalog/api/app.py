import logging
from typing import Annotated, Any

from fastapi import FastAPI, Header, Query, Response
from fastapi.middleware.cors import CORSMiddleware

from pokemon_catalog.api.dependencies import HandlerDep, lifespan
from pokemon_catalog.config import settings
from pokemon_catalog.dto import (
    BrowseRequest,
    BrowseResponse,
    HealthCheckResponse,
    PokemonItem,
    TypesResponse,
)

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="Pokemon Catalog API",
    description="Cached PokeAPI catalog with type filtering and pagination",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,  # type: ignore[arg-type]
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["X-Pokemon-Count", "X-Cache-Source", "X-Error"],
)


@app.get("/")
async def root() -> dict[str, Any]:
    """Root endpoint with API information."""
    return {
        "name": "Pokemon Catalog API",
        "version": "0.1.0",
        "description": "Cached PokeAPI catalog with type filtering and pagination",
        "endpoints": {
            "pokemon": "/api/pokemon",
            "browse": "/api/pokemon/browse",
            "types": "/api/pokemon/types",
            "health": "/health",
            "docs": "/docs",
        },
    }


@app.get("/health", response_model=HealthCheckResponse)
async def health(handler: HandlerDep) -> HealthCheckResponse:
    """Health check endpoint."""
    return await handler.health_check()


@app.get("/api/pokemon", response_model=list[PokemonItem], response_model_exclude_none=True)
async def list_pokemon(
    handler: HandlerDep,
    response: Response,
    x_fetch_source: Annotated[str | None, Header()] = None,
) -> list[PokemonItem]:
    """
    Return the full Pokemon collection.

    Always answers 200; see the X-Pokemon-Count, X-Cache-Source and
    X-Error response headers for details.
    """
    return await handler.list_pokemon(response, client_request=x_fetch_source == "client")


@app.get("/api/pokemon/browse", response_model=BrowseResponse, response_model_exclude_none=True)
async def browse_pokemon(
    handler: HandlerDep,
    request: Annotated[BrowseRequest, Query()],
) -> BrowseResponse:
    """
    Return one page of the catalog for the given browsing state.

    Args:
        request: type/page from the page URL plus an optional toggle or step.

    Returns:
        The page, navigation flags and the canonical query to write back to the URL.
    """
    return await handler.browse(request)


@app.get("/api/pokemon/types", response_model=TypesResponse)
async def list_types(handler: HandlerDep) -> TypesResponse:
    """List the types offered by the filter bar."""
    return await handler.list_types()


@app.delete("/api/pokemon/cache", response_model=dict[str, Any])
async def clear_cache(handler: HandlerDep) -> dict[str, Any]:
    """Drop the cached collection so the next request refetches it."""
    return await handler.clear_cache()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "pokemon_catalog.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
