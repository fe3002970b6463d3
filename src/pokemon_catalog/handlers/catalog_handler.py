"""HTTP handlers for catalog operations.

Handlers convert between DTOs (API contracts) and service calls.
They handle HTTP concerns like headers, status codes and error handling.
"""

import logging

from fastapi import HTTPException, Response, status

from pokemon_catalog.dto import (
    BrowseRequest,
    BrowseResponse,
    HealthCheckResponse,
    PokemonItem,
    TypesResponse,
)
from pokemon_catalog.services import CatalogService
from pokemon_catalog.services.catalog_service import FETCH_ERROR

logger = logging.getLogger(__name__)

CLIENT_CACHE_CONTROL = "public, max-age=60, stale-while-revalidate=3600"
SERVER_CACHE_CONTROL = "public, max-age=3600, s-maxage=3600"
ERROR_CACHE_CONTROL = "public, max-age=60"

LOAD_ERROR_MESSAGE = "Error loading Pokemon data. Please refresh the page."


class CatalogHandler:
    """HTTP handlers for catalog operations.

    This handler delegates business logic to CatalogService
    and handles HTTP-specific concerns like:
    - Converting entities to DTOs
    - Response headers (count, cache provenance, cache control)
    - Turning upstream failures into benign responses

    Example:
        ```python
        handler = CatalogHandler(catalog_service=catalog_service)

        @app.get("/api/pokemon", response_model=list[PokemonItem])
        async def list_pokemon(response: Response):
            return await handler.list_pokemon(response)
        ```
    """

    def __init__(self, catalog_service: CatalogService) -> None:
        """Initialize the catalog handler.

        Args:
            catalog_service: The catalog service for business logic (required).
        """
        self._catalog = catalog_service

    async def list_pokemon(self, response: Response, client_request: bool = False) -> list[PokemonItem]:
        """Handle GET /api/pokemon requests.

        Always answers 200. Failures produce an empty list and an
        ``X-Error`` header instead of an error status.

        Args:
            response: Response whose headers are filled in
            client_request: True when the browser asked (``x-fetch-source: client``)

        Returns:
            The full collection as DTOs
        """
        try:
            snapshot = await self._catalog.get_snapshot()
        except Exception:
            logger.exception("Error fetching all Pokemon")
            snapshot = None

        if snapshot is None or snapshot.error:
            response.headers["Cache-Control"] = ERROR_CACHE_CONTROL
            response.headers["X-Pokemon-Count"] = "0"
            response.headers["X-Error"] = FETCH_ERROR
            return []

        response.headers["Cache-Control"] = CLIENT_CACHE_CONTROL if client_request else SERVER_CACHE_CONTROL
        response.headers["X-Pokemon-Count"] = str(len(snapshot.pokemon))
        response.headers["X-Cache-Source"] = snapshot.source
        return [PokemonItem.from_entity(p) for p in snapshot.pokemon]

    async def browse(self, request: BrowseRequest) -> BrowseResponse:
        """Handle GET /api/pokemon/browse requests.

        Args:
            request: The browse request DTO

        Returns:
            BrowseResponse for the resulting page

        Raises:
            HTTPException: If the browsing state cannot be computed
        """
        try:
            snapshot, view = await self._catalog.browse(
                type_param=request.type,
                page_param=request.page,
                toggle=request.toggle,
                step=request.page_delta,
            )
        except Exception as e:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Failed to browse catalog: {e}",
            ) from e

        result = view.result
        return BrowseResponse(
            items=[PokemonItem.from_entity(p) for p in result.items],
            page=view.page + 1,
            total_pages=result.total_pages,
            total_count=result.total_count,
            selected_types=list(view.selected_types),
            query=view.to_query(),
            has_previous=view.has_previous,
            has_next=view.has_next,
            cache_source=snapshot.source,
            error=LOAD_ERROR_MESSAGE if snapshot.is_empty else None,
        )

    async def list_types(self) -> TypesResponse:
        """Handle GET /api/pokemon/types requests.

        Returns:
            TypesResponse with the filter bar types
        """
        try:
            types = await self._catalog.available_types()
        except Exception as e:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Failed to list types: {e}",
            ) from e
        return TypesResponse(types=types)

    async def clear_cache(self) -> dict:
        """Handle DELETE /api/pokemon/cache requests.

        Returns:
            Dict with clear operation result
        """
        self._catalog.clear()
        return {
            "success": True,
            "message": "Cache cleared successfully",
        }

    async def health_check(self) -> HealthCheckResponse:
        """Handle GET /health requests.

        Returns:
            HealthCheckResponse; "degraded" when a configured persistent cache is unreachable
        """
        persistent = self._catalog.persistent_status()
        return HealthCheckResponse(
            status="degraded" if persistent == "unavailable" else "healthy",
            persistent_cache=persistent,
        )
