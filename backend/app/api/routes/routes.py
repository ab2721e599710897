"""Route generation endpoints - analyze, generate, random, ranking and timelines."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import BaseModel, Field

from backend.app.api.deps import get_route_service
from backend.app.db.queries import SortField, SortOrder
from backend.app.models.intent import TravelIntent
from backend.app.models.route import GeneratedRoute, Route
from backend.app.models.timeline import TimelineDay
from backend.app.orchestration.service import RouteEngineUnavailableError, RouteService

router = APIRouter(prefix="/routes", tags=["routes"])
logger = logging.getLogger(__name__)

ServiceDep = Annotated[RouteService, Depends(get_route_service)]


class QueryRequest(BaseModel):
    """Request body carrying a free-text travel query."""

    query: str = Field(..., description="Free-text travel request")


def _unavailable() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        detail="route engine unavailable",
    )


@router.post("/analyze", response_model=TravelIntent, status_code=status.HTTP_200_OK)
async def analyze_query(request: QueryRequest, service: ServiceDep) -> TravelIntent:
    """Extract destination, trip length and interests from a query.

    Raises:
        HTTPException: 503 if the route engine is disabled
    """
    try:
        return await service.analyze_query(request.query)
    except RouteEngineUnavailableError as e:
        raise _unavailable() from e


@router.post("", response_model=GeneratedRoute, status_code=status.HTTP_201_CREATED)
async def generate_route(request: QueryRequest, service: ServiceDep) -> GeneratedRoute:
    """Generate a route and its timeline from a query.

    Raises:
        HTTPException: 503 if the route engine is disabled, 500 on unexpected failure
    """
    try:
        return await service.generate_route(request.query)
    except RouteEngineUnavailableError as e:
        raise _unavailable() from e
    except Exception as e:
        logger.error(f"[POST /routes] failed: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="internal error",
        ) from e


@router.post("/random", response_model=GeneratedRoute, status_code=status.HTTP_201_CREATED)
async def generate_random_route(service: ServiceDep) -> GeneratedRoute:
    """Generate a surprise route from a random query.

    Raises:
        HTTPException: 503 if the route engine is disabled, 500 on unexpected failure
    """
    try:
        return await service.generate_random_route()
    except RouteEngineUnavailableError as e:
        raise _unavailable() from e
    except Exception as e:
        logger.error(f"[POST /routes/random] failed: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="internal error",
        ) from e


@router.get("", response_model=list[Route])
async def list_routes(
    service: ServiceDep,
    sort_by: Annotated[SortField | None, Query()] = None,
    order: Annotated[SortOrder, Query()] = "desc",
) -> list[Route]:
    """List generated routes ranked by the requested field."""
    return await service.rank_routes(sort_by, order)


@router.get("/{route_id}/timeline", response_model=list[TimelineDay])
async def get_timeline(route_id: str, service: ServiceDep) -> list[TimelineDay]:
    """Day-by-day timeline for a generated route.

    Raises:
        HTTPException: 404 if no timeline exists for the route
    """
    timeline = await service.get_timeline(route_id)
    if timeline is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Route not found",
        )
    return timeline
