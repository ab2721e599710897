"""Health check endpoints.

- /health: liveness, always 200
- /healthz: route engine status with component details
"""

import json
from typing import Any

from fastapi import APIRouter, Depends, Response

from backend.app.api.deps import get_route_service
from backend.app.orchestration.service import RouteService

router = APIRouter()


async def check_engine(service: RouteService) -> tuple[bool, str]:
    """Check whether the route engine accepts requests.

    Returns:
        (is_ok, status_message)
    """
    if not service.enabled:
        return (False, "disabled")
    return (True, "ok")


async def check_store(service: RouteService) -> tuple[bool, str]:
    """Check route store readability.

    Returns:
        (is_ok, status_message)
    """
    try:
        count = len(service.pipeline.routes.all())
        return (True, f"ok ({count} routes)")
    except Exception as e:
        return (False, f"error: {type(e).__name__}")


@router.get("/health")
async def health() -> dict[str, str]:
    """Simple health check for Docker/k8s.

    Returns:
        200 OK always (application is running)
    """
    return {"status": "ok"}


@router.get("/healthz", response_model=None)
async def healthz(
    service: RouteService = Depends(get_route_service),
) -> dict[str, Any] | Response:
    """Health check endpoint.

    Returns:
        200 with component status if engine and store are ok
        503 otherwise
    """
    engine_ok, engine_status = await check_engine(service)
    store_ok, store_status = await check_store(service)

    core_ok = engine_ok and store_ok

    response_body = {
        "status": "ok" if core_ok else "degraded",
        "components": {
            "engine": engine_status,
            "store": store_status,
        },
    }

    if not core_ok:
        return Response(
            content=json.dumps(response_body),
            status_code=503,
            media_type="application/json",
        )

    return response_body
