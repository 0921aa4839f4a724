"""Liveness, readiness and Prometheus endpoints."""

from typing import Callable, Dict, Optional

from fastapi import APIRouter, Response
from fastapi.responses import JSONResponse
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from stepmaster.health.checks import check_readiness
from stepmaster.tracker import ActivityTracker


def create_health_router(current_tracker: Callable[[], Optional[ActivityTracker]]) -> APIRouter:
    """Router whose readiness follows whatever ``current_tracker`` returns."""
    router = APIRouter(tags=["health"])

    @router.get("/healthz")
    def liveness() -> Dict[str, str]:
        return {"status": "ok"}

    @router.get("/readyz")
    def readiness():
        """503 until the tracker is subscribed and its history can be written."""
        result = check_readiness(current_tracker())
        return JSONResponse(
            content=result.model_dump(), status_code=200 if result.ready else 503
        )

    @router.get("/metrics")
    def metrics() -> Response:
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    return router
