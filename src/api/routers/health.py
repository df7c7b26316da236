#!/usr/bin/env python3
"""
Health check endpoints for monitoring
"""

import os

from datetime import UTC, datetime

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from api.models.responses import HealthStatus, MetricsResponse
from app.openapi.common import DEFAULT_ERROR_RESPONSES
from xuankong.monitoring import get_metrics

router = APIRouter(tags=["health"], responses=DEFAULT_ERROR_RESPONSES)


@router.get(
    "/health/live",
    response_model=HealthStatus,
    summary="Liveness",
    operation_id="health_live",
)
async def liveness_check() -> HealthStatus:
    """
    Liveness probe endpoint.

    Returns 200 OK if the application process is alive and responsive.
    """
    return HealthStatus(
        status="ok",
        timestamp=datetime.now(UTC),
        process_id=str(os.getpid()),
    )


@router.get(
    "/health/up",
    response_class=PlainTextResponse,
    summary="Up",
    operation_id="health_up",
)
async def health_up() -> PlainTextResponse:
    """Plaintext liveness for external monitors."""
    return PlainTextResponse("ok")


@router.get(
    "/health/metrics",
    response_model=MetricsResponse,
    summary="Metrics",
    operation_id="health_metrics",
)
async def metrics_endpoint() -> MetricsResponse:
    """
    Current in-process timing and event counters.

    Prometheus scrapes `/metrics` instead; this is the human-readable view.
    """
    return MetricsResponse(
        status="ok",
        timestamp=datetime.now(UTC),
        metrics=get_metrics(),
    )
