#!/usr/bin/env python3
"""
Xuan Kong Flying Star API - Main Application
FastAPI application serving Huyền Không Phi Tinh charts
"""

import os

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.utils import get_openapi
from fastapi.responses import JSONResponse, PlainTextResponse
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from starlette.exceptions import HTTPException

from api.middleware.request_id import REQUEST_ID_HEADER, RequestIDMiddleware
from api.models.responses import Problem, ServiceInfo
from api.routers.flying_star import router as flying_star_router
from api.routers.health import router as health_router
from api.services.metrics import initialize_service_metrics
from app.core.config import (
    CORS_ALLOWED_ORIGINS,
    DOCS_URL,
    ENVIRONMENT,
    LOG_FORMAT_JSON,
    LOG_LEVEL,
    OPENAPI_URL,
    REDOC_URL,
    SERVICE_NAME,
    SERVICE_TITLE,
    SERVICE_VERSION,
)
from app.core.logging import get_api_logger, setup_logging
from xuankong.chart_config import get_chart_config, initialize_chart_config
from xuankong.monitoring import set_feature_flag

# Initialize structured logging EARLY (before any logger usage)
setup_logging(level=LOG_LEVEL, format_json=LOG_FORMAT_JSON)
logger = get_api_logger("main")


def _set_startup_feature_flags():
    cfg = get_chart_config()
    set_feature_flag("alternate_board", cfg.enable_alternate_board)
    set_feature_flag("gate_detection", cfg.enable_gate_detection)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    logger.info("Starting %s %s (%s)", SERVICE_TITLE, SERVICE_VERSION, ENVIRONMENT)
    initialize_chart_config()
    initialize_service_metrics(SERVICE_VERSION)
    _set_startup_feature_flags()
    yield
    logger.info("Shutting down %s", SERVICE_TITLE)


app = FastAPI(
    title=SERVICE_TITLE,
    description="Xuan Kong Flying Star (Huyền Không Phi Tinh) chart calculations",
    version=SERVICE_VERSION,
    lifespan=lifespan,
    docs_url=DOCS_URL,
    redoc_url=REDOC_URL,
    openapi_url=OPENAPI_URL,
)


def _build_cors_config(allowed_origins: list[str]) -> dict[str, object]:
    """Build CORS configuration dictionary."""
    logger.info("CORS: %d origins configured", len(allowed_origins))
    return {
        "allow_origins": allowed_origins,
        "allow_credentials": "*" not in allowed_origins,
        "allow_methods": ["GET", "POST", "OPTIONS"],
        "allow_headers": ["accept", "content-type", "origin", "x-request-id"],
        "expose_headers": ["x-request-id"],
        "max_age": 86400,  # 24 hours preflight cache
    }


app.add_middleware(CORSMiddleware, **_build_cors_config(CORS_ALLOWED_ORIGINS))
app.add_middleware(RequestIDMiddleware)

app.include_router(health_router, prefix="/api/v1")
app.include_router(flying_star_router)


# Prometheus metrics endpoint
@app.get("/metrics", response_class=PlainTextResponse, tags=["health"], operation_id="prometheus_metrics")
async def metrics():
    """Prometheus metrics endpoint"""
    return PlainTextResponse(generate_latest(), media_type=CONTENT_TYPE_LATEST)


@app.get("/", response_model=ServiceInfo, tags=["health"], operation_id="service_info")
async def root() -> ServiceInfo:
    return ServiceInfo(
        service=SERVICE_NAME,
        version=SERVICE_VERSION,
        environment=ENVIRONMENT,
        docs=DOCS_URL,
        openapi=OPENAPI_URL,
    )


def _request_id(request: Request) -> str:
    return getattr(request.state, "request_id", None) or request.headers.get(REQUEST_ID_HEADER, "")


# Global HTTPException handler emitting RFC7807 Problem Details
@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    detail = None
    title = "HTTP error"
    if isinstance(exc.detail, dict):
        title = exc.detail.get("title") or title
        detail = exc.detail.get("detail") or detail
    elif isinstance(exc.detail, str):
        title = exc.detail

    problem = Problem(
        title=title,
        status=exc.status_code,
        detail=detail,
        instance=str(request.url),
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=problem.model_dump(),
        headers={REQUEST_ID_HEADER: _request_id(request)},
    )


# Fallback handler for uncaught exceptions
@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s", request.url.path)
    problem = Problem(
        title="Internal Server Error",
        status=500,
        detail=str(exc)[:200],
        instance=str(request.url),
        code="INTERNAL_ERROR",
    )
    return JSONResponse(
        status_code=500,
        content=problem.model_dump(),
        headers={REQUEST_ID_HEADER: _request_id(request)},
    )


# Custom OpenAPI schema with metadata (servers/build sha)
def custom_openapi():
    if app.openapi_schema:
        return app.openapi_schema
    schema = get_openapi(
        title=app.title,
        version=app.version,
        description=app.description,
        routes=app.routes,
    )
    schema["servers"] = [{"url": os.getenv("OPENAPI_PUBLIC_URL", "/")}]
    schema.setdefault("info", {}).setdefault("x-build", {})["sha"] = os.getenv("XK_BUILD_SHA", "unknown")
    app.openapi_schema = schema
    return app.openapi_schema


app.openapi = custom_openapi
