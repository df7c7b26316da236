#!/usr/bin/env python3
"""
Application configuration
"""

import os

SERVICE_NAME = "xuankong-api"
SERVICE_TITLE = "Xuan Kong Flying Star API"
SERVICE_VERSION = os.getenv("XK_VERSION", "1.0.0")

# Deployment environment name (local, staging, production)
ENVIRONMENT = os.getenv("XK_ENV", "local").lower()

# Documentation endpoints
DOCS_URL = "/api/docs"
REDOC_URL = "/api/redoc"
OPENAPI_URL = "/openapi.json"

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT_JSON = os.getenv("LOG_FORMAT", "json").lower() == "json"

# API limits
MIN_YEAR = 1
MAX_YEAR = 9999

_DEFAULT_CORS_ORIGINS = ["http://localhost:3000", "http://localhost:5173"]


def parse_cors_origins(raw: str | None) -> list[str]:
    """Comma-separated origins from CORS_ALLOWED_ORIGINS; defaults for local dev."""
    if not raw:
        return list(_DEFAULT_CORS_ORIGINS)
    origins = [o.strip().rstrip("/") for o in raw.split(",") if o.strip()]
    return origins or list(_DEFAULT_CORS_ORIGINS)


CORS_ALLOWED_ORIGINS = parse_cors_origins(os.getenv("CORS_ALLOWED_ORIGINS"))
