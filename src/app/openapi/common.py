#!/usr/bin/env python3
"""
Shared OpenAPI helpers and reusable response docs.
"""

from __future__ import annotations

from typing import Any, Dict


# Documentation-only; the global exception handlers already return RFC7807
# Problem JSON for these statuses.
DEFAULT_ERROR_RESPONSES: Dict[int, Dict[str, Any]] = {
    404: {"description": "Not Found"},
    422: {"description": "Validation Error"},  # FastAPI default
    500: {"description": "Server Error"},
}
