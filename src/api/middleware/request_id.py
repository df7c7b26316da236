"""
Request ID Middleware

Tags every response with an `X-Request-ID` header (echoing the caller's value
when present) and exposes it as `request.state.request_id` for the problem
handlers. The id is also bound to `request_id_var` so log records carry it.
"""

from __future__ import annotations

import uuid

from typing import Awaitable, Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from app.core.logging import request_id_var

REQUEST_ID_HEADER = "X-Request-ID"


class RequestIDMiddleware(BaseHTTPMiddleware):
    def __init__(self, app: ASGIApp, header_name: str = REQUEST_ID_HEADER) -> None:
        super().__init__(app)
        self.header_name = header_name

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        req_id = request.headers.get(self.header_name) or uuid.uuid4().hex
        request.state.request_id = req_id
        token = request_id_var.set(req_id)
        try:
            response = await call_next(request)
        finally:
            request_id_var.reset(token)
        response.headers.setdefault(self.header_name, req_id)
        return response
