"""Not-found fallback and the top-level fault boundary.

Unmatched routes surface from Starlette as ``HTTPException`` (404, or 405 when
the path exists under another method) and are rendered as the structured
not-found envelope. Every other exception escaping a handler is caught once,
by :class:`FaultBoundaryMiddleware`, and rendered as the 500 envelope. No
handler carries its own try block.
"""

from __future__ import annotations

import logging
import time
from typing import Callable

from fastapi import FastAPI, Request
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from .config import Settings
from .responses import framework_info, json_response, request_uri
from .schemas import ErrorResponse, NotFoundData, NotFoundResponse

logger = logging.getLogger(__name__)

ROUTE_MISS_CODES = {404, 405}


def _settings(request: Request) -> Settings:
    return request.app.state.settings


def not_found_response(request: Request) -> Response:
    settings = _settings(request)
    payload = NotFoundResponse(
        framework=framework_info(),
        data=NotFoundData(method=request.method, path=request_uri(request)),
    )
    return json_response(payload, settings.app_env, status_code=404)


def fault_response(request: Request, exc: Exception) -> Response:
    settings = _settings(request)
    payload = ErrorResponse(
        framework=framework_info(),
        error=str(exc) if settings.expose_errors else None,
    )
    return json_response(payload, settings.app_env, status_code=500)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> Response:
    if exc.status_code in ROUTE_MISS_CODES:
        logger.debug("No route for %s %s (%s)", request.method, request.url.path, exc.status_code)
        return not_found_response(request)

    settings = _settings(request)
    payload = ErrorResponse(message=str(exc.detail), framework=framework_info(), error=exc.detail)
    return json_response(payload, settings.app_env, status_code=exc.status_code, extra_headers=exc.headers)


class FaultBoundaryMiddleware(BaseHTTPMiddleware):
    """Log each request and convert unhandled exceptions into a 500 response."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as exc:
            logger.exception("Unhandled exception in %s %s: %s", request.method, request.url.path, exc)
            response = fault_response(request, exc)

        duration_ms = (time.perf_counter() - start_time) * 1000
        logger.info(
            "%s %s status=%s duration_ms=%.2f",
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
        )
        return response


def setup_error_handling(app: FastAPI) -> None:
    """Register the not-found handler and the fault boundary on ``app``."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_middleware(FaultBoundaryMiddleware)
