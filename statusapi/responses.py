"""Response builders shared by the handlers and the error boundary."""

from __future__ import annotations

from typing import Any, Optional

import fastapi
from fastapi import Request
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel

from .schemas import FrameworkInfo

JSON_CONTENT_TYPE = "application/json; charset=UTF-8"
TEXT_CONTENT_TYPE = "text/plain; charset=UTF-8"

CORS_PREFLIGHT_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET,POST,OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
}

NO_CACHE_HEADERS = {
    "Cache-Control": "no-store, no-cache, must-revalidate, max-age=0",
    "Pragma": "no-cache",
}


def framework_info() -> FrameworkInfo:
    return FrameworkInfo(name="FastAPI", version=getattr(fastapi, "__version__", None))


def request_uri(request: Request) -> str:
    """Request target as sent by the client: path plus any query string."""
    query = request.url.query
    return f"{request.url.path}?{query}" if query else request.url.path


def common_headers(app_env: str, content_type: str) -> dict[str, str]:
    """Headers carried by every JSON and text response."""
    return {
        "Content-Type": content_type,
        "X-Content-Type-Options": "nosniff",
        "Referrer-Policy": "no-referrer",
        "Access-Control-Allow-Origin": "*",
        "X-App-Env": app_env,
    }


def json_response(
    payload: BaseModel | dict[str, Any],
    app_env: str,
    status_code: int = 200,
    extra_headers: Optional[dict[str, str]] = None,
) -> JSONResponse:
    content = payload.model_dump() if isinstance(payload, BaseModel) else payload
    headers = common_headers(app_env, JSON_CONTENT_TYPE)
    headers.update(extra_headers or {})
    # An explicit Content-Type header stops Starlette appending its own.
    return JSONResponse(content=content, status_code=status_code, headers=headers, media_type=None)


def text_response(
    body: str,
    app_env: str,
    status_code: int = 200,
    extra_headers: Optional[dict[str, str]] = None,
) -> Response:
    headers = common_headers(app_env, TEXT_CONTENT_TYPE)
    headers.update(extra_headers or {})
    return Response(content=body, status_code=status_code, headers=headers, media_type=None)
