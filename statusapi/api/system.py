"""Status, health and CORS preflight endpoints."""

from __future__ import annotations

import platform
import socket
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response

from ..config import Settings
from ..responses import (
    CORS_PREFLIGHT_HEADERS,
    NO_CACHE_HEADERS,
    framework_info,
    json_response,
    request_uri,
    text_response,
)
from ..schemas import AppInfo, CoreInfo, RequestInfo, StatusResponse

router = APIRouter()


def get_app_settings(request: Request) -> Settings:
    """FastAPI dependency returning the settings the app was built with."""
    return request.app.state.settings


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).replace(microsecond=0).isoformat()


# Registered first so preflight wins over every other route.
@router.options("/{full_path:path}", tags=["system"])
def preflight(full_path: str) -> Response:
    return Response(status_code=200, headers=dict(CORS_PREFLIGHT_HEADERS))


@router.get("/", tags=["system"])
def status(request: Request, settings: Settings = Depends(get_app_settings)) -> Response:
    payload = StatusResponse(
        core=CoreInfo(
            php_version=platform.python_version(),
            env=settings.app_env,
            hostname=socket.gethostname(),
        ),
        framework=framework_info(),
        app=AppInfo(name=settings.app_name, version=settings.app_version),
        data=RequestInfo(
            method=request.method,
            path=request_uri(request),
            query=dict(request.query_params),
            time=utc_now_iso(),
        ),
    )
    return json_response(payload, settings.app_env)


@router.api_route("/health", methods=["GET", "HEAD"], tags=["system"])
def healthcheck(request: Request, settings: Settings = Depends(get_app_settings)) -> Response:
    body = "" if request.method == "HEAD" else "OK"
    return text_response(body, settings.app_env, extra_headers=NO_CACHE_HEADERS)
