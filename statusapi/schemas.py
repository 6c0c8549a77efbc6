"""Pydantic schemas for API responses."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, Field

AVAILABLE_ENDPOINTS = {
    "GET /": "Main API status endpoint",
    "GET /health": "Health check endpoint",
}


class FrameworkInfo(BaseModel):
    name: str
    version: Optional[str] = None


class CoreInfo(BaseModel):
    php_version: str
    env: str
    hostname: str


class AppInfo(BaseModel):
    name: str
    version: str


class RequestInfo(BaseModel):
    method: str
    path: str
    query: dict[str, str] = Field(default_factory=dict)
    time: str


class StatusResponse(BaseModel):
    status: str = "success"
    message: str = "Phalcon REST API is working"
    core: CoreInfo
    framework: FrameworkInfo
    app: AppInfo
    data: RequestInfo


class NotFoundData(BaseModel):
    method: str
    path: str
    available_endpoints: dict[str, str] = Field(default_factory=lambda: dict(AVAILABLE_ENDPOINTS))


class NotFoundResponse(BaseModel):
    status: str = "error"
    message: str = "Endpoint not found"
    framework: FrameworkInfo
    data: NotFoundData


class ErrorResponse(BaseModel):
    """Envelope for unhandled faults and other HTTP errors."""

    status: str = "error"
    message: str = "Internal server error"
    framework: FrameworkInfo
    error: Optional[Any] = None
