"""FastAPI entry point."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI

from . import __version__
from .api import api_router
from .config import Settings, get_settings
from .errors import setup_error_handling

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application with ``settings`` read once up front."""
    settings = settings or get_settings()

    # Only the routes in api_router are served; everything else is a 404.
    app = FastAPI(
        title=settings.app_name,
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings
    app.include_router(api_router)
    setup_error_handling(app)

    logger.info("Application ready env=%s name=%s version=%s", settings.app_env, settings.app_name, settings.app_version)
    return app


app = create_app()
