"""Command line entry point for serving the API."""

from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

import uvicorn

from .config import get_settings

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str) -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Serve the instance status and health-check API")
    parser.add_argument("--host", default=settings.api_host, help="Interface to bind")
    parser.add_argument("--port", type=int, default=settings.api_port, help="Port to listen on")
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level (DEBUG, INFO, ...)")
    parser.add_argument("--reload", action="store_true", help="Reload on source changes (development only)")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)
    logger.info("Starting server on %s:%s", args.host, args.port)
    uvicorn.run(
        "statusapi.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=args.log_level.lower(),
    )
