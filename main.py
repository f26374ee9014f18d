"""
Entrypoint for the Text Metrics Engine API.
Wires the FastAPI application together with the metrics router and serves
it with uvicorn.
"""

from __future__ import annotations

import argparse
import logging

from fastapi import FastAPI

from config import config
from logging_utils import setup_logging
from metrics_router import router as metrics_router
from text_metrics import __version__

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Build the FastAPI application with all routes registered."""
    application = FastAPI(
        title="Text Metrics Engine",
        description=(
            "Real-time text metrics: counts, overflow boundaries, statistics, "
            "readability grades and reading-time estimates."
        ),
        version=__version__,
    )
    application.include_router(metrics_router)

    @application.get("/")
    async def root():
        return {"service": "text-metrics", "version": __version__, "docs": "/docs"}

    return application


app = create_app()


if __name__ == "__main__":
    import uvicorn

    parser = argparse.ArgumentParser(description="Text Metrics Engine")
    parser.add_argument("--host", default=config.APP_HOST, help=f"Bind host (default: {config.APP_HOST})")
    parser.add_argument("--port", type=int, default=config.APP_PORT, help=f"Bind port (default: {config.APP_PORT})")
    parser.add_argument(
        "--reload",
        action="store_true",
        default=config.APP_RELOAD,
        help="Enable auto-reload (development only)",
    )
    parser.add_argument(
        "--log-level",
        default=config.LOG_LEVEL,
        help=f"Log level (default: {config.LOG_LEVEL})",
    )
    args = parser.parse_args()

    setup_logging(args.log_level)
    logger.info("Starting Text Metrics Engine on %s:%d", args.host, args.port)

    uvicorn.run(
        "main:app" if args.reload else app,
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=args.log_level.lower(),
    )
