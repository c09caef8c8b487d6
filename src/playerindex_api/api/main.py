"""
FastAPI application for The Player Index NBA API.

A thin proxy over BallDontLie:
- GET /                  - health check
- GET /players           - player search, reduced to PlayerSummary records
- GET /season-averages   - one player's season averages, renamed fields

Every request makes at most one upstream call. Nothing is cached or persisted.
"""

import logging
import time
from contextlib import asynccontextmanager
from typing import Any

import msgspec
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR

from ..core.config import Settings, get_settings
from ..providers.balldontlie_nba import BallDontLieNBA
from .errors import APIError, api_error_handler
from .routers import players, stats

logger = logging.getLogger(__name__)


class MSGSpecResponse(Response):
    """Custom response class using msgspec for JSON serialization."""

    media_type = "application/json"

    def render(self, content: Any) -> bytes:
        if content is None:
            return b"null"
        return msgspec.json.encode(content)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifecycle.

    Startup:
    - Warn when no upstream credential is configured (data routes will fail)

    Shutdown:
    - Close the upstream HTTP client
    """
    settings: Settings = app.state.settings
    logger.info(f"Starting {settings.app_name}...")
    if not settings.is_upstream_configured:
        logger.warning(
            "BALLDONTLIE_API_KEY is not set. Data endpoints will fail until it is configured."
        )

    yield

    logger.info(f"Shutting down {settings.app_name}...")
    await app.state.nba_client.close()


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Settings to use; defaults to the process-wide cached settings

    Returns:
        Configured FastAPI application instance
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Simplified JSON proxy over the BallDontLie NBA API",
        version=settings.app_version,
        default_response_class=MSGSpecResponse,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.nba_client = BallDontLieNBA(
        api_key=settings.balldontlie_api_key,
        base_url=settings.balldontlie_base_url,
        timeout=settings.upstream_timeout,
    )

    # CORS middleware - any origin may call the proxy
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=settings.cors_allow_methods,
        allow_headers=["*"],
        expose_headers=["X-Process-Time"],
    )

    @app.middleware("http")
    async def add_process_time_header(request: Request, call_next):
        """Add timing header to all responses."""
        start_time = time.time()
        response = await call_next(request)
        process_time = (time.time() - start_time) * 1000  # Convert to ms
        response.headers["X-Process-Time"] = f"{process_time:.2f}ms"
        return response

    app.add_exception_handler(APIError, api_error_handler)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions with the standard error envelope."""
        logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
        return JSONResponse(
            status_code=HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "An internal error occurred"},
        )

    @app.get("/", tags=["health"])
    async def root():
        """Health check. Does not depend on upstream configuration."""
        return {"status": "ok", "service": settings.app_name}

    app.include_router(players.router, tags=["players"])
    app.include_router(stats.router, tags=["stats"])

    return app


# Create app instance
app = create_app()
