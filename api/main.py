#!/usr/bin/env python3
"""
Camp Finder API - HTTP API layer for summer camp discovery.

This is the FastAPI application serving the camp-discovery frontend. It:
- Lists camps filtered by age, interests, dates, weekdays, time of day and price
- Hides camps that clash with the caller's saved sessions
- Serves the interest and week vocabularies for the filter panel
- Acknowledges save/unsave actions (bookmarks are stored client-side)
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from campfinder.logging_config import configure_logging, get_logger

from .dependencies import authenticate_pb
from .settings import get_settings

# Format: 2026-01-06T14:05:52Z [api] LEVEL message
configure_logging(source="api")
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifecycle - startup and shutdown."""
    settings = get_settings()

    if not settings.skip_pb_auth:
        await authenticate_pb()
    else:
        logger.warning("Skipping PocketBase authentication (SKIP_PB_AUTH=true)")

    yield


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(title="Camp Finder API", description="Summer camp discovery API", lifespan=lifespan)

    settings = get_settings()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    from .routers import camps, catalog, sessions

    app.include_router(camps.router)
    app.include_router(sessions.router)
    app.include_router(catalog.router)

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy", "service": "campfinder-api"}

    return app


# Create app instance for uvicorn
app = create_app()
