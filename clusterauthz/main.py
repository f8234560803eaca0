"""
Main FastAPI application entry point.

Wires the lifespan (Casbin enforcer start-up with builtin role seeding),
request id middleware, global exception handlers and the v1 routers.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from clusterauthz.core.config import settings
from clusterauthz.presentation.routers.api.middleware.request_id_middleware import (
    RequestIdMiddleware,
)
from clusterauthz.presentation.routers.api.v1 import v1_router
from clusterauthz.presentation.routers.api.v1.errors import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    Handles startup and shutdown events:
    - Startup: Initialize Casbin enforcer, load policies, seed builtin roles
    - Shutdown: Drop the enforcer singleton

    Args:
        app: FastAPI application instance.

    Yields:
        None during application lifetime.
    """
    from clusterauthz.core.container import init_enforcer, reset_enforcer

    await init_enforcer()

    yield

    reset_enforcer()


app = FastAPI(
    title=settings.app_name,
    description="Role-based authorization and consistency-routed schema reads",
    version=settings.app_version,
    debug=settings.debug,
    lifespan=lifespan,
)

# Wire request id middleware (log correlation)
app.add_middleware(RequestIdMiddleware)

# Register global exception handlers ({"error": [{"message"}]} bodies)
register_exception_handlers(app)

app.include_router(v1_router)


@app.get("/health")
async def health() -> dict[str, str]:
    """
    Health check endpoint for monitoring and load balancers.

    Returns:
        dict: Health status indicator.
    """
    return {"status": "healthy"}
