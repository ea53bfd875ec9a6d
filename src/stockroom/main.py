"""
Main FastAPI application entry point.

Wires middleware, exception handlers and the v1 routers. Collaborators are
built by the container factories in ``stockroom.core.container``.

Run:
    uvicorn stockroom.main:app
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from stockroom.core.config import settings
from stockroom.core.container import get_database, get_logger, get_redis_client
from stockroom.presentation.api.middleware.trace_middleware import TraceMiddleware
from stockroom.presentation.api.v1 import v1_router
from stockroom.presentation.api.v1.errors import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    - Startup: log configuration summary
    - Shutdown: dispose the database pool and the Redis connection pool

    Args:
        app: FastAPI application instance.

    Yields:
        None during application lifetime.
    """
    logger = get_logger()
    logger.info(
        "Application starting",
        app_name=settings.app_name,
        version=settings.app_version,
        environment=settings.environment.value,
    )

    yield

    await get_database().close()
    await get_redis_client().aclose()
    logger.info("Application stopped")


# Initialize FastAPI application with settings and lifespan
app = FastAPI(
    title=settings.app_name,
    description="Inventory management API",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    debug=settings.debug,
    lifespan=lifespan,
)

# Wire trace middleware (request correlation)
app.add_middleware(TraceMiddleware)

# Register global exception handlers ({code, message, details?} bodies)
register_exception_handlers(app)

# Include API v1 routers
app.include_router(v1_router)


@app.get("/health")
async def health() -> dict[str, str]:
    """
    Health check endpoint for monitoring and load balancers.

    Returns:
        dict: Health status indicator.
    """
    return {"status": "healthy"}
