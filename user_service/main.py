"""
Main FastAPI application entry point.

Wires the user routes, trace middleware and problem-details error handlers,
and manages infrastructure lifetime through the lifespan context.

Run:
    uvicorn user_service.main:app --host 0.0.0.0 --port 8000
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from user_service.core.config import settings
from user_service.core.container import get_database, get_event_publisher, get_logger
from user_service.presentation.routers.api.middleware.trace_middleware import (
    TraceMiddleware,
)
from user_service.presentation.routers.api.v1 import v1_router
from user_service.presentation.routers.api.v1.errors import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    - Startup: create tables when AUTO_CREATE_SCHEMA is set
    - Shutdown: close the event publisher and dispose the engine

    Args:
        app: FastAPI application instance.

    Yields:
        None during application lifetime.
    """
    logger = get_logger()
    database = get_database()

    if settings.auto_create_schema:
        await database.create_all()
        logger.info("database schema created")

    logger.info(
        "service started",
        environment=settings.environment.value,
        event_publisher=settings.event_publisher,
    )

    yield

    await get_event_publisher().close()
    await database.close()
    logger.info("service stopped")


app = FastAPI(
    title=settings.app_name,
    description="User management service",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    debug=settings.debug,
    lifespan=lifespan,
)

app.add_middleware(TraceMiddleware)

register_exception_handlers(app)

app.include_router(v1_router)


@app.get("/health")
async def health() -> dict[str, str]:
    """
    Liveness check for load balancers.

    Returns:
        dict: Health status indicator.
    """
    return {"status": "healthy"}


@app.get("/health/ready", response_model=None)
async def readiness() -> dict[str, str] | JSONResponse:
    """
    Readiness check: the database answers a trivial query.

    Returns:
        dict: Ready status, or a 503 response when the database is unreachable.
    """
    if await get_database().check_connection():
        return {"status": "ready"}
    return JSONResponse(status_code=503, content={"status": "unavailable"})
