"""Main FastAPI application."""

import time
from collections.abc import AsyncGenerator, Awaitable, Callable
from contextlib import asynccontextmanager
from uuid import uuid4

import structlog
from fastapi import FastAPI, Request, Response

from infrastructure.config import settings
from infrastructure.logging import setup_logging
from interfaces.api.routes import fallback_router, image_router, landing_router

# Configure structured logging
setup_logging()

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:  # noqa: ARG001
    """Handle application startup and shutdown."""
    logger.info("app_starting", env=settings.app_env, blob_base_url=settings.blob_base_url)
    yield
    logger.info("app_stopped")


async def bind_request_context(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """Tag every log line emitted while handling a request with its id and path."""
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(
        request_id=request.headers.get("x-request-id") or uuid4().hex,
        method=request.method,
        path=request.url.path,
    )
    started = time.perf_counter()
    response = await call_next(request)
    logger.info(
        "request_completed",
        status_code=response.status_code,
        duration_ms=round((time.perf_counter() - started) * 1000, 2),
    )
    return response


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    app = FastAPI(
        title=settings.app_name,
        description="Serves images from object storage with default-image fallbacks",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.middleware("http")(bind_request_context)

    app.include_router(landing_router)
    app.include_router(image_router)

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    # Catch-all, keep last
    app.include_router(fallback_router)

    return app


# Create app instance
app = create_app()
