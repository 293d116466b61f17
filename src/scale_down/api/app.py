"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from scale_down.api.foods import router as foods_router
from scale_down.api.meals import router as meals_router
from scale_down.api.users import router as users_router
from scale_down.app_logging import configure_logging
from scale_down.config import Settings
from scale_down.containers import AppContainer, build_container
from scale_down.errors import ScaleDownError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        try:
            await app.state.container.close_resources()
        except Exception:
            logger.exception("Failed to close resources")

    app = FastAPI(title="scale-down", lifespan=lifespan)
    app.state.container = container

    @app.exception_handler(ScaleDownError)
    async def handle_scale_down_error(
        request: Request, exc: ScaleDownError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=exc.http_status, content={"detail": exc.message}
        )

    app.include_router(users_router)
    app.include_router(foods_router)
    app.include_router(meals_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app


def build_app(settings: Settings | None = None) -> FastAPI:
    """Create the app wired to Supabase.

    Serve with ``uvicorn --factory scale_down.api.app:build_app``.
    """
    return create_app(build_container(settings))
