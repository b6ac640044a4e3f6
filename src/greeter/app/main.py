from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from greeter import __version__
from greeter.api import root_router
from greeter.api import router as api_router
from greeter.core.admin.errors import AdminError
from greeter.core.admin.shutdown import ProcessTerminator, ShutdownScheduler, Terminator
from greeter.core.clock import process_started_at
from greeter.core.config.settings import AppSettings, get_settings
from greeter.core.logging.setup import configure_logging

log = structlog.get_logger()


def create_app(
    *,
    settings: AppSettings | None = None,
    terminator: Terminator | None = None,
) -> FastAPI:
    """
    Application factory.

    This function is the single place where the FastAPI app
    is created and configured. Settings are read once here and
    injected; tests pass their own settings and terminator.
    """
    settings = settings or get_settings()

    # Initialize structured logging
    configure_logging(level=settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info(
            "app.startup",
            environment=settings.env,
            port=settings.port,
            admin_enabled=settings.admin_enabled,
        )
        yield
        log.info("app.shutdown")

    app = FastAPI(
        title="Greeter",
        version=__version__,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.started_at = process_started_at()
    app.state.shutdown_scheduler = ShutdownScheduler(
        terminator=terminator or ProcessTerminator(),
    )

    @app.exception_handler(AdminError)
    async def on_admin_error(request: Request, exc: AdminError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    # Mount routes
    app.include_router(root_router)
    app.include_router(api_router, prefix="/api/v1")

    return app


# ASGI entrypoint
app = create_app()
