"""PMIS API — FastAPI application factory and entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map every failure to {"error": message}
    - CORS configured from settings (not hardcoded)
    - Storage is built once per app: supplied by the caller or created in lifespan

Design Decisions:
    - create_app() factory over a bare module-level app: tests inject a fresh
      Storage per test and skip the lifespan entirely
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner shutdown
    - The import processor is bound to the app's storage, never shared across apps
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from pmis.api.error_handlers import register_error_handlers
from pmis.api.routes import (
    dashboard, engineering, health, imports, notifications, procurement_orders,
    procurement_requests, project_phases, projects, tasks, users,
)
from pmis.config import Settings, get_settings
from pmis.infrastructure.observability import setup_logging
from pmis.infrastructure.storage import Storage, build_storage
from pmis.services.import_processor import ImportProcessor

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    storage: Storage | None = None,
    import_processor: ImportProcessor | None = None,
) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        owns_storage = app.state.storage is None
        if owns_storage:
            _bind_storage(app, await build_storage(settings), settings)
        logger.info("PMIS API started")
        yield
        if owns_storage:
            await app.state.storage.close()
        logger.info("PMIS API shutting down")

    app = FastAPI(title=settings.app_name, version="1.0.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.storage = None
    app.state.import_processor = None
    if storage is not None:
        _bind_storage(app, storage, settings, import_processor)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    app.include_router(health.router)
    app.include_router(dashboard.router)
    app.include_router(users.router)
    app.include_router(projects.router)
    app.include_router(tasks.router)
    app.include_router(procurement_orders.router)
    app.include_router(procurement_requests.router)
    app.include_router(project_phases.router)
    app.include_router(engineering.router)
    app.include_router(imports.router)
    app.include_router(notifications.router)

    # Built dashboard (if present) is served after the API routes so /api/* wins
    if os.path.isdir("static"):
        app.mount("/", StaticFiles(directory="static", html=True), name="static")

    return app


def _bind_storage(
    app: FastAPI,
    storage: Storage,
    settings: Settings,
    import_processor: ImportProcessor | None = None,
) -> None:
    app.state.storage = storage
    app.state.import_processor = import_processor or ImportProcessor(
        storage.imported_files,
        delay_seconds=settings.import_processing_delay_seconds,
    )


app = create_app()
