"""
Main entrypoint for the Tuzla Guide API.

This module assembles the FastAPI application, sets up logging,
includes versioned routers and wires the persistence lifecycle to the
application events: the stores are restored (or seeded) on startup and
snapshotted on shutdown.  Run it with uvicorn, e.g.::

    uvicorn tuzla_guide_api.app.main:app
"""

from fastapi import FastAPI

from .core.config import settings
from .core.logging_config import setup_logging
from .api.v1.router import router as v1_router
from .services.persistence_service import PersistenceService


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    app.include_router(v1_router, prefix="/api/v1")

    @app.on_event("startup")
    async def startup_event() -> None:
        # Applies migrations, then restores the last snapshot or seeds
        # the catalog on the very first start.
        PersistenceService.startup()

    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        PersistenceService.shutdown()

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
