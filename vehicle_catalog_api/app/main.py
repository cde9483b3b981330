"""
Main entrypoint for the Vehicle Catalog API.

This module assembles the FastAPI application, sets up logging,
includes versioned routers and registers the handler that turns
``VehicleError`` into a JSON response.  The ``create_app`` function
builds and configures the app, which is then instantiated at module
import time as ``app``, e.g.::

    uvicorn vehicle_catalog_api.app.main:app --reload
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.db import init_db
from .core.exceptions import VehicleError
from .core.logging_config import setup_logging

logger = logging.getLogger(__name__)


async def vehicle_error_handler(request: Request, exc: VehicleError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message, "kind": exc.kind.value},
    )


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first so that everything below can log.
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.include_router(v1_router, prefix="/api/v1")
    app.add_exception_handler(VehicleError, vehicle_error_handler)

    @app.on_event("startup")
    async def startup_event() -> None:
        version = init_db()
        logger.info("Database ready at schema version %s", version)

    return app


app = create_app()
