"""
Main entrypoint for the Todo API.

This module assembles the FastAPI application: it sets up logging,
builds the todo store from the configured seed data, installs the
error handler and includes the versioned router.  ``create_app`` does
the work and the module instantiates ``app`` at import time, so the
service can be run with uvicorn::

    uvicorn todo_api.app.main:app --reload
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .core.config import Settings, settings
from .core.logging_config import setup_logging
from .core.seed import load_seed
from .api.v1.router import router as v1_router
from .services.todo_service import TodoStore


logger = logging.getLogger(__name__)

INVALID_BODY = "Invalid request body"


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render HTTP errors as ``{"error": <detail>}``."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render request validation failures (e.g. malformed JSON) as ``{"error": ...}``."""
    logger.debug("Rejected request to %s: %s", request.url.path, exc.errors())
    return JSONResponse(status_code=422, content={"error": INVALID_BODY})


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Each call builds its own ``TodoStore``, seeded from
    ``app_settings.seed_file``, and attaches it to ``app.state`` where
    the endpoints pick it up.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to use.  Defaults to the module-level ``settings``
        read from the environment.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.

    Raises
    ------
    SeedError
        If the configured seed file cannot be loaded.
    """
    app_settings = app_settings or settings
    # Initialise logging before anything else so that seed loading can log.
    setup_logging(app_settings.log_level, app_settings.log_file or None)

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.api_version,
        debug=app_settings.debug,
    )
    app.state.settings = app_settings
    app.state.todo_store = TodoStore(load_seed(app_settings.seed_file))
    logger.info("Todo store ready with %d todos", len(app.state.todo_store))

    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.include_router(v1_router, prefix=app_settings.api_prefix.rstrip("/"))
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
