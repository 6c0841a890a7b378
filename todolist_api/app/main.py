"""
Main entrypoint for the ToDo List API.

This module assembles the FastAPI application, sets up logging,
registers the domain exception handlers and includes the versioned
routers.  ``create_app`` builds the app, which is then instantiated at
module import time as ``app`` so it can be served directly, e.g.::

    uvicorn todolist_api.app.main:app --reload
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.db import init_db
from .core.exceptions import ToDoListError
from .core.logging_config import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Apply migrations at startup; creates the database file if needed.
    init_db()
    yield


async def handle_domain_error(request: Request, exc: ToDoListError) -> JSONResponse:
    logger.warning("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.add_exception_handler(ToDoListError, handle_domain_error)
    app.include_router(v1_router, prefix="/api/v1")
    return app


app = create_app()
