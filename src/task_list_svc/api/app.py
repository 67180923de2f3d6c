"""FastAPI application for the task_list_svc API.

This module creates and configures the FastAPI application instance
with the task routes, the request body error handler and the store it
serves from.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .. import config
from ..routes.task_routes import task_router, error_response
from ..store import TaskStore

logger = logging.getLogger(__name__)

INVALID_BODY_MESSAGE = "Invalid request body"


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Map malformed or ill-typed request bodies to a 400 envelope."""
    logger.warning(f"{request.method} {request.url.path} rejected: {exc.errors()}")
    return error_response(400, INVALID_BODY_MESSAGE)


def create_app(store: Optional[TaskStore] = None) -> FastAPI:
    """Create the FastAPI application serving ``store``.

    Args:
        store: Task store to serve. If None, a new store is created,
               seeded with the standard tasks unless SEED_TASKS is off.

    Returns:
        Configured FastAPI instance
    """
    if store is None:
        store = TaskStore.with_seed_tasks() if config.SEED_TASKS else TaskStore()

    app = FastAPI(
        title="Task List Service API",
        description="REST API for in-memory task list operations",
        version="0.1.0"
    )
    app.state.task_store = store

    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.include_router(task_router)

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy"}

    logger.info(f"Application created with {len(store)} tasks")
    return app


# Application instance for ASGI servers
app = create_app()
