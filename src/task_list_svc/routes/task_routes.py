"""FastAPI routes for task-related operations.

This module implements the REST endpoints for listing, retrieving,
creating, replacing and deleting tasks. Every response body is an
ApiResponse envelope; malformed ids map to 400 and unknown ids to 404.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ..models.task import Task
from ..schemas.task import ApiResponse, TaskRequest
from ..services.task_service import (
    parse_task_id,
    list_tasks,
    get_task_by_id,
    create_task,
    update_task,
    delete_task,
    InvalidTaskIdError,
    TaskNotFoundError
)
from ..store import TaskStore, get_task_store

logger = logging.getLogger(__name__)

INVALID_ID_MESSAGE = "Invalid ID format"
NOT_FOUND_MESSAGE = "Task not found"
INTERNAL_ERROR_MESSAGE = "Internal server error"

# Create API router
task_router = APIRouter()


def envelope_response(envelope: ApiResponse, status_code: int = 200) -> JSONResponse:
    """Serialize an envelope with JSON field names into a response."""
    return JSONResponse(
        status_code=status_code,
        content=envelope.model_dump(mode="json", by_alias=True)
    )


def error_response(status_code: int, message: str) -> JSONResponse:
    return envelope_response(ApiResponse.error(message), status_code)


@task_router.get("/tasks", response_model=ApiResponse[List[Task]])
async def list_tasks_endpoint(
    status: Optional[str] = None,
    store: TaskStore = Depends(get_task_store)
) -> JSONResponse:
    """Return every task.

    Args:
        status: Accepted for compatibility, currently not applied
        store: Task store dependency
    """
    logger.info(f"GET /tasks request - status: {status}")

    try:
        tasks = list_tasks(store)
        return envelope_response(
            ApiResponse[List[Task]].ok(tasks, f"Successfully retrieved {len(tasks)} tasks")
        )
    except Exception as e:
        logger.error(e, exc_info=True)
        return error_response(500, INTERNAL_ERROR_MESSAGE)


@task_router.get("/tasks/{task_id}", response_model=ApiResponse[Task])
async def get_task_endpoint(
    task_id: str,
    store: TaskStore = Depends(get_task_store)
) -> JSONResponse:
    """Return a single task.

    Raises no HTTP errors; failures are returned as envelopes with
    400 for a malformed id and 404 for an unknown one.
    """
    logger.info(f"GET /tasks/{task_id} request")

    try:
        task = get_task_by_id(parse_task_id(task_id), store)
        return envelope_response(ApiResponse[Task].ok(task, "Task retrieved successfully"))
    except InvalidTaskIdError as e:
        logger.warning(f"Invalid task ID: {e}")
        return error_response(400, INVALID_ID_MESSAGE)
    except TaskNotFoundError as e:
        logger.warning(f"Task not found: {e}")
        return error_response(404, NOT_FOUND_MESSAGE)
    except Exception as e:
        logger.error(e, exc_info=True)
        return error_response(500, INTERNAL_ERROR_MESSAGE)


@task_router.post("/tasks", response_model=ApiResponse[Task], status_code=201)
async def create_task_endpoint(
    payload: TaskRequest,
    store: TaskStore = Depends(get_task_store)
) -> JSONResponse:
    """Create a task from the request body under the next free id."""
    logger.info("POST /tasks request")

    try:
        task = create_task(payload, store)
        return envelope_response(ApiResponse[Task].ok(task, "Task created successfully"), 201)
    except Exception as e:
        logger.error(e, exc_info=True)
        return error_response(500, INTERNAL_ERROR_MESSAGE)


@task_router.put("/tasks/{task_id}", response_model=ApiResponse[Task])
async def update_task_endpoint(
    task_id: str,
    payload: TaskRequest,
    store: TaskStore = Depends(get_task_store)
) -> JSONResponse:
    """Replace a task's content and completion flag, keeping its id.

    Args:
        task_id: Raw id path segment
        payload: Replacement content and completion flag
        store: Task store dependency

    Returns:
        200 with the updated task, 400 for a malformed id,
        404 if no task has that id
    """
    logger.info(f"PUT /tasks/{task_id} request")

    try:
        task = update_task(parse_task_id(task_id), payload, store)
        return envelope_response(ApiResponse[Task].ok(task, "Task updated successfully"))
    except InvalidTaskIdError as e:
        logger.warning(f"Invalid task ID: {e}")
        return error_response(400, INVALID_ID_MESSAGE)
    except TaskNotFoundError as e:
        logger.warning(f"Task not found: {e}")
        return error_response(404, NOT_FOUND_MESSAGE)
    except Exception as e:
        logger.error(e, exc_info=True)
        return error_response(500, INTERNAL_ERROR_MESSAGE)


@task_router.delete("/tasks/{task_id}", response_model=ApiResponse[None])
async def delete_task_endpoint(
    task_id: str,
    store: TaskStore = Depends(get_task_store)
) -> JSONResponse:
    """Delete a task by id. The success envelope carries no data."""
    logger.info(f"DELETE /tasks/{task_id} request")

    try:
        delete_task(parse_task_id(task_id), store)
        return envelope_response(ApiResponse[None].ok(None, "Task deleted successfully"))
    except InvalidTaskIdError as e:
        logger.warning(f"Invalid task ID: {e}")
        return error_response(400, INVALID_ID_MESSAGE)
    except TaskNotFoundError as e:
        logger.warning(f"Task not found: {e}")
        return error_response(404, NOT_FOUND_MESSAGE)
    except Exception as e:
        logger.error(e, exc_info=True)
        return error_response(500, INTERNAL_ERROR_MESSAGE)
