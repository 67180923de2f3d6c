"""Task service layer for identifier handling and store operations.

This module implements the task operations exposed by the API on top of
an injected TaskStore: id parsing, listing, retrieval, creation, full
replacement and deletion.
"""

import logging
import re
from typing import List

from ..models.task import Task
from ..schemas.task import TaskRequest
from ..store import TaskStore

logger = logging.getLogger(__name__)

_TASK_ID_PATTERN = re.compile(r"[+-]?[0-9]+")
_MIN_TASK_ID = -(2 ** 31)
_MAX_TASK_ID = 2 ** 31 - 1


class InvalidTaskIdError(ValueError):
    """Exception raised when a task id is not a well-formed integer."""
    pass


class TaskNotFoundError(ValueError):
    """Exception raised when a task with the specified ID is not found."""
    pass


def parse_task_id(raw: str) -> int:
    """Parse a path segment into a task id.

    Accepts an optional sign followed by ASCII digits whose value fits in a
    signed 32-bit integer. Whitespace, underscores and decimal points are
    rejected.

    Args:
        raw: The raw path segment

    Returns:
        The parsed integer id

    Raises:
        InvalidTaskIdError: When ``raw`` is not a well-formed id
    """
    if raw is None or not _TASK_ID_PATTERN.fullmatch(raw):
        raise InvalidTaskIdError(f"Invalid task ID '{raw}'")

    try:
        task_id = int(raw)
    except ValueError as e:
        raise InvalidTaskIdError(f"Task ID of length {len(raw)} is out of range") from e
    if not _MIN_TASK_ID <= task_id <= _MAX_TASK_ID:
        raise InvalidTaskIdError(f"Task ID '{raw}' is out of range")
    return task_id


def list_tasks(store: TaskStore) -> List[Task]:
    """Return every stored task in insertion order."""
    tasks = store.get_all()
    logger.info(f"Successfully retrieved {len(tasks)} tasks")
    return tasks


def get_task_by_id(task_id: int, store: TaskStore) -> Task:
    """Retrieve a task by its id.

    Args:
        task_id: Id of the task to retrieve
        store: Task store to read from

    Returns:
        The stored Task

    Raises:
        TaskNotFoundError: When no task with ``task_id`` exists
    """
    logger.info(f"Retrieving task with ID: {task_id}")

    task = store.get_by_id(task_id)
    if task is None:
        raise TaskNotFoundError(f"Task with ID {task_id} not found")
    return task


def create_task(payload: TaskRequest, store: TaskStore) -> Task:
    """Create a new task under the next free id.

    Args:
        payload: Validated request body
        store: Task store to add the task to

    Returns:
        The created Task
    """
    logger.info(f"Creating task with content: {payload.content}")

    task = store.create(payload.content, payload.is_done)

    logger.info(f"Successfully created task with ID: {task.id}")
    return task


def update_task(task_id: int, payload: TaskRequest, store: TaskStore) -> Task:
    """Replace the content and completion flag of an existing task.

    The task keeps its id; every other field is taken from ``payload``.

    Args:
        task_id: Id of the task to replace
        payload: Validated request body
        store: Task store holding the task

    Returns:
        The updated Task

    Raises:
        TaskNotFoundError: When no task with ``task_id`` exists
    """
    logger.info(f"Updating task with ID: {task_id}")

    updated = payload.to_task(task_id)
    if not store.update(task_id, updated):
        raise TaskNotFoundError(f"Task with ID {task_id} not found")

    logger.info(f"Successfully updated task with ID: {task_id}")
    return updated


def delete_task(task_id: int, store: TaskStore) -> None:
    """Remove a task.

    Raises:
        TaskNotFoundError: When no task with ``task_id`` exists
    """
    logger.info(f"Deleting task with ID: {task_id}")

    if not store.delete(task_id):
        raise TaskNotFoundError(f"Task with ID {task_id} not found")

    logger.info(f"Successfully deleted task with ID: {task_id}")
