"""Service layer for the task_list_svc application.

This package contains the task operations the HTTP routes delegate to.
"""

from .task_service import (
    parse_task_id,
    list_tasks,
    get_task_by_id,
    create_task,
    update_task,
    delete_task,
    InvalidTaskIdError,
    TaskNotFoundError
)

__all__ = [
    "parse_task_id",
    "list_tasks",
    "get_task_by_id",
    "create_task",
    "update_task",
    "delete_task",
    "InvalidTaskIdError",
    "TaskNotFoundError"
]
