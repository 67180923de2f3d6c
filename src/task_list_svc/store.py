"""In-memory task storage for the task_list_svc application.

This module provides the TaskStore that owns every Task record, assigns
identifiers and implements the CRUD primitives the service layer builds
on. A store is an explicitly constructed instance; the application
attaches one to its state and request handlers receive it through a
FastAPI dependency.
"""

import logging
import threading
from typing import Iterable, List, Optional

from fastapi import Request

from .models.task import SEED_TASKS, Task

logger = logging.getLogger(__name__)


class DuplicateTaskIdError(ValueError):
    """Exception raised when adding a task whose id is already stored."""
    pass


class TaskStore:
    """Insertion-ordered collection of Task records keyed by integer id.

    Every read and write holds an internal re-entrant lock, so a single
    store may be shared by concurrently running request handlers.
    """

    def __init__(self, tasks: Optional[Iterable[Task]] = None) -> None:
        self._lock = threading.RLock()
        self._tasks: List[Task] = []
        self.reset(tasks if tasks is not None else ())

    @classmethod
    def with_seed_tasks(cls) -> "TaskStore":
        """Create a store holding the three standard seed tasks."""
        return cls(SEED_TASKS)

    def reset(self, tasks: Optional[Iterable[Task]] = None) -> None:
        """Replace the store contents.

        Args:
            tasks: Tasks to start from. If None, the seed tasks are used.

        Raises:
            DuplicateTaskIdError: If ``tasks`` contains the same id twice.
        """
        initial = list(SEED_TASKS if tasks is None else tasks)
        ids = [task.id for task in initial]
        if len(ids) != len(set(ids)):
            raise DuplicateTaskIdError(f"Duplicate task ids in initial tasks: {ids}")

        with self._lock:
            self._tasks = initial
        logger.debug(f"Task store reset with {len(initial)} tasks")

    def get_all(self) -> List[Task]:
        """Return all tasks in insertion order as a new list."""
        with self._lock:
            return list(self._tasks)

    def get_by_id(self, task_id: int) -> Optional[Task]:
        """Return the task with ``task_id``, or None if absent."""
        with self._lock:
            return next((task for task in self._tasks if task.id == task_id), None)

    def get_new_id(self) -> int:
        """Return ``max(existing ids) + 1``, or 1 when the store is empty.

        Ids of deleted tasks are only reused once no greater id remains.
        """
        with self._lock:
            return max((task.id for task in self._tasks), default=0) + 1

    def add(self, task: Task) -> None:
        """Append ``task``; its id must not already be stored.

        Raises:
            DuplicateTaskIdError: When a task with the same id exists.
        """
        with self._lock:
            if self.get_by_id(task.id) is not None:
                raise DuplicateTaskIdError(f"Task with ID {task.id} already exists")
            self._tasks.append(task)

    def create(self, content: str, is_done: bool = False) -> Task:
        """Assign the next id to a new task and append it in one step."""
        with self._lock:
            task = Task(id=self.get_new_id(), content=content, is_done=is_done)
            self._tasks.append(task)
        return task

    def update(self, task_id: int, new_task: Task) -> bool:
        """Replace the task matching ``task_id`` in place.

        Args:
            task_id: Id of the task to replace
            new_task: Full replacement; its id must equal ``task_id``

        Returns:
            True if a task was replaced, False if ``task_id`` is absent.

        Raises:
            ValueError: When ``new_task`` carries a different id.
        """
        if new_task.id != task_id:
            raise ValueError(f"Replacement task id {new_task.id} does not match target id {task_id}")

        with self._lock:
            for index, task in enumerate(self._tasks):
                if task.id == task_id:
                    self._tasks[index] = new_task
                    return True
        return False

    def delete(self, task_id: int) -> bool:
        """Remove the task matching ``task_id``; False if absent."""
        with self._lock:
            for index, task in enumerate(self._tasks):
                if task.id == task_id:
                    del self._tasks[index]
                    return True
        return False

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)


def get_task_store(request: Request) -> TaskStore:
    """Return the TaskStore attached to the running application.

    Used as a FastAPI dependency by the task routes.
    """
    return request.app.state.task_store
