"""Domain models for the task_list_svc application.

This package contains the immutable Task record and the seed data
the default store starts with.
"""

from .task import Task, SEED_TASKS

__all__ = ["Task", "SEED_TASKS"]
