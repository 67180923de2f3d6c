"""Task model for the task_list_svc application.

This module defines the immutable Task record owned by the TaskStore.
Instances handed out by the store are snapshots; a change to a task is
always a full replacement with a new instance carrying the same id.
"""

from pydantic import BaseModel, ConfigDict, Field


class Task(BaseModel):
    """A to-do item with an integer id, text content and a completion flag.

    The completion flag is serialized as ``isDone``; both ``is_done`` and
    ``isDone`` are accepted on construction.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int = Field(..., description="Unique task identifier")
    content: str = Field(..., description="Task text")
    is_done: bool = Field(..., alias="isDone", description="Completion flag")

    def __repr__(self):
        return f"<Task(id={self.id}, content='{self.content}', is_done={self.is_done})>"


SEED_TASKS = (
    Task(id=1, content="Learn FastAPI", is_done=True),
    Task(id=2, content="Build a REST API", is_done=False),
    Task(id=3, content="Write Unit Tests", is_done=False),
)
