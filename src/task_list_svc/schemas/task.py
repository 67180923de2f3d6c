"""Pydantic schemas for task-related operations.

This module defines the request body accepted by the create and update
endpoints and the uniform response envelope wrapping every response.
"""

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from ..models.task import Task

T = TypeVar("T")


class TaskRequest(BaseModel):
    """Input schema for creating or replacing a task.

    ``isDone`` may be omitted and defaults to False. Unknown keys in the
    JSON body are ignored.
    """
    model_config = ConfigDict(extra="ignore")

    content: str = Field(..., description="Task text (required)")
    is_done: bool = Field(False, alias="isDone", description="Completion flag, defaults to False")

    def to_task(self, task_id: int) -> Task:
        """Build the full Task this request describes under ``task_id``."""
        return Task(id=task_id, content=self.content, is_done=self.is_done)


class ApiResponse(BaseModel, Generic[T]):
    """Uniform response envelope carrying a success flag, payload and message."""
    success: bool = Field(..., description="Whether the operation succeeded")
    data: Optional[T] = Field(None, description="Operation payload, null on failure")
    message: str = Field(..., description="Human readable outcome")

    @classmethod
    def ok(cls, data: Optional[T], message: str) -> "ApiResponse[T]":
        return cls(success=True, data=data, message=message)

    @classmethod
    def error(cls, message: str) -> "ApiResponse[T]":
        return cls(success=False, data=None, message=message)

    model_config = {
        "json_schema_extra": {
            "example": {
                "success": True,
                "data": {"id": 1, "content": "Learn FastAPI", "isDone": True},
                "message": "Task created successfully"
            }
        }
    }
