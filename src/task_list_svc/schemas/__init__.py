"""Pydantic schemas for the task_list_svc application.

This package contains the request body model and the response envelope
used by every endpoint.
"""

from .task import TaskRequest, ApiResponse

__all__ = ["TaskRequest", "ApiResponse"]
