"""In-memory task list CRUD service exposed over HTTP."""

__version__ = "0.1.0"
