"""Pytest configuration and fixtures for testing.

This module provides shared fixtures that give every test its own
seeded TaskStore and an application client bound to that store.
"""

import pytest
from fastapi.testclient import TestClient

from task_list_svc.api.app import create_app
from task_list_svc.store import TaskStore


@pytest.fixture(scope="function")
def store():
    """Create a TaskStore holding the three seed tasks.

    Returns:
        A fresh TaskStore, independent of every other test.
    """
    return TaskStore.with_seed_tasks()


@pytest.fixture(scope="function")
def empty_store():
    """Create a TaskStore with no tasks."""
    return TaskStore()


@pytest.fixture(scope="function")
def client(store):
    """Create a FastAPI test client serving the ``store`` fixture.

    Args:
        store: TaskStore fixture injected into the application.

    Yields:
        TestClient instance bound to a freshly created application.
    """
    app = create_app(store)

    with TestClient(app) as test_client:
        yield test_client
