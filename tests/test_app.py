"""Unit tests for the FastAPI application factory.

These tests verify store injection, the health endpoint and isolation
between applications created from separate stores.
"""

from fastapi.testclient import TestClient

from task_list_svc import config
from task_list_svc.api.app import create_app
from task_list_svc.store import TaskStore


class TestCreateApp:
    """Test cases for create_app."""

    def test_health_check(self, client: TestClient):
        """Test the health endpoint."""
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    def test_injected_store_is_used(self, store: TaskStore):
        """Test that the app serves the store it was created with."""
        app = create_app(store)

        assert app.state.task_store is store

    def test_default_store_is_seeded(self, monkeypatch):
        """Test that a default app starts with the seed tasks."""
        monkeypatch.setattr(config, "SEED_TASKS", True)

        app = create_app()

        assert len(app.state.task_store) == 3

    def test_default_store_empty_when_seeding_disabled(self, monkeypatch):
        """Test that SEED_TASKS off starts the app with no tasks."""
        monkeypatch.setattr(config, "SEED_TASKS", False)

        app = create_app()

        assert len(app.state.task_store) == 0

    def test_apps_do_not_share_state(self):
        """Test that changes through one app are invisible to another."""
        first = TestClient(create_app(TaskStore.with_seed_tasks()))
        second = TestClient(create_app(TaskStore.with_seed_tasks()))

        first.delete("/tasks/1")

        assert len(first.get("/tasks").json()["data"]) == 2
        assert len(second.get("/tasks").json()["data"]) == 3

    def test_module_level_app_exists(self):
        """Test that the ASGI app instance is importable."""
        from task_list_svc.api.app import app

        assert isinstance(app.state.task_store, TaskStore)
