"""Unit tests for environment based configuration."""

import importlib

import pytest

import task_list_svc.config


@pytest.fixture
def reload_config(monkeypatch):
    """Reload the config module after the test adjusts the environment."""
    def _reload():
        return importlib.reload(task_list_svc.config)

    yield _reload

    monkeypatch.undo()
    importlib.reload(task_list_svc.config)


class TestConfig:
    """Test cases for config module settings."""

    def test_defaults(self, monkeypatch, reload_config):
        """Test the values used when nothing is set."""
        for name in ("SERVICE_HOST", "SERVICE_PORT", "LOG_LEVEL", "SEED_TASKS"):
            monkeypatch.delenv(name, raising=False)
        monkeypatch.setattr("dotenv.load_dotenv", lambda *args, **kwargs: False)

        config = reload_config()

        assert config.SERVICE_HOST == "0.0.0.0"
        assert config.SERVICE_PORT == 8000
        assert config.LOG_LEVEL == "INFO"
        assert config.SEED_TASKS is True

    def test_environment_overrides(self, monkeypatch, reload_config):
        """Test reading every setting from the environment."""
        monkeypatch.setenv("SERVICE_HOST", "127.0.0.1")
        monkeypatch.setenv("SERVICE_PORT", "9001")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("SEED_TASKS", "false")

        config = reload_config()

        assert config.SERVICE_HOST == "127.0.0.1"
        assert config.SERVICE_PORT == 9001
        assert config.LOG_LEVEL == "DEBUG"
        assert config.SEED_TASKS is False

    @pytest.mark.parametrize("value, expected", [
        ("1", True),
        ("TRUE", True),
        ("yes", True),
        (" on ", True),
        ("0", False),
        ("no", False),
        ("", False),
    ])
    def test_get_bool_env(self, monkeypatch, value, expected):
        """Test boolean flag parsing."""
        monkeypatch.setenv("TASK_LIST_TEST_FLAG", value)

        assert task_list_svc.config.get_bool_env("TASK_LIST_TEST_FLAG", not expected) is expected

    def test_get_bool_env_default(self, monkeypatch):
        """Test that an unset flag falls back to the default."""
        monkeypatch.delenv("TASK_LIST_TEST_FLAG", raising=False)

        assert task_list_svc.config.get_bool_env("TASK_LIST_TEST_FLAG", True) is True
