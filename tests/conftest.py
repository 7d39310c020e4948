import pytest
from fastapi.testclient import TestClient

from taskboard.server.api.app import create_app
from taskboard.server.config.settings import get_settings
from taskboard.server.services.task_store import TaskStore


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(name="store")
def _store_fixture():
    return TaskStore()


@pytest.fixture(name="client")
def _client_fixture(store):
    """Client over an empty, injected store."""
    return TestClient(create_app(task_store=store))


@pytest.fixture(name="seeded_client")
def _seeded_client_fixture():
    """Client over a freshly bootstrapped application."""
    return TestClient(create_app())
