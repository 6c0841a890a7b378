import pytest
from fastapi.testclient import TestClient

from todolist_api.app.core.config import settings
from todolist_api.app.core.db import init_db
from todolist_api.app.main import create_app


@pytest.fixture
def database(tmp_path, monkeypatch):
    """Point the application at a fresh, migrated SQLite file."""
    db_path = tmp_path / "todolist.db"
    monkeypatch.setattr(settings, "database_url", str(db_path))
    init_db()
    return db_path


@pytest.fixture
def client(database):
    with TestClient(create_app()) as test_client:
        yield test_client
