"""Shared fixtures: a throwaway SQLite database and an API test client."""

import pytest
from fastapi.testclient import TestClient

from inventory_api.app.core.config import settings
from inventory_api.app.core.db import init_db


@pytest.fixture
def database(tmp_path, monkeypatch):
    """Point the application at a fresh database file with the schema applied."""
    path = tmp_path / "inventory.db"
    monkeypatch.setattr(settings, "database_url", str(path))
    monkeypatch.setattr(settings, "enforce_product_rules", True)
    init_db()
    return path


@pytest.fixture
def client(database):
    from inventory_api.app.main import app

    with TestClient(app) as test_client:
        yield test_client
