"""
Tests for the root and health endpoints
"""
from unittest.mock import MagicMock

import pytest

from inventory_api.core.database import Database
from inventory_api.core.exceptions import StorageError
from inventory_api.main import app


@pytest.fixture
def app_database():
    """Attach a Database double to app.state for the duration of a test"""
    db = MagicMock(spec=Database)
    app.state.database = db
    yield db
    del app.state.database


def test_root(client):
    resp = client.get("/")

    assert resp.status_code == 200
    assert resp.json()["status"] == "online"


def test_health_connected(client, app_database):
    resp = client.get("/health")

    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "healthy"
    assert body["database"]["status"] == "connected"
    assert body["database"]["error"] is None
    app_database.ping.assert_called_once()


def test_health_degraded_when_database_down(client, app_database):
    app_database.ping.side_effect = StorageError("could not connect to server")

    resp = client.get("/health")

    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "degraded"
    assert body["database"]["status"] == "disconnected"
    assert body["database"]["error"] == "could not connect to server"
