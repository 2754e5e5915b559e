"""
Pytest fixtures and configuration for Inventory API tests

This file provides shared fixtures that can be used across all test modules.
"""
import os
from unittest.mock import MagicMock

import pytest
from dotenv import load_dotenv
from fastapi.testclient import TestClient

from inventory_api.core.database import Database, get_database
from inventory_api.main import app

# Load environment variables for tests
load_dotenv()


@pytest.fixture(scope="session")
def database_url():
    """
    Provides the database URL for integration tests

    Scope: session (created once per test session)
    """
    url = os.getenv("DATABASE_URL")
    if not url:
        pytest.skip("DATABASE_URL not configured")
    return url


@pytest.fixture
def mock_db():
    """
    Provides a Database gateway double

    fetch_all/fetch_one/execute are MagicMocks; tests set their return
    values or side effects.
    """
    db = MagicMock(spec=Database)
    db.fetch_all.return_value = []
    db.fetch_one.return_value = None
    db.execute.return_value = 1
    return db


@pytest.fixture
def client(mock_db):
    """
    Provides a TestClient whose handlers talk to mock_db

    The lifespan is not entered, so no real pool is opened.
    """
    app.dependency_overrides[get_database] = lambda: mock_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def sample_product_data():
    """
    Provides sample product data for tests
    """
    return {
        "sku": "WID-001",
        "name": "Widget",
        "quantity": 25,
    }


@pytest.fixture
def sample_supplier_data():
    """
    Provides sample supplier data for tests
    """
    return {
        "name": "Acme",
        "contact_name": "Wile E. Coyote",
        "contact_email": "wile@acme.test",
        "contact_phone": "555-0100",
        "address": "1 Desert Road",
    }


@pytest.fixture
def sample_order_data():
    """
    Provides sample order data for tests
    """
    return {
        "supplier_id": 1,
        "order_date": "2024-01-01",
        "total_amount": 100,
        "status": "pending",
    }
