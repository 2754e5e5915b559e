"""
Tests for the /api/suppliers endpoints

Handlers run against the mock_db gateway from conftest.
"""
from inventory_api.core.exceptions import StorageError


def test_create_supplier_returns_201_with_all_fields(client, mock_db):
    mock_db.fetch_one.return_value = {'id': 1}

    resp = client.post("/api/suppliers", json={"name": "Acme"})

    assert resp.status_code == 201
    assert resp.json() == {
        "id": 1,
        "name": "Acme",
        "contact_name": None,
        "contact_email": None,
        "contact_phone": None,
        "address": None,
    }


def test_create_supplier_without_name_is_500(client, mock_db):
    resp = client.post("/api/suppliers", json={"contact_name": "Bob"})

    assert resp.status_code == 500
    assert resp.json() == {"error": "Missing required fields"}
    mock_db.fetch_one.assert_not_called()


def test_list_suppliers(client, mock_db, sample_supplier_data):
    mock_db.fetch_all.return_value = [{"id": 1, **sample_supplier_data}]

    resp = client.get("/api/suppliers")

    assert resp.status_code == 200
    assert resp.json() == [{"id": 1, **sample_supplier_data}]


def test_list_suppliers_empty(client):
    resp = client.get("/api/suppliers")

    assert resp.status_code == 200
    assert resp.json() == []


def test_update_supplier_echoes_submitted_fields(client, mock_db):
    mock_db.execute.return_value = 0

    resp = client.put("/api/suppliers/77", json={"name": "Acme Corp", "contact_phone": "555-0199"})

    assert resp.status_code == 200
    assert resp.json()["id"] == 77
    assert resp.json()["name"] == "Acme Corp"
    assert resp.json()["contact_phone"] == "555-0199"


def test_delete_supplier_storage_failure_is_500(client, mock_db):
    mock_db.execute.side_effect = StorageError("connection refused")

    resp = client.delete("/api/suppliers/1")

    assert resp.status_code == 500
    assert resp.json() == {"error": "connection refused"}


def test_create_supplier_accepts_numeric_contact_phone(client, mock_db):
    mock_db.fetch_one.return_value = {'id': 2}

    resp = client.post("/api/suppliers", json={"name": "Acme", "contact_phone": 5550100})

    assert resp.status_code == 201
    assert resp.json()["contact_phone"] == "5550100"
    assert mock_db.fetch_one.call_args.args[1] == ('Acme', None, None, '5550100', None)
