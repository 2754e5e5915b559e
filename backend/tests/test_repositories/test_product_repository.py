"""
Unit tests for ProductRepository

These tests validate repository logic without requiring a database connection.
"""
from decimal import Decimal

import pytest
from psycopg2 import sql

from inventory_api.core.exceptions import StorageError, ValidationError
from inventory_api.domain.product import Product
from inventory_api.repositories.product_repository import ProductRepository


def _identifiers(composable):
    """Collect the identifier names inside a composed statement"""
    if isinstance(composable, sql.Composed):
        return [name for part in composable.seq for name in _identifiers(part)]
    if isinstance(composable, sql.Identifier):
        return list(composable.strings)
    return []


class TestProductRepository:
    """Test ProductRepository methods"""

    def test_find_all_keeps_every_column(self, mock_db):
        mock_db.fetch_all.return_value = [
            {'id': 1, 'name': 'Widget', 'price': Decimal('9.99'), 'quantity': 3},
        ]

        products = ProductRepository(mock_db).find_all()

        assert len(products) == 1
        assert isinstance(products[0], Product)
        assert products[0].to_dict() == {'id': 1, 'name': 'Widget', 'price': 9.99, 'quantity': 3}

    def test_find_by_id_returns_none_when_not_found(self, mock_db):
        assert ProductRepository(mock_db).find_by_id(999) is None

    def test_create_writes_payload_columns(self, mock_db, sample_product_data):
        mock_db.fetch_one.return_value = {'id': 10}

        product = ProductRepository(mock_db).create(sample_product_data)

        query, params = mock_db.fetch_one.call_args.args
        assert isinstance(query, sql.Composed)
        assert _identifiers(query) == ['sku', 'name', 'quantity']
        assert params == ['WID-001', 'Widget', 25]
        assert product.to_dict() == {'id': 10, 'sku': 'WID-001', 'name': 'Widget', 'quantity': 25}

    def test_create_quotes_hostile_column_names(self, mock_db):
        """Column names are identifiers, never raw SQL"""
        mock_db.fetch_one.return_value = {'id': 1}
        hostile = 'name) VALUES (1); DROP TABLE products; --'

        ProductRepository(mock_db).create({hostile: 'x'})

        query, params = mock_db.fetch_one.call_args.args
        assert _identifiers(query) == [hostile]
        assert params == ['x']

    def test_create_ignores_client_supplied_id(self, mock_db):
        mock_db.fetch_one.return_value = {'id': 4}

        product = ProductRepository(mock_db).create({'id': 99, 'name': 'Widget'})

        assert product.id == 4
        assert _identifiers(mock_db.fetch_one.call_args.args[0]) == ['name']

    def test_create_with_empty_body_uses_default_values(self, mock_db):
        mock_db.fetch_one.return_value = {'id': 1}

        product = ProductRepository(mock_db).create({})

        query, params = mock_db.fetch_one.call_args.args
        assert _identifiers(query) == []
        assert params == []
        assert product.to_dict() == {'id': 1}

    def test_create_unknown_column_is_storage_error(self, mock_db):
        mock_db.fetch_one.side_effect = StorageError('column "colour" of relation "products" does not exist')

        with pytest.raises(StorageError):
            ProductRepository(mock_db).create({'colour': 'red'})

    def test_update_binds_values_then_id(self, mock_db):
        mock_db.execute.return_value = 0

        product = ProductRepository(mock_db).update(5, {'name': 'Gadget', 'quantity': 0})

        query, params = mock_db.execute.call_args.args
        assert _identifiers(query) == ['name', 'quantity']
        assert params == ['Gadget', 0, 5]
        assert product.to_dict() == {'id': 5, 'name': 'Gadget', 'quantity': 0}

    def test_update_without_fields_fails_before_storage(self, mock_db):
        with pytest.raises(ValidationError, match='No fields to update'):
            ProductRepository(mock_db).update(5, {'id': 5})

        mock_db.execute.assert_not_called()

    def test_delete(self, mock_db):
        ProductRepository(mock_db).delete(5)

        mock_db.execute.assert_called_once_with('DELETE FROM products WHERE id = %s', (5,))
