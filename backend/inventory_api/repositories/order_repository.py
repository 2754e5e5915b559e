"""
Order Repository - Data Access Layer for Orders

Handles all database queries for orders and returns Order domain models.
"""
import logging
from typing import Any, Dict, List, Optional

from inventory_api.domain.order import Order
from inventory_api.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class OrderRepository(BaseRepository):
    """
    Repository for Order data access

    supplier_id is stored as given; whether that supplier exists is left
    to the database.
    """

    COLUMNS = ('supplier_id', 'order_date', 'total_amount', 'status')
    REQUIRED = ('supplier_id', 'order_date', 'total_amount')

    def _prepare(self, data: Dict[str, Any]) -> Order:
        self._require_fields(data, self.REQUIRED)
        return self._build(Order, {column: data.get(column) for column in self.COLUMNS})

    def find_all(self) -> List[Order]:
        """
        Find all orders

        Returns:
            List of orders in database order (empty if none)
        """
        rows = self.db.fetch_all("""
            SELECT id, supplier_id, order_date, total_amount, status
            FROM orders
        """)
        return [Order.model_validate(row) for row in rows]

    def find_by_id(self, order_id: int) -> Optional[Order]:
        """
        Find order by ID

        Args:
            order_id: Internal order ID

        Returns:
            Order or None if not found
        """
        row = self.db.fetch_one("""
            SELECT id, supplier_id, order_date, total_amount, status
            FROM orders
            WHERE id = %s
        """, (order_id,))

        if not row:
            return None

        return Order.model_validate(row)

    def create(self, data: Dict[str, Any]) -> Order:
        """
        Create an order

        Args:
            data: Request payload; supplier_id, order_date and total_amount are required

        Returns:
            The created order with its generated id

        Raises:
            ValidationError: a required field is missing, empty or zero
            StorageError: database failure
        """
        order = self._prepare(data)

        row = self.db.fetch_one("""
            INSERT INTO orders (supplier_id, order_date, total_amount, status)
            VALUES (%s, %s, %s, %s)
            RETURNING id
        """, (order.supplier_id, order.order_date, order.total_amount, order.status))

        order.id = row['id']
        logger.info(f"Created order {order.id} for supplier {order.supplier_id}")
        return order

    def update(self, order_id: int, data: Dict[str, Any]) -> Order:
        """
        Replace an order's fields

        Returns the submitted values with the id, whether or not a row matched.
        """
        order = self._prepare(data)

        self.db.execute("""
            UPDATE orders
            SET supplier_id = %s,
                order_date = %s,
                total_amount = %s,
                status = %s
            WHERE id = %s
        """, (order.supplier_id, order.order_date, order.total_amount, order.status, order_id))

        order.id = order_id
        return order

    def delete(self, order_id: int) -> None:
        """Delete an order. Deleting a missing id is not an error."""
        deleted = self.db.execute("DELETE FROM orders WHERE id = %s", (order_id,))
        logger.debug(f"Deleted {deleted} order row(s) for id {order_id}")
