"""
Product Repository - Data Access Layer for Products

Products have no fixed column list: each key of the payload is written to
the column of the same name. Column names are quoted as identifiers and
values are always bound as parameters.
"""
import logging
from typing import Any, Dict, List, Optional

from psycopg2 import sql

from inventory_api.core.exceptions import ValidationError
from inventory_api.domain.product import Product
from inventory_api.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class ProductRepository(BaseRepository):
    """Repository for Product data access"""

    @staticmethod
    def _columns(data: Dict[str, Any]) -> Dict[str, Any]:
        """Payload minus the id, which is owned by the database"""
        return {key: value for key, value in data.items() if key != 'id'}

    def find_all(self) -> List[Product]:
        """
        Find all products

        Returns:
            List of products in database order (empty if none)
        """
        rows = self.db.fetch_all("SELECT * FROM products")
        return [Product.model_validate(row) for row in rows]

    def find_by_id(self, product_id: int) -> Optional[Product]:
        """
        Find product by ID

        Args:
            product_id: Internal product ID

        Returns:
            Product or None if not found
        """
        row = self.db.fetch_one("SELECT * FROM products WHERE id = %s", (product_id,))
        if not row:
            return None

        return Product.model_validate(row)

    def create(self, data: Dict[str, Any]) -> Product:
        """
        Insert a product with whatever columns the payload carries

        Returns:
            The submitted fields plus the generated id

        Raises:
            StorageError: unknown column, unadaptable value or any other database failure
        """
        columns = self._columns(data)

        if columns:
            query = sql.SQL("INSERT INTO products ({}) VALUES ({}) RETURNING id").format(
                sql.SQL(", ").join(map(sql.Identifier, columns)),
                sql.SQL(", ").join(sql.Placeholder() * len(columns)),
            )
        else:
            query = sql.SQL("INSERT INTO products DEFAULT VALUES RETURNING id")

        row = self.db.fetch_one(query, list(columns.values()))

        product = Product.model_validate({'id': row['id'], **columns})
        logger.info(f"Created product {product.id}")
        return product

    def update(self, product_id: int, data: Dict[str, Any]) -> Product:
        """
        Overwrite the given columns of a product

        Returns the id with the submitted fields; a missing row is not reported.

        Raises:
            ValidationError: the payload has no columns to write
            StorageError: database failure
        """
        columns = self._columns(data)
        if not columns:
            raise ValidationError("No fields to update")

        query = sql.SQL("UPDATE products SET {} WHERE id = %s").format(
            sql.SQL(", ").join(
                sql.SQL("{} = {}").format(sql.Identifier(column), sql.Placeholder())
                for column in columns
            )
        )
        self.db.execute(query, [*columns.values(), product_id])

        return Product.model_validate({'id': product_id, **columns})

    def delete(self, product_id: int) -> None:
        """Delete a product. Deleting a missing id is not an error."""
        deleted = self.db.execute("DELETE FROM products WHERE id = %s", (product_id,))
        logger.debug(f"Deleted {deleted} product row(s) for id {product_id}")
