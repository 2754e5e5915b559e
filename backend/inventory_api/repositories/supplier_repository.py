"""
Supplier Repository - Data Access Layer for Suppliers

Handles all database queries for suppliers and returns Supplier domain models.
"""
import logging
from typing import Any, Dict, List, Optional

from inventory_api.domain.supplier import Supplier
from inventory_api.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class SupplierRepository(BaseRepository):
    """
    Repository for Supplier data access

    Updates replace every column; fields left out of the payload are
    written as NULL.
    """

    COLUMNS = ('name', 'contact_name', 'contact_email', 'contact_phone', 'address')
    REQUIRED = ('name',)

    def _prepare(self, data: Dict[str, Any]) -> Supplier:
        self._require_fields(data, self.REQUIRED)
        return self._build(Supplier, {column: data.get(column) for column in self.COLUMNS})

    def find_all(self) -> List[Supplier]:
        """
        Find all suppliers

        Returns:
            List of suppliers in database order (empty if none)
        """
        rows = self.db.fetch_all("""
            SELECT id, name, contact_name, contact_email, contact_phone, address
            FROM suppliers
        """)
        return [Supplier.model_validate(row) for row in rows]

    def find_by_id(self, supplier_id: int) -> Optional[Supplier]:
        """
        Find supplier by ID

        Args:
            supplier_id: Internal supplier ID

        Returns:
            Supplier or None if not found
        """
        row = self.db.fetch_one("""
            SELECT id, name, contact_name, contact_email, contact_phone, address
            FROM suppliers
            WHERE id = %s
        """, (supplier_id,))

        if not row:
            return None

        return Supplier.model_validate(row)

    def create(self, data: Dict[str, Any]) -> Supplier:
        """
        Create a supplier

        Args:
            data: Request payload; unknown keys are ignored

        Returns:
            The created supplier with its generated id

        Raises:
            ValidationError: name missing or empty
            StorageError: database failure
        """
        supplier = self._prepare(data)

        row = self.db.fetch_one("""
            INSERT INTO suppliers (name, contact_name, contact_email, contact_phone, address)
            VALUES (%s, %s, %s, %s, %s)
            RETURNING id
        """, (
            supplier.name,
            supplier.contact_name,
            supplier.contact_email,
            supplier.contact_phone,
            supplier.address,
        ))

        supplier.id = row['id']
        logger.info(f"Created supplier {supplier.id} ({supplier.name})")
        return supplier

    def update(self, supplier_id: int, data: Dict[str, Any]) -> Supplier:
        """
        Replace a supplier's fields

        The submitted values are echoed back with the id; nothing is re-read,
        and an id with no matching row is not reported.
        """
        supplier = self._prepare(data)

        self.db.execute("""
            UPDATE suppliers
            SET name = %s,
                contact_name = %s,
                contact_email = %s,
                contact_phone = %s,
                address = %s
            WHERE id = %s
        """, (
            supplier.name,
            supplier.contact_name,
            supplier.contact_email,
            supplier.contact_phone,
            supplier.address,
            supplier_id,
        ))

        supplier.id = supplier_id
        return supplier

    def delete(self, supplier_id: int) -> None:
        """Delete a supplier. Deleting a missing id is not an error."""
        deleted = self.db.execute("DELETE FROM suppliers WHERE id = %s", (supplier_id,))
        logger.debug(f"Deleted {deleted} supplier row(s) for id {supplier_id}")
