"""
Tabla de órdenes de compra
"""
from sqlalchemy import Column, Date, Integer, Numeric, String

from inventory_api.core.database import Base


class OrderRecord(Base):
    """
    Orders table

    supplier_id is a plain column: deleting a supplier leaves its orders alone.
    """
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, index=True)

    supplier_id = Column(Integer, nullable=False, index=True)
    order_date = Column(Date, nullable=False, index=True)
    total_amount = Column(Numeric(12, 2), nullable=False)
    status = Column(String(50))
