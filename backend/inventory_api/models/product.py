"""
Tabla de productos
"""
from sqlalchemy import Column, Integer, Numeric, String, Text

from inventory_api.core.database import Base


class ProductRecord(Base):
    """
    Products table

    The API writes whatever columns the caller sends, so this is the
    starting set; add columns here as the catalog grows.
    """
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)

    sku = Column(String(100), index=True)
    name = Column(String(255))
    description = Column(Text)
    price = Column(Numeric(12, 2))
    quantity = Column(Integer)
    supplier_id = Column(Integer, index=True)
