"""
Tabla de proveedores
"""
from sqlalchemy import Column, Integer, String, Text

from inventory_api.core.database import Base


class SupplierRecord(Base):
    __tablename__ = "suppliers"

    id = Column(Integer, primary_key=True, index=True)

    name = Column(String(255), nullable=False)
    contact_name = Column(String(255))
    contact_email = Column(String(255))
    contact_phone = Column(String(50))
    address = Column(Text)
