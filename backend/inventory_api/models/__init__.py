"""
Modelos de base de datos (solo para crear el esquema)
"""
from .product import ProductRecord
from .supplier import SupplierRecord
from .order import OrderRecord

__all__ = [
    "ProductRecord",
    "SupplierRecord",
    "OrderRecord",
]
