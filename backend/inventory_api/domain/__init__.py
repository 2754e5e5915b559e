"""
Domain Layer - Business Entities

Pydantic models for the records the API reads and writes.
"""
from inventory_api.domain.product import Product
from inventory_api.domain.supplier import Supplier
from inventory_api.domain.order import Order

__all__ = ['Product', 'Supplier', 'Order']
