"""
Repository Layer - Data Access

This layer handles all database queries and returns domain models.
Repositories abstract away SQL details from the API handlers.
"""
from inventory_api.repositories.product_repository import ProductRepository
from inventory_api.repositories.supplier_repository import SupplierRepository
from inventory_api.repositories.order_repository import OrderRepository

__all__ = [
    'ProductRepository',
    'SupplierRepository',
    'OrderRepository'
]
