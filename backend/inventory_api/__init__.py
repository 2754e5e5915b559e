"""
Inventory API - products, suppliers and orders over PostgreSQL
"""
__version__ = "1.0.0"
