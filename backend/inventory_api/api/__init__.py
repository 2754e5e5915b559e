"""
API Layer - HTTP handlers, one router per entity
"""
