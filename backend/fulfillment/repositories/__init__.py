"""
Repository Layer - Data Access

This layer handles all database queries and returns domain models.
Repositories abstract away SQL details from business logic.

Author: TM3
Date: 2026-10-16
"""
from fulfillment.repositories.product_repository import ProductRepository
from fulfillment.repositories.order_repository import OrderRepository

__all__ = [
    'ProductRepository',
    'OrderRepository',
]
