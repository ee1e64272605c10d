"""
Database table models (schema definition)

Author: TM3
Date: 2026-10-16
"""
from .product import ProductRecord
from .order import OrderRecord, OrderItemRecord

__all__ = [
    "ProductRecord",
    "OrderRecord",
    "OrderItemRecord",
]
