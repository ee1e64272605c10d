"""
Domain Layer - Business Entities

This layer contains Pydantic models representing business entities.
These models enforce type safety and validation across the application.

Author: TM3
Date: 2026-10-16
"""
from fulfillment.domain.product import Product, ProductType
from fulfillment.domain.order import Order, ProcessOrderResponse
from fulfillment.domain.notification import Notification, NotificationKind

__all__ = [
    'Product',
    'ProductType',
    'Order',
    'ProcessOrderResponse',
    'Notification',
    'NotificationKind',
]
