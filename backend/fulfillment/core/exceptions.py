"""
Domain errors raised by the fulfillment services

Author: TM3
Date: 2026-10-16
"""


class OrderNotFoundError(Exception):
    """Raised when an order identifier does not resolve to a stored order."""

    def __init__(self, order_id: int) -> None:
        super().__init__(f"Order not found: {order_id}")
        self.order_id = order_id


class InvalidProductTypeError(Exception):
    """
    Raised when a product's stored type is not one of the known categories.

    This is a data error: processing of the whole order is aborted.
    """

    def __init__(self, product_type) -> None:
        super().__init__(f"Unknown product type: {product_type}")
        self.product_type = product_type
