"""
Order Service
Processes an order: runs the fulfillment rules on every item

Author: TM3
Date: 2026-10-16
"""
import logging
from datetime import date
from typing import Callable, Optional

from fulfillment.core.database import transaction
from fulfillment.core.exceptions import OrderNotFoundError
from fulfillment.domain.order import ProcessOrderResponse
from fulfillment.repositories.order_repository import OrderRepository
from fulfillment.repositories.product_repository import ProductRepository
from fulfillment.services.notification_service import NotificationService, get_notification_service
from fulfillment.services.product_service import ProductService

logger = logging.getLogger(__name__)


class OrderService:
    """
    Service for processing orders

    One order = one database transaction. Items are processed one after the
    other; the first failure rolls everything back and is re-raised.
    """

    def __init__(
        self,
        notification_service: Optional[NotificationService] = None,
        clock: Callable[[], date] = date.today
    ):
        self.notification_service = notification_service or get_notification_service()
        self.clock = clock

    def process_order(self, order_id: int) -> ProcessOrderResponse:
        """
        Process every item of an order

        Args:
            order_id: Internal order ID

        Returns:
            ProcessOrderResponse with the order ID

        Raises:
            OrderNotFoundError: If no order has this ID
            InvalidProductTypeError: If an item has an unknown category
        """
        today = self.clock()

        with transaction() as conn:
            order = OrderRepository(conn).find_by_id(order_id)
            if order is None:
                raise OrderNotFoundError(order_id)

            logger.info(f"Processing order {order.id} ({len(order.items)} items, date {today})")

            product_service = ProductService(ProductRepository(conn), self.notification_service)
            for product in order.items:
                product_service.process_product_for_order(product, today)

        logger.info(f"Order {order.id} processed")
        return ProcessOrderResponse(id=order.id)
