"""
Product Service
Applies fulfillment decisions: saves the product and sends notifications

Author: TM3
Date: 2026-10-16
"""
import logging
from datetime import date
from typing import Optional

from fulfillment.domain.notification import Notification, NotificationKind
from fulfillment.domain.product import Product
from fulfillment.repositories.product_repository import ProductRepository
from fulfillment.services.fulfillment_evaluator import FulfillmentDecision, FulfillmentEvaluator
from fulfillment.services.notification_service import NotificationService

logger = logging.getLogger(__name__)


class ProductService:
    """
    Service for processing one product of an order

    Keeps business rules in FulfillmentEvaluator; this class only wires the
    decision to the product store and the notifier.
    """

    def __init__(
        self,
        product_repository: ProductRepository,
        notification_service: NotificationService,
        evaluator: Optional[FulfillmentEvaluator] = None
    ):
        self.product_repository = product_repository
        self.notification_service = notification_service
        self.evaluator = evaluator or FulfillmentEvaluator()

    def process_product_for_order(self, product: Product, today: Optional[date] = None) -> FulfillmentDecision:
        """
        Evaluate one product and apply the outcome

        Args:
            product: Product taken from the order
            today: Evaluation date (default: date.today())

        Returns:
            The applied FulfillmentDecision

        Raises:
            InvalidProductTypeError: If the product category is unknown
        """
        today = today or date.today()
        decision = self.evaluator.evaluate(product, today)

        logger.debug(
            f"Product {product.id} ('{product.name}', {product.type}): "
            f"available={product.available}, persist={decision.persist}, "
            f"notification={decision.notification.kind.value if decision.notification else None}"
        )

        if decision.persist:
            self.product_repository.save(decision.product)

        if decision.notification is not None:
            self._notify(decision.notification)

        return decision

    def _notify(self, notification: Notification) -> None:
        logger.info(f"Sending {notification.kind.value} notification for '{notification.product_name}'")

        if notification.kind is NotificationKind.DELAY:
            self.notification_service.send_delay_notification(notification.lead_time, notification.product_name)
        elif notification.kind is NotificationKind.OUT_OF_STOCK:
            self.notification_service.send_out_of_stock_notification(notification.product_name)
        elif notification.kind is NotificationKind.EXPIRATION:
            self.notification_service.send_expiration_notification(
                notification.product_name, notification.expiry_date
            )
