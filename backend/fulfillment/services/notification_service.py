"""
Notification Service
Sends delay / out-of-stock / expiration notifications about products

Author: TM3
Date: 2026-10-16
"""
import logging
from abc import ABC, abstractmethod
from datetime import date
from typing import Optional

import httpx

from fulfillment.core.config import settings
from fulfillment.domain.notification import Notification

logger = logging.getLogger(__name__)


class NotificationService(ABC):
    """
    Outbound notification contract

    Calls are fire-and-forget: callers never use a return value.
    """

    @abstractmethod
    def send_delay_notification(self, lead_time: int, product_name: str) -> None:
        ...

    @abstractmethod
    def send_out_of_stock_notification(self, product_name: str) -> None:
        ...

    @abstractmethod
    def send_expiration_notification(self, product_name: str, expiry_date: Optional[date]) -> None:
        ...


class LoggingNotificationService(NotificationService):
    """Writes notifications to the application log (default when no webhook is configured)"""

    def send_delay_notification(self, lead_time: int, product_name: str) -> None:
        logger.info(f"Delay notification: '{product_name}' back in stock in {lead_time} days")

    def send_out_of_stock_notification(self, product_name: str) -> None:
        logger.info(f"Out of stock notification: '{product_name}' is not available")

    def send_expiration_notification(self, product_name: str, expiry_date: Optional[date]) -> None:
        logger.info(f"Expiration notification: '{product_name}' expired (expiry date: {expiry_date})")


class WebhookNotificationService(NotificationService):
    """
    Posts each notification as JSON to a webhook URL

    Payload is Notification.model_dump(mode="json"), e.g.:
        {"kind": "DELAY", "product_name": "USB Dongle", "lead_time": 10, "expiry_date": null}

    Delivery is not retried: HTTP errors are logged and re-raised.
    """

    def __init__(self, url: str, timeout: float = 10.0, client: Optional[httpx.Client] = None):
        self.url = url
        self.timeout = timeout
        # Injected clients are owned by the caller; otherwise one client per post
        self.client = client

    def _post(self, notification: Notification) -> None:
        if self.client is not None:
            self._send(self.client, notification)
            return

        with httpx.Client(timeout=self.timeout) as client:
            self._send(client, notification)

    def _send(self, client: httpx.Client, notification: Notification) -> None:
        try:
            response = client.post(
                self.url,
                json=notification.model_dump(mode="json"),
                headers={"Content-Type": "application/json"},
                timeout=self.timeout
            )
            response.raise_for_status()
            logger.debug(f"Notification {notification.kind.value} delivered for '{notification.product_name}'")

        except httpx.HTTPStatusError as e:
            logger.error(f"Notification webhook error: {e.response.status_code} - {e.response.text}")
            raise
        except httpx.HTTPError as e:
            logger.error(f"Notification webhook unreachable: {e}")
            raise

    def send_delay_notification(self, lead_time: int, product_name: str) -> None:
        self._post(Notification.delay(lead_time, product_name))

    def send_out_of_stock_notification(self, product_name: str) -> None:
        self._post(Notification.out_of_stock(product_name))

    def send_expiration_notification(self, product_name: str, expiry_date: Optional[date]) -> None:
        self._post(Notification.expiration(product_name, expiry_date))


def get_notification_service() -> NotificationService:
    """Webhook delivery when NOTIFICATION_WEBHOOK_URL is set, log-only otherwise"""
    if settings.NOTIFICATION_WEBHOOK_URL:
        return WebhookNotificationService(
            settings.NOTIFICATION_WEBHOOK_URL,
            timeout=settings.NOTIFICATION_TIMEOUT
        )
    return LoggingNotificationService()
