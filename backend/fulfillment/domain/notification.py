"""
Notification Domain Models

Outbound notifications emitted while fulfilling an order.

Author: TM3
Date: 2026-10-16
"""
from datetime import date
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class NotificationKind(str, Enum):
    DELAY = "DELAY"
    OUT_OF_STOCK = "OUT_OF_STOCK"
    EXPIRATION = "EXPIRATION"


class Notification(BaseModel):
    """
    A single notification about one product

    Fields:
        kind: What happened (delay, out of stock, expiration)
        product_name: Product name as displayed to customers
        lead_time: Replenishment delay in days (DELAY only)
        expiry_date: Expiry date of the product (EXPIRATION only, may be None)
    """

    kind: NotificationKind
    product_name: str
    lead_time: Optional[int] = Field(None, description="Replenishment delay in days")
    expiry_date: Optional[date] = Field(None, description="Product expiry date")

    @classmethod
    def delay(cls, lead_time: int, product_name: str) -> "Notification":
        return cls(kind=NotificationKind.DELAY, product_name=product_name, lead_time=lead_time)

    @classmethod
    def out_of_stock(cls, product_name: str) -> "Notification":
        return cls(kind=NotificationKind.OUT_OF_STOCK, product_name=product_name)

    @classmethod
    def expiration(cls, product_name: str, expiry_date: Optional[date]) -> "Notification":
        return cls(kind=NotificationKind.EXPIRATION, product_name=product_name, expiry_date=expiry_date)
