"""
Order Domain Models

Author: TM3
Date: 2026-10-16
"""
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from fulfillment.domain.product import Product


class Order(BaseModel):
    """
    Order domain model - an order and the products it contains

    Items are the same Product records the product store owns. They carry
    no ordering guarantee.
    """

    id: int = Field(..., description="Order ID")
    items: List[Product] = Field(default_factory=list, description="Ordered products")

    model_config = ConfigDict(from_attributes=True)


class ProcessOrderResponse(BaseModel):
    """Acknowledgment returned once every item of the order was processed"""
    id: int
