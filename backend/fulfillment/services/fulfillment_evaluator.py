"""
Fulfillment Evaluator
Per-category stock rules applied to each product of an order

Given a product and the current date, decides:
- the stock mutation (decrement, force to zero, or nothing)
- whether the product must be persisted
- which notification, if any, must be sent

Rules:
    NORMAL
        in stock                      -> decrement, save
        out of stock, lead time > 0   -> save, DELAY
        otherwise                     -> nothing
    SEASONAL
        in season and in stock        -> decrement, save
        no season dates               -> NORMAL out-of-stock rule
        today + lead time > season end -> OUT_OF_STOCK, available = 0, save
        season not started            -> OUT_OF_STOCK, save
        lead time > 0                 -> save, DELAY
        otherwise                     -> nothing (no save)
    EXPIRABLE
        in stock and not expired      -> decrement, save
        otherwise                     -> EXPIRATION, available = 0, save

All date comparisons are strict. The evaluator never touches the database
or sends anything itself; ProductService applies the decision.

Author: TM3
Date: 2026-10-16
"""
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Optional

from fulfillment.core.exceptions import InvalidProductTypeError
from fulfillment.domain.notification import Notification
from fulfillment.domain.product import Product, ProductType


@dataclass
class FulfillmentDecision:
    """Outcome of evaluating one product"""
    product: Product
    persist: bool = False
    notification: Optional[Notification] = None


class FulfillmentEvaluator:
    """
    Stateless rule engine, dispatching on the product category

    The product passed in is updated in place and returned inside the
    decision.
    """

    def evaluate(self, product: Product, today: date) -> FulfillmentDecision:
        product_type = product.product_type

        if product_type is ProductType.NORMAL:
            return self._evaluate_normal(product)
        elif product_type is ProductType.SEASONAL:
            return self._evaluate_seasonal(product, today)
        elif product_type is ProductType.EXPIRABLE:
            return self._evaluate_expirable(product, today)

        raise InvalidProductTypeError(product.type)

    def _evaluate_normal(self, product: Product) -> FulfillmentDecision:
        if product.has_stock:
            return self._decrement(product)

        return self._delay_if_lead_time(product, product.lead_time)

    def _evaluate_seasonal(self, product: Product, today: date) -> FulfillmentDecision:
        if product.is_in_season(today) and product.has_stock:
            return self._decrement(product)

        if not product.has_season:
            return self._delay_if_lead_time(product, product.lead_time)

        lead_time = product.lead_time or 0

        # Replenishment would land after the season is over
        if today + timedelta(days=lead_time) > product.season_end_date:
            product.available = 0
            return FulfillmentDecision(product, persist=True, notification=Notification.out_of_stock(product.name))

        if today < product.season_start_date:
            return FulfillmentDecision(product, persist=True, notification=Notification.out_of_stock(product.name))

        # Replenishment feasible within the season. With no lead time there
        # is nothing to announce and nothing is saved.
        return self._delay_if_lead_time(product, lead_time)

    def _evaluate_expirable(self, product: Product, today: date) -> FulfillmentDecision:
        if product.has_stock and product.is_not_expired(today):
            return self._decrement(product)

        notification = Notification.expiration(product.name, product.expiry_date)
        product.available = 0
        return FulfillmentDecision(product, persist=True, notification=notification)

    @staticmethod
    def _decrement(product: Product) -> FulfillmentDecision:
        product.available -= 1
        return FulfillmentDecision(product, persist=True)

    @staticmethod
    def _delay_if_lead_time(product: Product, lead_time: Optional[int]) -> FulfillmentDecision:
        if lead_time is not None and lead_time > 0:
            product.lead_time = lead_time
            return FulfillmentDecision(product, persist=True, notification=Notification.delay(lead_time, product.name))

        return FulfillmentDecision(product)
