"""
Orders API Endpoints
Order processing (fulfillment rules over every item of an order)

Author: TM3
Date: 2026-10-16
"""
import logging

from fastapi import APIRouter, Depends, HTTPException

from fulfillment.core.exceptions import InvalidProductTypeError, OrderNotFoundError
from fulfillment.domain.order import ProcessOrderResponse
from fulfillment.services.order_service import OrderService

logger = logging.getLogger(__name__)

router = APIRouter()


def get_order_service() -> OrderService:
    """
    FastAPI dependency providing the order service

    Usage:
        @router.post("/{order_id}/processOrder")
        def process_order(order_id: int, service: OrderService = Depends(get_order_service)):
            ...
    """
    return OrderService()


@router.post("/{order_id}/processOrder", response_model=ProcessOrderResponse)
def process_order(order_id: int, service: OrderService = Depends(get_order_service)):
    """
    Process an order

    Applies the stock rules of each product in the order, sends the
    resulting notifications and returns the order ID.
    """
    try:
        return service.process_order(order_id)

    except OrderNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidProductTypeError as e:
        logger.error(f"Order {order_id} aborted: {e}")
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        logger.exception(f"Error processing order {order_id}")
        raise HTTPException(status_code=500, detail=f"Error processing order: {str(e)}")
