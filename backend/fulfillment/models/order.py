"""
Orders and order items tables

Author: TM3
Date: 2026-10-16
"""
from sqlalchemy import Column, ForeignKey, Integer
from sqlalchemy.orm import relationship

from fulfillment.core.database import Base


class OrderRecord(Base):
    """
    Order header - items live in order_items
    """
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, index=True)

    items = relationship("OrderItemRecord", back_populates="order", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<OrderRecord(id={self.id})>"


class OrderItemRecord(Base):
    """
    Join table order <-> product (a product appears at most once per order)
    """
    __tablename__ = "order_items"

    order_id = Column(Integer, ForeignKey("orders.id", ondelete="CASCADE"), primary_key=True)
    product_id = Column(Integer, ForeignKey("products.id"), primary_key=True, index=True)

    order = relationship("OrderRecord", back_populates="items")

    def __repr__(self):
        return f"<OrderItemRecord(order_id={self.order_id}, product_id={self.product_id})>"
