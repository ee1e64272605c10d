"""
Products table

Author: TM3
Date: 2026-10-16
"""
from sqlalchemy import Column, Date, Integer, String

from fulfillment.core.database import Base


class ProductRecord(Base):
    """
    Product catalog row with its fulfillment category
    """
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)

    lead_time = Column(Integer)
    available = Column(Integer)

    # NORMAL / SEASONAL / EXPIRABLE, kept as plain text
    type = Column(String(20), nullable=False)
    name = Column(String(255), nullable=False)

    # EXPIRABLE
    expiry_date = Column(Date)

    # SEASONAL
    season_start_date = Column(Date)
    season_end_date = Column(Date)

    def __repr__(self):
        return f"<ProductRecord(id={self.id}, name='{self.name}', type='{self.type}')>"
