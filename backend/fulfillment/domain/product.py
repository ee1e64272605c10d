"""
Product Domain Model

Represents a sellable product and the fulfillment category that decides
which stock rules apply to it.

Author: TM3
Date: 2026-10-16
"""
from datetime import date
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from fulfillment.core.exceptions import InvalidProductTypeError


class ProductType(str, Enum):
    """Closed set of fulfillment categories"""
    NORMAL = "NORMAL"
    SEASONAL = "SEASONAL"
    EXPIRABLE = "EXPIRABLE"


class Product(BaseModel):
    """
    Product domain model - mirrors the products table

    Fields:
        id: Internal product ID (None until persisted)
        name: Product name, used verbatim in notifications
        available: Sellable units (None = unknown stock, treated as zero)
        lead_time: Replenishment delay in days (optional)
        type: Raw category as stored in the database (see product_type)
        expiry_date: Expiry date (EXPIRABLE only)
        season_start_date: First day of the season window (SEASONAL only)
        season_end_date: Last day of the season window (SEASONAL only)
    """

    id: Optional[int] = Field(None, description="Internal product ID")
    name: str = Field(..., description="Product name")
    available: Optional[int] = Field(None, description="Available units")
    lead_time: Optional[int] = Field(None, description="Replenishment lead time in days")

    # Stored as string in DB, exposed type-safe through product_type
    type: str = Field(..., description="Product category (NORMAL, SEASONAL, EXPIRABLE)")

    expiry_date: Optional[date] = Field(None, description="Expiry date")
    season_start_date: Optional[date] = Field(None, description="Season start date")
    season_end_date: Optional[date] = Field(None, description="Season end date")

    model_config = ConfigDict(from_attributes=True)

    @property
    def product_type(self) -> ProductType:
        """Type-safe access to the category; unknown values are fatal"""
        try:
            return ProductType(self.type)
        except ValueError:
            raise InvalidProductTypeError(self.type) from None

    @property
    def has_stock(self) -> bool:
        return self.available is not None and self.available > 0

    @property
    def has_season(self) -> bool:
        return self.season_start_date is not None and self.season_end_date is not None

    def is_in_season(self, today: date) -> bool:
        """Strictly between season start and end; boundary days are out of season"""
        return self.has_season and self.season_start_date < today < self.season_end_date

    def is_not_expired(self, today: date) -> bool:
        """A missing expiry date counts as expired"""
        return self.expiry_date is not None and self.expiry_date > today
