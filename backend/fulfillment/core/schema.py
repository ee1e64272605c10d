"""
Schema creation and demo data

Used by scripts/init_db.py to bootstrap a local database.

Author: TM3
Date: 2026-10-16
"""
import logging
from datetime import date, timedelta
from typing import List

from psycopg2.extras import RealDictCursor

from fulfillment.core.database import Base, get_engine, transaction
from fulfillment.domain.product import Product, ProductType
from fulfillment.repositories.product_repository import ProductRepository

# Registers the tables on Base.metadata
from fulfillment import models  # noqa: F401

logger = logging.getLogger(__name__)


def create_schema(bind=None) -> List[str]:
    """
    Create products, orders and order_items if they don't exist

    Returns:
        Names of the tables known to the metadata
    """
    bind = bind if bind is not None else get_engine()
    Base.metadata.create_all(bind=bind)
    tables = sorted(Base.metadata.tables.keys())
    logger.info(f"Schema ready: {', '.join(tables)}")
    return tables


def build_demo_products(today: date) -> List[Product]:
    """One product per interesting rule, dates relative to today"""
    return [
        Product(lead_time=15, available=30, type=ProductType.NORMAL.value, name="USB Cable"),
        Product(lead_time=10, available=0, type=ProductType.NORMAL.value, name="USB Dongle"),
        Product(lead_time=15, available=30, type=ProductType.EXPIRABLE.value, name="Butter",
                expiry_date=today + timedelta(days=26)),
        Product(lead_time=90, available=6, type=ProductType.EXPIRABLE.value, name="Milk",
                expiry_date=today - timedelta(days=2)),
        Product(lead_time=15, available=30, type=ProductType.SEASONAL.value, name="Watermelon",
                season_start_date=today - timedelta(days=2), season_end_date=today + timedelta(days=58)),
        Product(lead_time=15, available=30, type=ProductType.SEASONAL.value, name="Grapes",
                season_start_date=today + timedelta(days=180), season_end_date=today + timedelta(days=240)),
    ]


def seed_demo_order(today: date = None) -> int:
    """
    Insert the demo products and one order containing all of them

    Returns:
        ID of the created order
    """
    today = today or date.today()

    with transaction() as conn:
        repo = ProductRepository(conn)
        products = [repo.save(product) for product in build_demo_products(today)]

        cursor = conn.cursor(cursor_factory=RealDictCursor)
        try:
            cursor.execute("INSERT INTO orders DEFAULT VALUES RETURNING id")
            order_id = cursor.fetchone()['id']

            for product in products:
                cursor.execute(
                    "INSERT INTO order_items (order_id, product_id) VALUES (%s, %s)",
                    (order_id, product.id)
                )
        finally:
            cursor.close()

    logger.info(f"Seeded demo order {order_id} with {len(products)} products")
    return order_id
