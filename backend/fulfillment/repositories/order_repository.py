"""
Order Repository - Data Access Layer for Orders

Loads an order together with the products it contains.

Author: TM3
Date: 2026-10-16
"""
from typing import Optional

from psycopg2.extras import RealDictCursor

from fulfillment.core.database import get_db_connection_dict
from fulfillment.domain.order import Order
from fulfillment.repositories.product_repository import ProductRepository


class OrderRepository:
    """
    Repository for Order data access

    Same connection ownership rules as ProductRepository.
    """

    def __init__(self, conn=None):
        self.conn = conn

    def find_by_id(self, order_id: int) -> Optional[Order]:
        """
        Find order by ID with its items

        Items come back in whatever order the database returns them.

        Args:
            order_id: Internal order ID

        Returns:
            Order with its products or None if not found
        """
        conn = self.conn or get_db_connection_dict()
        cursor = conn.cursor(cursor_factory=RealDictCursor)

        try:
            cursor.execute("""
                SELECT id
                FROM orders
                WHERE id = %s
            """, (order_id,))

            row = cursor.fetchone()
            if not row:
                return None

            cursor.execute("""
                SELECT
                    p.id, p.lead_time, p.available, p.type, p.name,
                    p.expiry_date, p.season_start_date, p.season_end_date
                FROM order_items oi
                JOIN products p ON oi.product_id = p.id
                WHERE oi.order_id = %s
            """, (order_id,))

            items = [ProductRepository._map_row_to_product(item) for item in cursor.fetchall()]

            return Order(id=row['id'], items=items)

        finally:
            cursor.close()
            if self.conn is None:
                conn.close()
