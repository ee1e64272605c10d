"""
Product Repository - Data Access Layer for Products

Handles all database queries for products and returns Product domain models.

Author: TM3
Date: 2026-10-16
"""
from typing import Optional

from psycopg2.extras import RealDictCursor

from fulfillment.core.database import get_db_connection_dict
from fulfillment.domain.product import Product

PRODUCT_COLUMNS = """
    id, lead_time, available, type, name,
    expiry_date, season_start_date, season_end_date
"""


class ProductRepository:
    """
    Repository for Product data access

    All SQL queries for products are centralized here.

    When built with a connection, every statement runs on it and the caller
    owns commit/rollback. Without one, each call opens, commits and closes
    its own connection.
    """

    def __init__(self, conn=None):
        self.conn = conn

    @staticmethod
    def _map_row_to_product(row: dict) -> Product:
        """Map a products row to the Product domain model"""
        return Product(
            id=row['id'],
            lead_time=row['lead_time'],
            available=row['available'],
            type=row['type'],
            name=row['name'],
            expiry_date=row.get('expiry_date'),
            season_start_date=row.get('season_start_date'),
            season_end_date=row.get('season_end_date')
        )

    def find_by_id(self, product_id: int) -> Optional[Product]:
        """
        Find product by ID

        Args:
            product_id: Internal product ID

        Returns:
            Product or None if not found
        """
        conn = self.conn or get_db_connection_dict()
        cursor = conn.cursor(cursor_factory=RealDictCursor)

        try:
            cursor.execute(f"""
                SELECT {PRODUCT_COLUMNS}
                FROM products
                WHERE id = %s
            """, (product_id,))

            row = cursor.fetchone()
            if not row:
                return None

            return self._map_row_to_product(row)

        finally:
            cursor.close()
            if self.conn is None:
                conn.close()

    def save(self, product: Product) -> Product:
        """
        Persist the full product state

        Inserts when the product has no ID yet, otherwise overwrites the
        row with the same ID (insert-or-update, so saving twice is harmless).

        Args:
            product: Product to persist

        Returns:
            The same product, with its ID set
        """
        conn = self.conn or get_db_connection_dict()
        cursor = conn.cursor(cursor_factory=RealDictCursor)

        params = (
            product.lead_time,
            product.available,
            product.type,
            product.name,
            product.expiry_date,
            product.season_start_date,
            product.season_end_date,
        )

        try:
            if product.id is None:
                cursor.execute("""
                    INSERT INTO products (
                        lead_time, available, type, name,
                        expiry_date, season_start_date, season_end_date
                    ) VALUES (%s, %s, %s, %s, %s, %s, %s)
                    RETURNING id
                """, params)
            else:
                cursor.execute("""
                    INSERT INTO products (
                        id, lead_time, available, type, name,
                        expiry_date, season_start_date, season_end_date
                    ) VALUES (%s, %s, %s, %s, %s, %s, %s, %s)
                    ON CONFLICT (id) DO UPDATE SET
                        lead_time = EXCLUDED.lead_time,
                        available = EXCLUDED.available,
                        type = EXCLUDED.type,
                        name = EXCLUDED.name,
                        expiry_date = EXCLUDED.expiry_date,
                        season_start_date = EXCLUDED.season_start_date,
                        season_end_date = EXCLUDED.season_end_date
                    RETURNING id
                """, (product.id,) + params)

            product.id = cursor.fetchone()['id']

            if self.conn is None:
                conn.commit()

            return product

        finally:
            cursor.close()
            if self.conn is None:
                conn.close()
