"""
Unit tests for OrderRepository

Author: TM3
Date: 2026-10-16
"""
from unittest.mock import patch

from fulfillment.domain.order import Order
from fulfillment.repositories.order_repository import OrderRepository


class TestOrderRepository:
    """Test OrderRepository methods"""

    @patch('fulfillment.repositories.order_repository.get_db_connection_dict')
    def test_find_by_id_returns_order_with_items(self, mock_get_conn, mock_db, sample_product_row):
        # Arrange
        mock_conn, mock_cursor = mock_db
        mock_get_conn.return_value = mock_conn
        mock_cursor.fetchone.return_value = {'id': 3}
        mock_cursor.fetchall.return_value = [
            sample_product_row,
            dict(sample_product_row, id=8, name="Grapes"),
        ]

        # Act
        order = OrderRepository().find_by_id(3)

        # Assert
        assert isinstance(order, Order)
        assert order.id == 3
        assert {item.name for item in order.items} == {"Watermelon", "Grapes"}
        assert mock_cursor.execute.call_count == 2
        mock_cursor.close.assert_called_once()
        mock_conn.close.assert_called_once()

    @patch('fulfillment.repositories.order_repository.get_db_connection_dict')
    def test_find_by_id_returns_none_when_not_found(self, mock_get_conn, mock_db):
        mock_conn, mock_cursor = mock_db
        mock_get_conn.return_value = mock_conn
        mock_cursor.fetchone.return_value = None

        order = OrderRepository().find_by_id(404)

        assert order is None
        # Items query is skipped
        mock_cursor.execute.assert_called_once()

    def test_order_without_items(self, mock_db):
        mock_conn, mock_cursor = mock_db
        mock_cursor.fetchone.return_value = {'id': 5}
        mock_cursor.fetchall.return_value = []

        order = OrderRepository(mock_conn).find_by_id(5)

        assert order.items == []
        mock_conn.close.assert_not_called()
