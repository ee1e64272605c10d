"""
Pytest fixtures and configuration for Fulfillment Service tests

This file provides shared fixtures that can be used across all test modules.

Author: TM3
Date: 2026-10-16
"""
from datetime import date, timedelta
from unittest.mock import MagicMock, Mock

import pytest

from fulfillment.domain.product import Product
from fulfillment.services.notification_service import NotificationService


@pytest.fixture
def today():
    """Fixed evaluation date so date rules are deterministic"""
    return date(2026, 10, 16)


@pytest.fixture
def days(today):
    """
    Relative date helper: days(5) -> today + 5, days(-1) -> yesterday
    """
    def _days(offset: int) -> date:
        return today + timedelta(days=offset)
    return _days


@pytest.fixture
def make_product():
    """
    Product factory with sensible defaults (NORMAL, 10 units, no lead time)
    """
    def _make_product(**overrides) -> Product:
        data = {
            "id": 1,
            "name": "USB Cable",
            "available": 10,
            "lead_time": None,
            "type": "NORMAL",
        }
        data.update(overrides)
        return Product(**data)
    return _make_product


@pytest.fixture
def notification_service():
    """Notifier mock with the real method signatures"""
    return Mock(spec=NotificationService)


@pytest.fixture
def product_repository():
    """Product store mock whose save() echoes the product back"""
    repo = Mock()
    repo.save.side_effect = lambda product: product
    return repo


@pytest.fixture
def mock_db():
    """
    Mocked psycopg2 connection and cursor

    Returns:
        Tuple (connection, cursor); connection.cursor() returns the cursor
    """
    mock_conn = MagicMock()
    mock_cursor = MagicMock()
    mock_conn.cursor.return_value = mock_cursor
    return mock_conn, mock_cursor


@pytest.fixture
def sample_product_row():
    """
    Provides a products row as returned by RealDictCursor
    """
    return {
        "id": 7,
        "lead_time": 15,
        "available": 30,
        "type": "SEASONAL",
        "name": "Watermelon",
        "expiry_date": None,
        "season_start_date": date(2026, 10, 14),
        "season_end_date": date(2026, 12, 13),
    }
