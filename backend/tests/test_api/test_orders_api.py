"""
API tests for order processing endpoints

The order service is replaced through FastAPI dependency overrides.

Author: TM3
Date: 2026-10-16
"""
from unittest.mock import MagicMock, Mock, patch

import psycopg2
import pytest
from fastapi.testclient import TestClient

from fulfillment.api.orders import get_order_service
from fulfillment.core.exceptions import InvalidProductTypeError, OrderNotFoundError
from fulfillment.domain.order import ProcessOrderResponse
from fulfillment.main import app


@pytest.fixture
def order_service():
    return Mock()


@pytest.fixture
def client(order_service):
    app.dependency_overrides[get_order_service] = lambda: order_service
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestProcessOrderEndpoint:

    def test_process_order_returns_order_id(self, client, order_service):
        order_service.process_order.return_value = ProcessOrderResponse(id=42)

        response = client.post("/orders/42/processOrder")

        assert response.status_code == 200
        assert response.json() == {"id": 42}
        order_service.process_order.assert_called_once_with(42)

    def test_unknown_order_returns_404(self, client, order_service):
        order_service.process_order.side_effect = OrderNotFoundError(999)

        response = client.post("/orders/999/processOrder")

        assert response.status_code == 404
        assert response.json()["detail"] == "Order not found: 999"

    def test_invalid_product_type_returns_422(self, client, order_service):
        order_service.process_order.side_effect = InvalidProductTypeError("DIGITAL")

        response = client.post("/orders/1/processOrder")

        assert response.status_code == 422
        assert "DIGITAL" in response.json()["detail"]

    def test_persistence_failure_returns_500(self, client, order_service):
        order_service.process_order.side_effect = psycopg2.OperationalError("server closed the connection")

        response = client.post("/orders/1/processOrder")

        assert response.status_code == 500
        assert response.json()["detail"].startswith("Error processing order:")

    def test_non_numeric_order_id_is_rejected(self, client, order_service):
        response = client.post("/orders/abc/processOrder")

        assert response.status_code == 422
        order_service.process_order.assert_not_called()


class TestServiceEndpoints:

    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["status"] == "online"

    @patch('fulfillment.main.get_db_connection_with_retry')
    def test_health_connected(self, mock_connect, client):
        mock_connect.return_value = MagicMock()

        body = client.get("/health").json()

        assert body["status"] == "healthy"
        assert body["database"]["status"] == "connected"

    @patch('fulfillment.main.get_db_connection_with_retry')
    def test_health_degraded_when_database_is_down(self, mock_connect, client):
        mock_connect.side_effect = psycopg2.OperationalError("could not connect")

        body = client.get("/health").json()

        assert body["status"] == "degraded"
        assert body["database"]["status"] == "disconnected"
        assert "could not connect" in body["database"]["error"]
