import pytest

from rest_framework.test import APIClient

from modules.core.store import get_store
from modules.dishes.models import Dish
from modules.orders.models import Order, OrderLine


@pytest.fixture(autouse=True)
def _empty_store():
    """Every test starts and ends with empty collections."""
    store = get_store()
    store.clear()
    yield
    store.clear()


@pytest.fixture()
def store():
    return get_store()


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid


@pytest.fixture()
def make_dish(store):
    """Insert a dish straight into the store."""

    def _make(**overrides) -> Dish:
        defaults = {
            "id": store.dishes.next_id(),
            "name": "Taco",
            "description": "Spicy",
            "price": 5,
            "image_url": "x.png",
        }
        defaults.update(overrides)
        return store.dishes.insert(Dish(**defaults))

    return _make


@pytest.fixture()
def make_order(store):
    """Insert an order straight into the store."""

    def _make(**overrides) -> Order:
        defaults = {
            "id": store.orders.next_id(),
            "deliver_to": "308 Negra Arroyo Lane",
            "mobile_number": "(505) 143-3369",
            "status": "pending",
            "dishes": [OrderLine(dishId="d1", quantity=2)],
        }
        defaults.update(overrides)
        return store.orders.insert(Order(**defaults))

    return _make
