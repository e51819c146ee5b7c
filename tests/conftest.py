import pytest
from fastapi.testclient import TestClient

from inventory_app.config import Settings
from inventory_app.ids import IdGenerator
from inventory_app.main import create_app
from inventory_app.services.product_store import ProductStore
from inventory_app.services.user_store import UserStore


@pytest.fixture()
def id_generator():
    return IdGenerator()


@pytest.fixture()
def user_store(id_generator):
    return UserStore(id_generator)


@pytest.fixture()
def product_store(id_generator):
    return ProductStore(id_generator)


@pytest.fixture()
def client():
    """Client for a freshly seeded app; nothing is shared between tests."""
    app = create_app(Settings(seed_data=True, debug=False))
    return TestClient(app)


@pytest.fixture()
def empty_client(user_store, product_store):
    app = create_app(Settings(seed_data=False, debug=False), user_store=user_store, product_store=product_store)
    return TestClient(app)
