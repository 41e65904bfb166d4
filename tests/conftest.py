import os

import pytest
from decimal import Decimal
from fastapi.testclient import TestClient

# Tests start from empty stores
os.environ["SEED_SAMPLE_DATA"] = "false"

from app.main import app
from app.repositories.product_repository import ProductRepository
from app.repositories.user_repository import UserRepository
from app.services.product_service import ProductService
from app.services.user_service import UserService


@pytest.fixture(scope="function")
def client():
    """Create test client with fresh stores for each test."""
    # The lifespan builds new repositories on every startup
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture(scope="function")
def product_repository():
    return ProductRepository()


@pytest.fixture(scope="function")
def user_repository():
    return UserRepository()


@pytest.fixture(scope="function")
def product_service(product_repository):
    return ProductService(product_repository, max_price=Decimal("999999.99"))


@pytest.fixture(scope="function")
def user_service(user_repository):
    return UserService(user_repository, default_role="USER")
