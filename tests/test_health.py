"""Tests for health, statistics and startup wiring."""
from types import SimpleNamespace

from app.config import Settings
from app.dependencies import build_services


def test_health_check(client):
    """Test basic health check."""
    response = client.get("/api/v1/health/")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_readiness_check(client):
    response = client.get("/api/v1/health/ready")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ready"
    assert data["checks"]["user_count"] == 0


def test_root_endpoint(client):
    """Test root endpoint returns API info."""
    response = client.get("/")

    assert response.status_code == 200
    data = response.json()
    assert "name" in data
    assert "version" in data
    assert "docs" in data


def test_stats(client):
    client.post("/api/v1/users/", json={"name": "Ann", "email": "ann@x.com"})
    client.post("/api/v1/products/", json={"name": "Full", "price": "1", "stock": 2})
    client.post("/api/v1/products/", json={"name": "Empty", "price": "1", "stock": 0})

    response = client.get("/api/v1/stats")

    assert response.status_code == 200
    data = response.json()
    assert data["total_users"] == 1
    assert data["total_products"] == 2
    assert data["products_in_stock"] == 1


def test_stores_are_fresh_per_app_start(client):
    """Test records from an earlier test are not visible."""
    assert client.get("/api/v1/products/").json() == []


def test_build_services_seeds_sample_data():
    services = build_services(Settings(SEED_SAMPLE_DATA=True))

    assert services.users.count() == 3
    assert services.products.count() == 5
    assert services.users.get_by_email("ALICE@example.com").role == "ADMIN"
    assert services.products.search_by_name("laptop")[0].stock == 15


def test_build_services_without_seed():
    services = build_services(Settings(SEED_SAMPLE_DATA=False))

    assert services.users.count() == 0
    assert services.products.count() == 0


def test_readiness_reports_each_store(client):
    """Test a missing product store is reported on its own."""
    client.app.state.services = SimpleNamespace(users=client.app.state.services.users)

    response = client.get("/api/v1/health/ready")

    data = response.json()
    assert data["status"] == "not_ready"
    assert data["checks"]["users"] is True
    assert data["checks"]["products"] is False
    assert "product_count" not in data["checks"]
