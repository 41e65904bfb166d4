from dataclasses import dataclass

from fastapi import FastAPI, Request

from app.config import Settings
from app.repositories.product_repository import ProductRepository
from app.repositories.user_repository import UserRepository
from app.seed import seed_sample_data
from app.services.product_service import ProductService
from app.services.user_service import UserService


@dataclass
class Services:
    """Services owned by one application instance."""
    users: UserService
    products: ProductService


def build_services(settings: Settings) -> Services:
    """
    Create fresh repositories and the services that own them.

    Each call returns an independent store, so separate app instances
    (or test runs) never share state.
    """
    users = UserRepository()
    products = ProductRepository()

    if settings.SEED_SAMPLE_DATA:
        seed_sample_data(users, products)

    return Services(
        users=UserService(users, default_role=settings.DEFAULT_USER_ROLE),
        products=ProductService(products, max_price=settings.MAX_PRICE_CEILING),
    )


def attach_services(app: FastAPI, services: Services) -> None:
    app.state.services = services


def get_user_service(request: Request) -> UserService:
    """Dependency returning the user service of the running app."""
    return request.app.state.services.users


def get_product_service(request: Request) -> ProductService:
    """Dependency returning the product service of the running app."""
    return request.app.state.services.products
