from decimal import Decimal
import logging

from app.models.product import Product
from app.models.user import User
from app.repositories.product_repository import ProductRepository
from app.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)

SAMPLE_USERS = [
    User(name="Alice Johnson", email="alice@example.com", role="ADMIN"),
    User(name="Bob Smith", email="bob@example.com", role="USER"),
    User(name="Charlie Brown", email="charlie@example.com", role="USER"),
]

SAMPLE_PRODUCTS = [
    Product(name="Laptop", description="High-performance laptop", price=Decimal("999.99"), stock=15),
    Product(name="Mouse", description="Wireless mouse", price=Decimal("29.99"), stock=50),
    Product(name="Keyboard", description="Mechanical keyboard", price=Decimal("89.99"), stock=30),
    Product(name="Monitor", description="27-inch 4K monitor", price=Decimal("399.99"), stock=20),
    Product(name="Headphones", description="Noise-canceling headphones", price=Decimal("199.99"), stock=25),
]


def seed_sample_data(users: UserRepository, products: ProductRepository) -> None:
    """Load the sample users and products into empty repositories."""
    for user in SAMPLE_USERS:
        users.save(user)
    for product in SAMPLE_PRODUCTS:
        products.save(product)
    logger.info(f"Seeded {users.count()} users and {products.count()} products")
