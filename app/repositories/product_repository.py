from decimal import Decimal
from typing import List

from app.models.product import Product
from app.repositories.memory import InMemoryRepository


class ProductRepository(InMemoryRepository[Product]):
    """In-memory store for products with name, price and stock queries."""

    def find_by_name_containing(self, name: str) -> List[Product]:
        """Case-insensitive substring match on product name."""
        needle = name.lower()
        return self.filter(lambda product: needle in product.name.lower())

    def find_by_price_range(self, min_price: Decimal, max_price: Decimal) -> List[Product]:
        """Products priced between min_price and max_price, both inclusive."""
        return self.filter(lambda product: min_price <= product.price <= max_price)

    def find_in_stock(self) -> List[Product]:
        return self.filter(lambda product: product.in_stock)

    def find_out_of_stock(self) -> List[Product]:
        return self.filter(lambda product: not product.in_stock)
