from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Optional

from app.exceptions import InsufficientStockError


@dataclass(frozen=True)
class Product:
    """
    Product record representing an item available for sale.

    Attributes:
        id: Identifier assigned by the repository (None until saved)
        name: Product name
        description: Optional free-text description
        price: Product price (must be non-negative)
        stock: Available quantity (must be non-negative)
    """
    name: str
    price: Decimal
    stock: Optional[int] = 0
    description: Optional[str] = None
    id: Optional[int] = None

    @property
    def in_stock(self) -> bool:
        return self.stock is not None and self.stock > 0

    def increase_stock(self, quantity: int) -> "Product":
        """Return a copy with stock raised by quantity (absent stock counts as zero)."""
        return replace(self, stock=(self.stock or 0) + quantity)

    def decrease_stock(self, quantity: int) -> "Product":
        """
        Return a copy with stock lowered by quantity.

        Raises:
            InsufficientStockError: If current stock is lower than quantity
        """
        current = self.stock or 0
        if current < quantity:
            raise InsufficientStockError(available=current, requested=quantity)
        return replace(self, stock=current - quantity)

    def __repr__(self):
        return f"<Product(id={self.id}, name='{self.name}', stock={self.stock})>"
