from dataclasses import replace
from decimal import Decimal
from typing import Optional, List
import logging

from app.config import get_settings
from app.exceptions import InvalidArgumentError, NotFoundError
from app.models.product import Product
from app.repositories.product_repository import ProductRepository
from app.schemas.product import ProductCreate, ProductUpdate
from app.utils.text import is_blank

logger = logging.getLogger(__name__)


class ProductService:
    """
    Service class for Product operations.

    This service handles:
    - Creating, reading, updating and deleting products
    - Name and price range search
    - Stock adjustments

    Every rule is checked before the repository is touched, so a rejected
    request leaves the store unchanged.

    STOCK ADJUSTMENT STRATEGY:
    ==========================
    adjust_stock reads the product, computes the new stock and saves it
    while holding the repository lock. Two concurrent adjustments of the
    same product therefore serialize: the second one reads the stock the
    first one wrote, and no update is lost. When a decrease would take the
    stock below zero the call fails and nothing is written.
    """

    ENTITY = "Product"

    def __init__(self, repository: ProductRepository, max_price: Optional[Decimal] = None):
        self.repository = repository
        self.max_price = max_price if max_price is not None else get_settings().MAX_PRICE_CEILING

    def create(self, product_data: ProductCreate) -> Product:
        """
        Create a new product.

        Args:
            product_data: Product creation data

        Returns:
            Created product with its identifier

        Raises:
            InvalidArgumentError: If name is blank or price/stock are missing or negative
        """
        if is_blank(product_data.name):
            raise InvalidArgumentError("Product name cannot be empty")
        self._validate_price(product_data.price, required=True)
        self._validate_stock(product_data.stock, required=True)

        product = self.repository.save(
            Product(
                name=product_data.name,
                description=product_data.description,
                price=product_data.price,
                stock=product_data.stock,
            )
        )
        logger.info(f"Product #{product.id} created: {product.name}")
        return product

    def get_by_id(self, product_id: int) -> Optional[Product]:
        """Get a product by ID, or None if not found."""
        return self.repository.find_by_id(product_id)

    def get_all(self) -> List[Product]:
        return self.repository.find_all()

    def search_by_name(self, name: Optional[str]) -> List[Product]:
        """Case-insensitive name search. A blank query returns every product."""
        if is_blank(name):
            return self.get_all()
        return self.repository.find_by_name_containing(name)

    def get_by_price_range(
        self,
        min_price: Optional[Decimal] = None,
        max_price: Optional[Decimal] = None
    ) -> List[Product]:
        """
        Get products priced within an inclusive range.

        Args:
            min_price: Lower bound, zero when omitted
            max_price: Upper bound, the configured ceiling when omitted

        Raises:
            InvalidArgumentError: If min_price is greater than max_price
        """
        if min_price is None:
            min_price = Decimal("0")
        if max_price is None:
            max_price = self.max_price
        if min_price > max_price:
            raise InvalidArgumentError("Min price cannot be greater than max price")
        return self.repository.find_by_price_range(min_price, max_price)

    def get_in_stock(self) -> List[Product]:
        return self.repository.find_in_stock()

    def get_out_of_stock(self) -> List[Product]:
        return self.repository.find_out_of_stock()

    def count(self) -> int:
        return self.repository.count()

    def update(self, product_id: int, product_data: ProductUpdate) -> Product:
        """
        Update an existing product.

        Only supplied fields are changed. A blank name is treated as omitted,
        while description is overwritten whenever it is not None.

        Raises:
            NotFoundError: If the product doesn't exist
            InvalidArgumentError: If price or stock is negative
        """
        with self.repository.atomic():
            product = self.repository.find_by_id(product_id)
            if product is None:
                raise NotFoundError(self.ENTITY, product_id)

            changes = {}
            if not is_blank(product_data.name):
                changes["name"] = product_data.name
            if product_data.description is not None:
                changes["description"] = product_data.description
            if product_data.price is not None:
                self._validate_price(product_data.price)
                changes["price"] = product_data.price
            if product_data.stock is not None:
                self._validate_stock(product_data.stock)
                changes["stock"] = product_data.stock

            product = self.repository.save(replace(product, **changes))

        logger.info(f"Product #{product_id} updated: {sorted(changes)}")
        return product

    def delete(self, product_id: int) -> bool:
        """
        Delete a product.

        Raises:
            NotFoundError: If the product doesn't exist
        """
        if not self.repository.delete_by_id(product_id):
            raise NotFoundError(self.ENTITY, product_id)
        logger.info(f"Product #{product_id} deleted")
        return True

    def adjust_stock(self, product_id: int, quantity: int) -> Product:
        """
        Increase (positive quantity) or decrease (negative quantity) stock.

        Raises:
            NotFoundError: If the product doesn't exist
            InsufficientStockError: If a decrease exceeds the available stock
        """
        with self.repository.atomic():
            product = self.repository.find_by_id(product_id)
            if product is None:
                raise NotFoundError(self.ENTITY, product_id)

            if quantity > 0:
                product = product.increase_stock(quantity)
            elif quantity < 0:
                try:
                    product = product.decrease_stock(abs(quantity))
                except InvalidArgumentError as e:
                    logger.warning(f"Stock adjustment rejected for Product #{product_id}: {e}")
                    raise
            else:
                return product

            product = self.repository.save(product)

        logger.info(f"Product #{product_id} stock adjusted by {quantity}, now {product.stock}")
        return product

    def _validate_price(self, price: Optional[Decimal], required: bool = False) -> None:
        if price is None:
            if required:
                raise InvalidArgumentError("Product price is required")
            return
        if price < 0:
            raise InvalidArgumentError("Product price must be a positive value")

    def _validate_stock(self, stock: Optional[int], required: bool = False) -> None:
        if stock is None:
            if required:
                raise InvalidArgumentError("Product stock is required")
            return
        if stock < 0:
            raise InvalidArgumentError("Product stock cannot be negative")
