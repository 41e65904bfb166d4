from pydantic import BaseModel, Field, ConfigDict, computed_field
from decimal import Decimal
from typing import Optional


class ProductCreate(BaseModel):
    """
    Schema for creating a new product.

    Fields are optional at the transport level; required-ness and bounds
    are enforced by ProductService so that violations surface as 400s.
    """
    name: Optional[str] = Field(None, max_length=255, description="Product name")
    description: Optional[str] = Field(None, description="Product description")
    price: Optional[Decimal] = Field(None, description="Product price (must be non-negative)")
    stock: Optional[int] = Field(None, description="Available stock (must be non-negative)")


class ProductUpdate(BaseModel):
    """Schema for updating an existing product. Omitted or blank fields keep their value."""
    name: Optional[str] = Field(None, max_length=255, description="Product name")
    description: Optional[str] = Field(None, description="Product description")
    price: Optional[Decimal] = Field(None, description="Product price")
    stock: Optional[int] = Field(None, description="Available stock")


class ProductResponse(BaseModel):
    """Schema for product response including all fields."""
    id: int
    name: str
    description: Optional[str] = None
    price: Decimal
    stock: Optional[int] = None

    model_config = ConfigDict(from_attributes=True)

    @computed_field
    @property
    def in_stock(self) -> bool:
        return self.stock is not None and self.stock > 0
