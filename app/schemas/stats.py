from pydantic import BaseModel


class StatsResponse(BaseModel):
    """Schema for store statistics."""
    total_users: int
    total_products: int
    products_in_stock: int
    message: str = "Application statistics retrieved successfully"
