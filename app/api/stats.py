from fastapi import APIRouter, Depends

from app.dependencies import get_product_service, get_user_service
from app.schemas.stats import StatsResponse
from app.services.product_service import ProductService
from app.services.user_service import UserService

router = APIRouter(prefix="/stats", tags=["Statistics"])


@router.get(
    "",
    response_model=StatsResponse,
    summary="Store statistics",
    description="Counts of users, products and products currently in stock."
)
def get_stats(
    users: UserService = Depends(get_user_service),
    products: ProductService = Depends(get_product_service)
):
    return StatsResponse(
        total_users=users.count(),
        total_products=products.count(),
        products_in_stock=len(products.get_in_stock()),
    )
