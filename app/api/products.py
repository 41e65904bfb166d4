from decimal import Decimal
from fastapi import APIRouter, Depends, HTTPException, Query, status
from typing import Optional

from app.dependencies import get_product_service
from app.exceptions import InvalidArgumentError, NotFoundError
from app.services.product_service import ProductService
from app.schemas.product import (
    ProductCreate,
    ProductUpdate,
    ProductResponse,
)

router = APIRouter(prefix="/products", tags=["Products"])


@router.post(
    "/",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new product",
    description="Create a new product with name, optional description, price and initial stock."
)
def create_product(
    product_data: ProductCreate,
    service: ProductService = Depends(get_product_service)
):
    """
    Create a new product.

    - **name**: Product name (required)
    - **description**: Free-text description (optional)
    - **price**: Product price, must be non-negative (required)
    - **stock**: Initial stock quantity, must be non-negative (required)
    """
    try:
        return service.create(product_data)
    except InvalidArgumentError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )


@router.get(
    "/",
    response_model=list[ProductResponse],
    summary="List all products"
)
def list_products(service: ProductService = Depends(get_product_service)):
    """Get every product in the store."""
    return service.get_all()


@router.get(
    "/search",
    response_model=list[ProductResponse],
    summary="Search products",
    description="Search by price range when either bound is given, otherwise by name."
)
def search_products(
    name: Optional[str] = Query(None, description="Case-insensitive name fragment"),
    min_price: Optional[Decimal] = Query(None, description="Minimum price (inclusive)"),
    max_price: Optional[Decimal] = Query(None, description="Maximum price (inclusive)"),
    service: ProductService = Depends(get_product_service)
):
    """
    Search products.

    A blank name returns every product. An inverted price range is rejected.
    """
    if min_price is not None or max_price is not None:
        try:
            return service.get_by_price_range(min_price, max_price)
        except InvalidArgumentError as e:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=str(e)
            )

    return service.search_by_name(name)


@router.get(
    "/instock",
    response_model=list[ProductResponse],
    summary="List products in stock"
)
def list_in_stock(service: ProductService = Depends(get_product_service)):
    return service.get_in_stock()


@router.get(
    "/outofstock",
    response_model=list[ProductResponse],
    summary="List products out of stock"
)
def list_out_of_stock(service: ProductService = Depends(get_product_service)):
    return service.get_out_of_stock()


@router.get(
    "/{product_id}",
    response_model=ProductResponse,
    summary="Get product by ID"
)
def get_product(
    product_id: int,
    service: ProductService = Depends(get_product_service)
):
    """Get a product by ID."""
    product = service.get_by_id(product_id)

    if not product:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Product not found with id: {product_id}"
        )

    return product


@router.put(
    "/{product_id}",
    response_model=ProductResponse,
    summary="Update a product",
    description="Update product details. Only provided fields will be updated."
)
def update_product(
    product_id: int,
    product_data: ProductUpdate,
    service: ProductService = Depends(get_product_service)
):
    """
    Update a product.

    Partial updates are supported - only include fields you want to change.
    """
    try:
        return service.update(product_id, product_data)
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )
    except InvalidArgumentError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )


@router.patch(
    "/{product_id}/stock",
    response_model=ProductResponse,
    summary="Adjust product stock",
    description="Positive quantity adds stock, negative quantity removes it."
)
def adjust_stock(
    product_id: int,
    quantity: int = Query(..., description="Signed stock change"),
    service: ProductService = Depends(get_product_service)
):
    """
    Adjust stock of a product.

    Concurrent adjustments of the same product are serialized, so none is
    lost. A decrease larger than the available stock returns 400 and leaves
    the stock unchanged.
    """
    try:
        return service.adjust_stock(product_id, quantity)
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )
    except InvalidArgumentError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a product"
)
def delete_product(
    product_id: int,
    service: ProductService = Depends(get_product_service)
):
    """Delete a product."""
    try:
        service.delete(product_id)
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )

    return None
