from fastapi import APIRouter, Request

router = APIRouter(prefix="/health", tags=["Health"])


@router.get(
    "/",
    summary="Health check",
    description="Basic health check endpoint."
)
def health_check():
    """Simple health check."""
    return {"status": "healthy"}


@router.get(
    "/ready",
    summary="Readiness check",
    description="Check that the in-memory stores have been created."
)
def readiness_check(request: Request):
    """
    Readiness check for the stores.

    Returns whether each store is available and how many records it holds.
    """
    services = getattr(request.app.state, "services", None)

    users = getattr(services, "users", None)
    products = getattr(services, "products", None)

    checks = {
        "users": users is not None,
        "products": products is not None,
    }
    if users is not None:
        checks["user_count"] = users.count()
    if products is not None:
        checks["product_count"] = products.count()

    all_healthy = all([checks["users"], checks["products"]])

    return {
        "status": "ready" if all_healthy else "not_ready",
        "checks": checks
    }
