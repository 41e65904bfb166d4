from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging

from app.config import get_settings
from app.dependencies import attach_services, build_services
from app.api import products, users, health, stats

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.
    """
    # Startup
    logger.info("Starting up application...")

    # Stores live for the lifetime of this app instance only
    logger.info("Creating in-memory stores...")
    attach_services(app, build_services(settings))
    logger.info("In-memory stores ready")

    yield

    # Shutdown
    logger.info("Shutting down application...")


# Create FastAPI application
app = FastAPI(
    title=settings.APP_NAME,
    description="""
    A small CRUD API over thread-safe in-memory stores for users and products:

    - **User Management**: CRUD with case-insensitive unique emails
    - **Product Management**: CRUD, name and price range search, stock adjustments
    - **Statistics**: user, product and in-stock counts

    ## Features

    ### Concurrency
    Each store guards its identifier counter and records with a single lock.
    Identifiers start at 1, only grow, and are never reused after a delete.
    Stock adjustments and email checks run as atomic read-modify-write steps.

    ### Validation
    Business rules are enforced before any write. Violations return 400,
    unknown identifiers return 404.

    State lives in process memory only and is lost on restart.
    """,
    version=settings.APP_VERSION,
    license_info={
        "name": "MIT",
        "url": "https://opensource.org/licenses/MIT"
    },
    lifespan=lifespan
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "PATCH"],
    allow_headers=["*"],
    max_age=3600,
)

# Include API routers
app.include_router(health.router, prefix="/api/v1")
app.include_router(stats.router, prefix="/api/v1")
app.include_router(users.router, prefix="/api/v1")
app.include_router(products.router, prefix="/api/v1")


@app.get("/", tags=["Root"])
def root():
    """Root endpoint with API information."""
    return {
        "name": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "docs": "/docs",
        "redoc": "/redoc",
        "health": "/api/v1/health"
    }
