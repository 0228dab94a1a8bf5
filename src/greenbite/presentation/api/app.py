"""FastAPI application factory.

Creates and configures the FastAPI application with all routers,
middleware, and exception handlers.

All API endpoints live under the /api prefix. The health check and the
info endpoint stay at the root.
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from greenbite.presentation.api.dependencies import create_tables, get_engine
from greenbite.presentation.api.exception_handlers import setup_exception_handlers
from greenbite.presentation.api.routers import (
    auth_router,
    cart_router,
    categories_router,
    orders_router,
    product_details_router,
    products_router,
)
from greenbite.presentation.api.schemas.common import HealthResponse
from greenbite_config.settings import Settings, get_settings


@lru_cache(maxsize=1)
def _configure_logging() -> None:
    """Configure application logging.

    Sets up logging for the greenbite packages with:
    - Console output with timestamps and module names
    - Configurable log level for greenbite modules (from settings)
    - WARNING level for noisy third-party libraries
    """
    settings = get_settings()
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    logging.getLogger("greenbite").setLevel(log_level)
    logging.getLogger("greenbite_identity").setLevel(log_level)

    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
    logging.getLogger("asyncpg").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"
API_PREFIX = "/api"

OPENAPI_TAGS = [
    {
        "name": "Authentication",
        "description": """Accounts, sessions and password recovery.

**Sessions:**
- Signup and signin set an HttpOnly `token` cookie
- `Authorization: Bearer <token>` is accepted as a fallback
- Tokens are stateless and expire after `JWT_EXPIRE_DAYS`

**Password reset:**
1. `forgot-password` emails a 6-digit code (valid 10 minutes)
2. `verify-code` checks the code
3. `reset-password` sets the new password and discards the code
""",
    },
    {
        "name": "Categories",
        "description": "Product categories. Creating one requires the ADMIN role.",
    },
    {
        "name": "Products",
        "description": "Product catalog. Creating a product requires the ADMIN role.",
    },
    {
        "name": "Cart",
        "description": """The signed-in user's shopping cart.

Adding a product that is already in the cart increases its quantity.
""",
    },
    {
        "name": "Orders",
        "description": "The signed-in user's order history, newest first.",
    },
    {
        "name": "Health",
        "description": "Service health monitoring endpoints.",
    },
    {
        "name": "Info",
        "description": "API information and discovery.",
    },
]


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    logger.info("Starting GreenBite API v%s...", API_VERSION)
    engine = get_engine()
    try:
        await create_tables(engine)
    except ConnectionRefusedError:
        logger.critical("Could not connect to the database.")
        raise SystemExit(1) from None
    yield

    logger.info("Shutting down GreenBite API...")
    await engine.dispose()
    logger.info("Database connections closed")


def create_api_router() -> APIRouter:
    """Create the API router with all endpoints mounted."""
    api_router = APIRouter()

    api_router.include_router(auth_router, prefix="/auth", tags=["Authentication"])
    api_router.include_router(
        categories_router,
        prefix="/categories",
        tags=["Categories"],
    )
    api_router.include_router(products_router, prefix="/products", tags=["Products"])
    api_router.include_router(
        product_details_router,
        prefix="/productdetails",
        tags=["Products"],
    )
    api_router.include_router(cart_router, prefix="/cart", tags=["Cart"])
    api_router.include_router(orders_router, prefix="/orders", tags=["Orders"])

    return api_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override for testing.

    Returns
    -------
    Configured FastAPI application instance.
    """
    _configure_logging()

    if settings is None:
        settings = get_settings()

    app_name = settings.app_name

    app = FastAPI(
        title=f"{app_name} API",
        description="Online grocery shop: accounts, catalog, cart and orders.",
        version=API_VERSION,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )

    # Credentials are required for the session cookie
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_exception_handlers(app)

    app.include_router(create_api_router(), prefix=API_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health_check() -> HealthResponse:
        """Health check endpoint for load balancers and monitoring."""
        return HealthResponse(status="healthy", version=API_VERSION)

    @app.get("/", tags=["Info"])
    async def root() -> dict:
        """API root endpoint with version information."""
        return {
            "name": f"{app_name} API",
            "version": API_VERSION,
            "docs": "/docs" if settings.api_debug else None,
            "api_base": API_PREFIX,
            "endpoints": {
                "health": "/health",
                "auth": f"{API_PREFIX}/auth",
                "categories": f"{API_PREFIX}/categories",
                "products": f"{API_PREFIX}/products",
                "cart": f"{API_PREFIX}/cart",
                "orders": f"{API_PREFIX}/orders",
            },
        }

    return app


# Application instance for uvicorn
app = create_app()
