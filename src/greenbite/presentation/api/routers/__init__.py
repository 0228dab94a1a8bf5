from greenbite.presentation.api.routers.auth import router as auth_router
from greenbite.presentation.api.routers.cart import router as cart_router
from greenbite.presentation.api.routers.categories import router as categories_router
from greenbite.presentation.api.routers.orders import router as orders_router
from greenbite.presentation.api.routers.product_details import (
    router as product_details_router,
)
from greenbite.presentation.api.routers.products import router as products_router

__all__ = [
    "auth_router",
    "cart_router",
    "categories_router",
    "orders_router",
    "product_details_router",
    "products_router",
]
