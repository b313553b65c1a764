"""
API routers package.
"""
from catalog.routers.health import router as health_router
from catalog.routers.products import router as products_router

__all__ = [
    "health_router",
    "products_router",
]
