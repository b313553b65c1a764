"""
Services package for catalog business logic.
"""
from catalog.services.catalog_service import CatalogService, ProductPage

__all__ = [
    "CatalogService",
    "ProductPage",
]
