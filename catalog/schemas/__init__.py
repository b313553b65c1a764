"""
Pydantic schemas package.
"""
from catalog.schemas.asset import ImageResponse, ProductImagesResponse
from catalog.schemas.product import (
    PaginatedProductsResponse,
    PriceResponse,
    ProductCountResponse,
    ProductResponse,
)

__all__ = [
    # Product
    "PriceResponse",
    "ProductResponse",
    "PaginatedProductsResponse",
    "ProductCountResponse",
    # Asset
    "ImageResponse",
    "ProductImagesResponse",
]
