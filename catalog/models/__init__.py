"""
SQLAlchemy models package.
All models are imported here so they register on the shared metadata.
"""
from catalog.models.asset import IMAGE_TYPE, VARIANT_VIEWABLE, Asset
from catalog.models.price import Price
from catalog.models.product import Product
from catalog.models.variant import Variant

__all__ = [
    "Product",
    "Variant",
    "Price",
    "Asset",
    "IMAGE_TYPE",
    "VARIANT_VIEWABLE",
]
