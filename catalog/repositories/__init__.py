"""
Repository package for data access layer.
"""
from catalog.repositories.asset import AssetRepository
from catalog.repositories.base import BaseRepository
from catalog.repositories.price import PriceRepository
from catalog.repositories.product import ProductRepository

__all__ = [
    "BaseRepository",
    "ProductRepository",
    "PriceRepository",
    "AssetRepository",
]
