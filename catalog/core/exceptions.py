"""
Catalog domain exceptions.
"""


class CatalogError(Exception):
    """Base class for catalog lookup failures."""


class DatabaseUnavailableError(CatalogError):
    """Raised when no database session could be provided."""

    def __init__(self) -> None:
        super().__init__("Database unavailable")


class ProductNotFoundError(CatalogError):
    """Raised when a product is missing or soft-deleted."""

    def __init__(self, product_id: int) -> None:
        self.product_id = product_id
        super().__init__(f"Product {product_id} not found")


class ImageNotFoundError(CatalogError):
    """Raised when a product has no image on any live variant."""

    def __init__(self, product_id: int) -> None:
        self.product_id = product_id
        super().__init__(f"No image for product {product_id}")
