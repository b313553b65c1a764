"""
Core package containing configuration, database, exceptions, and logging.
"""
from catalog.core.config import settings
from catalog.core.database import Base, DbSession, get_db_session
from catalog.core.exceptions import (
    CatalogError,
    DatabaseUnavailableError,
    ImageNotFoundError,
    ProductNotFoundError,
)
from catalog.core.logging import configure_logging, get_logger

__all__ = [
    "settings",
    "Base",
    "DbSession",
    "get_db_session",
    "configure_logging",
    "get_logger",
    "CatalogError",
    "DatabaseUnavailableError",
    "ImageNotFoundError",
    "ProductNotFoundError",
]
