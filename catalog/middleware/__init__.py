"""
Middleware package.
"""
from catalog.middleware.error_handler import ErrorHandlerMiddleware
from catalog.middleware.request_id import RequestIdMiddleware

__all__ = [
    "ErrorHandlerMiddleware",
    "RequestIdMiddleware",
]
