"""
Global error handling middleware.

Pure ASGI middleware (not BaseHTTPMiddleware) so the session generator
dependency keeps its cleanup semantics.
"""
import json

from fastapi import HTTPException
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from catalog.core.exceptions import CatalogError, DatabaseUnavailableError
from catalog.core.logging import get_logger

logger = get_logger(__name__)


class ErrorHandlerMiddleware:
    """
    Catches unhandled exceptions and answers with a JSON error body.

    HTTPException is left to FastAPI. Catalog errors that escape a router
    map to 404 (or 503 for a missing database); anything else is a 500.
    """

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        response_started = False

        async def send_wrapper(message: Message) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        except Exception as e:
            if isinstance(e, HTTPException):
                raise

            if response_started:
                # Headers already sent, can't change the response
                logger.exception(
                    "Unhandled exception after response started",
                    error=str(e),
                    path=scope.get("path", "unknown"),
                )
                raise

            if isinstance(e, DatabaseUnavailableError):
                status_code, detail = 503, str(e)
            elif isinstance(e, CatalogError):
                status_code, detail = 404, str(e)
            else:
                status_code, detail = 500, "Internal server error"
                logger.exception(
                    "Unhandled exception",
                    error=str(e),
                    path=scope.get("path", "unknown"),
                )

            body = json.dumps({
                "detail": detail,
                "type": type(e).__name__,
            }).encode("utf-8")

            await send({
                "type": "http.response.start",
                "status": status_code,
                "headers": [
                    [b"content-type", b"application/json"],
                    [b"content-length", str(len(body)).encode()],
                ],
            })
            await send({
                "type": "http.response.body",
                "body": body,
            })
