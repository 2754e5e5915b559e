"""
Application error types and their HTTP mapping

Repositories raise ValidationError or StorageError; the API layer turns
both into the same 500 response with an {"error": message} body.
"""
import logging
from typing import List, Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class InventoryError(Exception):
    """Base exception for inventory application errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class ValidationError(InventoryError):
    """A required field was missing or empty on create/update."""

    def __init__(self, message: str = "Missing required fields", fields: Optional[List[str]] = None):
        self.fields = fields or []
        super().__init__(message)


class StorageError(InventoryError):
    """The database reported a failure (connectivity, constraint, bad statement...)."""


async def inventory_error_handler(request: Request, exc: InventoryError) -> JSONResponse:
    """Map any InventoryError to a 500 with the error message."""
    logger.warning(
        f"{type(exc).__name__} on {request.method} {request.url.path}: {exc.message}"
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": exc.message},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register exception handlers on the FastAPI app."""
    app.add_exception_handler(InventoryError, inventory_error_handler)
