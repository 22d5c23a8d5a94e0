"""
Custom exception hierarchy for the storefront catalog API.

Raised by use cases, repositories and request dependencies. Every exception
inherits from CatalogError, carries the HTTP status it maps to, and renders
its own response body (see the handler registered in main.create_application).
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# Third-party
# -----------------------------------------------------------------------------
from fastapi import status


@dataclass(frozen=True)
class FieldError:
    """One failed rule for one request field."""
    field: str
    message: str

    def to_dict(self) -> Dict[str, str]:
        return {"field": self.field, "message": self.message}


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class CatalogError(Exception):
    """Base exception for all catalog errors."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, errors: Optional[List[FieldError]] = None):
        super().__init__(message)
        self.message = message
        self.errors = list(errors or [])

    def to_body(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"message": self.message}
        if self.errors:
            body["errors"] = [error.to_dict() for error in self.errors]
        return body


# -----------------------------------------------------------------------------
# Authentication / authorization
# -----------------------------------------------------------------------------


class MissingCredentialError(CatalogError):
    """Raised when the request carries no auth token header."""
    status_code = status.HTTP_403_FORBIDDEN


class InvalidCredentialError(CatalogError):
    """Raised when the token fails verification or has expired."""
    status_code = status.HTTP_400_BAD_REQUEST


class ForbiddenError(CatalogError):
    """Raised when verified claims lack a required capability."""
    status_code = status.HTTP_401_UNAUTHORIZED


# -----------------------------------------------------------------------------
# Business rules
# -----------------------------------------------------------------------------


class ProductValidationError(CatalogError):
    """Raised when request fields fail validation. Always carries every field error."""
    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY

    def __init__(self, errors: List[FieldError], message: str = "Request fields are invalid"):
        super().__init__(message, errors)


class UnsupportedFileTypeError(CatalogError):
    """Raised by strict callers for uploads outside the accepted content types."""
    status_code = status.HTTP_415_UNSUPPORTED_MEDIA_TYPE


class FileTooLargeError(CatalogError):
    """Raised when an upload exceeds the configured size limit."""
    status_code = status.HTTP_413_REQUEST_ENTITY_TOO_LARGE


# -----------------------------------------------------------------------------
# Lookup / storage
# -----------------------------------------------------------------------------


class ProductNotFoundError(CatalogError):
    """Raised when no product matches the requested id."""
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, product_id: str):
        super().__init__(f"Product {product_id} not found")
        self.product_id = product_id


class PersistenceError(CatalogError):
    """Raised when the storage layer fails. The driver message is passed through."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
