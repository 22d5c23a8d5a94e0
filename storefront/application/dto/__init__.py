from .product_dto import (
    CategoryResponse,
    ProductResponse,
    DeleteProductResponse,
    FieldErrorResponse,
    ErrorResponse,
)

__all__ = [
    "CategoryResponse",
    "ProductResponse",
    "DeleteProductResponse",
    "FieldErrorResponse",
    "ErrorResponse",
]
