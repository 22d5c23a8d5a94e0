"""Constants for domain model field names"""

from .product_fields import ProductFields
from .category_fields import CategoryFields
from .media_constants import (
    PRODUCT_IMAGE_FIELD,
    ALLOWED_IMAGE_MIME,
    IMAGE_NAMING_ORIGINAL,
    IMAGE_NAMING_UNIQUE,
    UPLOAD_CHUNK_SIZE,
)

__all__ = [
    "ProductFields",
    "CategoryFields",
    "PRODUCT_IMAGE_FIELD",
    "ALLOWED_IMAGE_MIME",
    "IMAGE_NAMING_ORIGINAL",
    "IMAGE_NAMING_UNIQUE",
    "UPLOAD_CHUNK_SIZE",
]
